"""pygwrap – a thin wrapper around the pygmentize command-line tool.

Public API
----------
- Pygments(pygmentize="pygmentize", *, timeout=None)
    .highlight(code, lexer=None, formatter=None, options=None) -> str
    .get_css(style="default", selector=None) -> str
    .guess_lexer(file_name) -> str
    .get_lexers() / .get_formatters() / .get_styles() -> dict[str, str]
- parse_list(text) -> dict[str, str]
- ExecutionFailure, ExecutableNotFoundError
"""

from pygwrap.adapter import (  # noqa: F401
    DEFAULT_PYGMENTIZE,
    Pygments,
    build_highlight_args,
)
from pygwrap.errors import ExecutableNotFoundError, ExecutionFailure  # noqa: F401
from pygwrap.listing import parse_list  # noqa: F401
from pygwrap.process import ExecutionResult, Invocation  # noqa: F401
