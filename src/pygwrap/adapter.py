"""Command adapter around the pygmentize executable."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pygwrap.listing import parse_list
from pygwrap.process import Invocation, get_output

DEFAULT_PYGMENTIZE = "pygmentize"


def build_highlight_args(
    lexer: str | None = None,
    formatter: str | None = None,
    options: Mapping[str, Any] | None = None,
) -> list[str]:
    """Build the ``highlight`` argument list.

    Order is fixed: ``-l LEXER`` (or ``-g`` to guess), then ``-f FORMATTER``
    when given, then one ``-P key=value`` per option in mapping order.
    """
    args = ["-l", lexer] if lexer else ["-g"]
    if formatter:
        args += ["-f", formatter]
    for key, value in (options or {}).items():
        args += ["-P", f"{key}={value}"]
    return args


class Pygments:
    """Runs pygmentize once per call and returns its parsed output.

    Every method raises :class:`~pygwrap.errors.ExecutionFailure` when the
    process exits non-zero or cannot be launched.
    """

    def __init__(
        self,
        pygmentize: str = DEFAULT_PYGMENTIZE,
        *,
        timeout: float | None = None,
    ) -> None:
        self._pygmentize = pygmentize
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"Pygments(pygmentize={self._pygmentize!r}, timeout={self._timeout!r})"

    @property
    def pygmentize(self) -> str:
        return self._pygmentize

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def highlight(
        self,
        code: str,
        lexer: str | None = None,
        formatter: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Highlight *code*, guessing the lexer from content if none is given."""
        invocation = self._invocation(
            *build_highlight_args(lexer, formatter, options)
        ).with_input(code)
        return self._get_output(invocation)

    def get_css(self, style: str = "default", selector: str | None = None) -> str:
        """Return the HTML formatter's style definitions for *style*."""
        invocation = self._invocation("-f", "html", "-S", style)
        if selector:
            invocation = invocation.add("-a", selector)
        return self._get_output(invocation)

    def guess_lexer(self, file_name: str) -> str:
        """Guess a lexer name from *file_name* alone; the file need not exist."""
        return self._get_output(self._invocation("-N", file_name)).strip()

    def get_lexers(self) -> dict[str, str]:
        return self._get_list("lexer")

    def get_formatters(self) -> dict[str, str]:
        return self._get_list("formatter")

    def get_styles(self) -> dict[str, str]:
        return self._get_list("style")

    def _get_list(self, category: str) -> dict[str, str]:
        return parse_list(self._get_output(self._invocation("-L", category)))

    def _invocation(self, *args: str) -> Invocation:
        return Invocation(self._pygmentize, tuple(args))

    def _get_output(self, invocation: Invocation) -> str:
        return get_output(invocation, timeout=self._timeout)
