"""Parser for the ``pygmentize -L <category>`` listing layout."""

from __future__ import annotations

import re

# "* name[, name...]:" followed by an indented description line
_BLOCK_RE = re.compile(r"^\* (.*?):\r?\n *([^\r\n]*?)\r?$", re.MULTILINE)


def parse_list(text: str) -> dict[str, str]:
    """Map every listed name to its description.

    Names sharing one block each get their own key.  A name listed twice
    keeps the description of its last block.  Text without any matching
    block yields an empty dict.
    """
    listing: dict[str, str] = {}
    for m in _BLOCK_RE.finditer(text):
        description = m.group(2)
        for name in m.group(1).split(","):
            listing[name.strip()] = description
    return listing
