from __future__ import annotations

import re

ID_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_id(text: str) -> str:
    """Spaces to hyphens, drop everything outside [A-Za-z0-9_-], then lower-case."""
    return ID_DISALLOWED_RE.sub("", text.replace(" ", "-")).lower()


class IdentifierRegistry:
    """Hands out heading ids that are unique within one document.

    The first heading with a given base id keeps it as is; repeats get
    ``base-1``, ``base-2`` and so on.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def assign(self, text: str) -> str:
        base = sanitize_id(text)
        if base in self._counts:
            self._counts[base] += 1
            return f"{base}-{self._counts[base]}"
        self._counts[base] = 0
        return base
