from __future__ import annotations

import re
from collections.abc import Sequence
from urllib.parse import quote

from .types import PathSubstitutionError

__all__ = [
    "placeholders",
    "resolve_path",
]

_PLACEHOLDER_RE = re.compile(r"\{([^{}/]+)\}")


def placeholders(template: str) -> list[str]:
    """Return placeholder names in the order they appear in `template`."""
    return _PLACEHOLDER_RE.findall(template)


def resolve_path(template: str, values: Sequence[object] = ()) -> str:
    """Substitute `values` positionally into the placeholders of `template`.

    Rules:
    - Values are stringified and percent-encoded as a single path segment.
    - Empty values are rejected; they would collapse the segment.
    - The number of values must equal the number of placeholders.

    Raises:
        PathSubstitutionError: on a count mismatch or an empty value.
    """
    names = placeholders(template)
    if len(names) != len(values):
        raise PathSubstitutionError(template, expected=len(names), given=len(values))

    it = iter(values)

    def _sub(_: re.Match[str]) -> str:
        raw = str(next(it))
        if raw == "":
            raise PathSubstitutionError(
                template, expected=len(names), given=len(values), empty=True
            )
        return quote(raw, safe="")

    return _PLACEHOLDER_RE.sub(_sub, template)
