"""Variable interpolation use case."""

from __future__ import annotations

import re
from typing import Mapping

# A reference is '@' followed by the longest run of word characters
_REFERENCE_RE = re.compile(r"@(\w+)")


class VariableInterpolator:
    """Substitutes ``@name`` references with values from a variable table.

    Values are inserted verbatim: no quoting is added or removed, nothing is
    escaped, and substituted text is never scanned again. References with no
    entry in the table are left as written.
    """

    def interpolate(self, text: str, variables: Mapping[str, str]) -> str:
        """Return ``text`` with every known ``@name`` replaced.

        Args:
            text: Statement text.
            variables: Variable name (without ``@``) to literal value.

        Returns:
            The interpolated text. Never raises for unknown references.
        """
        if not variables or "@" not in text:
            return text

        def replace(match: re.Match[str]) -> str:
            return variables.get(match.group(1), match.group(0))

        return _REFERENCE_RE.sub(replace, text)

    def references(self, text: str) -> list[str]:
        """Return referenced variable names in order of first appearance."""
        seen: dict[str, None] = {}
        for match in _REFERENCE_RE.finditer(text):
            seen.setdefault(match.group(1))
        return list(seen)

    def unresolved(self, text: str, variables: Mapping[str, str]) -> list[str]:
        """Return referenced names that have no entry in ``variables``."""
        return [name for name in self.references(text) if name not in variables]
