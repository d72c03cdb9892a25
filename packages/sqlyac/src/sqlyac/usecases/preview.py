"""Statement preview use case for confirmation prompts."""

from __future__ import annotations


class StatementPreview:
    """Renders the first lines of a statement for a confirmation prompt.

    Attributes:
        max_lines: Number of lines shown before the summary line.
    """

    def __init__(self, max_lines: int = 5) -> None:
        if max_lines < 1:
            raise ValueError(f"max_lines must be at least 1, got: {max_lines}")
        self.max_lines = max_lines

    def render(self, text: str) -> str:
        """Return the preview.

        Statements longer than ``max_lines`` end with a
        ``" and <total> more lines..."`` line, where total is the full line
        count of the statement.
        """
        lines = text.split("\n")
        preview = "\n".join(lines[: self.max_lines])
        if len(lines) > self.max_lines:
            preview += f"\n and {len(lines)} more lines..."
        return preview
