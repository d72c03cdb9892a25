"""Console adapter for yes/no confirmation prompts."""

from __future__ import annotations

import sys
from typing import TextIO

from sqlyac.usecases.preview import StatementPreview

YES_ANSWERS = ("y", "yes")


class ConsolePrompt:
    """Asks for confirmation on stderr and reads the answer from stdin.

    Implements ConfirmationPromptPort. The prompt goes to stderr so that
    stdout carries nothing but the emitted statement.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stderr: TextIO | None = None,
        preview: StatementPreview | None = None,
    ) -> None:
        self._stdin = stdin
        self._stderr = stderr
        self._preview = preview or StatementPreview()

    def confirm(self, name: str, text: str) -> bool:
        """Show a preview of the statement and ask whether to emit it.

        Returns:
            True for ``y`` or ``yes`` (any case). Anything else, including
            end of input, is a no.
        """
        # Resolved per call so pytest's capsys/monkeypatch replacements apply
        stdin = self._stdin or sys.stdin
        stderr = self._stderr or sys.stderr

        stderr.write(f"\nquery: {name}\n")
        stderr.write(f"{self._preview.render(text)}\n")
        stderr.write("\nrun this query? (y/n): ")
        stderr.flush()

        answer = stdin.readline()
        return answer.strip().lower() in YES_ANSWERS
