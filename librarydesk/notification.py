"""Console notifications about library events."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Notification:
    """A short message reported to the operator."""

    message: str

    def __str__(self) -> str:
        return f"Notification: {self.message}"

    def send(self, file: TextIO | None = None) -> None:
        """Write the notification line to *file* (standard output by default)."""
        print(self, file=file if file is not None else sys.stdout)