"""Source positions attached to declarations and errors."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Position:
    """A (file, line, column) locator. `file` is None for models parsed from strings."""

    file: Optional[str]
    line: int
    column: int

    @classmethod
    def from_location(cls, location: dict) -> "Position":
        """Build from the dict returned by textX's `get_location()`."""
        return cls(
            file=location.get("filename"),
            line=location.get("line") or 0,
            column=location.get("col") or 0,
        )

    def location(self) -> dict:
        """Keyword arguments accepted by textX exceptions."""
        return {"line": self.line, "col": self.column, "filename": self.file}

    def __str__(self):
        if self.file:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"
