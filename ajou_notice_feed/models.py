"""Data models for the Ajou media department notice feed."""

from dataclasses import dataclass

PINNED_INDEX = -1


@dataclass(frozen=True)
class Notice:
    """Represents a single row of the department notice board.

    String fields are stored already HTML-escaped.
    """

    index: int
    title: str
    author: str
    category: str
    link: str
    expired_at: str

    @property
    def is_pinned(self) -> bool:
        return self.index == PINNED_INDEX

    @property
    def description(self) -> str:
        return f"[{self.category}] - {self.author} (~{self.expired_at})"
