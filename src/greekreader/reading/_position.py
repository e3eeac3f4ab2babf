"""
Reading position tracking.

A Work is a sequence of books, each a sequence of lines. ReadingPosition
pages through a work one line at a time, crossing book boundaries and
clamping at either end, and saves the position after every move so that
the reader resumes where it left off.

Positions are persisted by PositionStore as a JSON object mapping work id
to ``"book,line"`` (both zero-based).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from greekreader.betacode import BetaCodeConverter

__all__ = ["Book", "Work", "Position", "PositionStore", "ReadingPosition"]

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Position:
    """Zero-based book and line indices."""

    book_index: int = 0
    line_index: int = 0

    def serialize(self) -> str:
        return f"{self.book_index},{self.line_index}"

    @classmethod
    def parse(cls, value: str) -> Position:
        """Parse ``"book,line"``; raises ValueError if malformed."""
        book, line = value.split(",")
        position = cls(int(book), int(line))
        if position.book_index < 0 or position.line_index < 0:
            raise ValueError(f"Negative reading position: {value!r}")
        return position


@dataclass
class Book:
    """One book of a work."""

    lines: List[str] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass
class Work:
    """A readable work: id, display metadata, and its books."""

    work_id: str
    books: List[Book]
    author: str = ""
    title: str = ""

    def __post_init__(self) -> None:
        if not self.books:
            raise ValueError(f"Work {self.work_id!r} has no books")
        for i, book in enumerate(self.books):
            if not book.lines:
                raise ValueError(f"Book {i + 1} of work {self.work_id!r} has no lines")

    @classmethod
    def from_text(cls, work_id: str, text: str, author: str = "", title: str = "") -> Work:
        """
        Build a work from plain text.

        Books are separated by one or more blank lines; each remaining line
        is one page.
        """
        books: List[Book] = []
        current: List[str] = []
        for line in text.split("\n"):
            if line.strip():
                current.append(line)
            elif current:
                books.append(Book(current))
                current = []
        if current:
            books.append(Book(current))
        return cls(work_id, books, author=author, title=title)

    @property
    def book_count(self) -> int:
        return len(self.books)

    def contains(self, position: Position) -> bool:
        if position.book_index >= len(self.books):
            return False
        return position.line_index < self.books[position.book_index].line_count


# =============================================================================
# Persistence
# =============================================================================


class PositionStore:
    """
    JSON file of saved reading positions, keyed by work id.

    A missing file means no work has been read yet. Entries that cannot be
    parsed are ignored with a warning.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable position store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring position store %s: not a JSON object", self.path)
            return {}
        return data

    def load(self, work_id: str) -> Optional[Position]:
        """Return the saved position for a work, or None."""
        value = self._read().get(work_id)
        if value is None:
            return None
        try:
            return Position.parse(value)
        except (AttributeError, ValueError) as e:
            logger.warning("Ignoring saved position %r for %s: %s", value, work_id, e)
            return None

    def save(self, work_id: str, position: Position) -> None:
        """Store the position for a work, keeping the other entries."""
        data = self._read()
        data[work_id] = position.serialize()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


# =============================================================================
# Reading Position
# =============================================================================


class ReadingPosition:
    """
    Page through a work and remember the reader's place.

    Example:
        >>> work = Work.from_text("iliad", "mh=nin a)/eide\\nqea/", "Homer", "Iliad")
        >>> reader = ReadingPosition(work)
        >>> reader.advance(1)
        >>> reader.reading_info()
        'Homer, Iliad 1.2'
    """

    def __init__(
        self,
        work: Work,
        store: Optional[PositionStore] = None,
        converter: Optional[BetaCodeConverter] = None,
    ) -> None:
        """
        Open a work at its last saved position.

        Args:
            work: The work to read
            store: Where positions are saved. None disables persistence.
            converter: Converter used by rendered_page()
        """
        self.work = work
        self.store = store
        self.converter = converter
        self._position = self._load_last_position()

    def _load_last_position(self) -> Position:
        if self.store is None:
            return Position()
        saved = self.store.load(self.work.work_id)
        if saved is None:
            return Position()
        if not self.work.contains(saved):
            logger.warning(
                "Saved position %s is outside work %s; starting at the beginning",
                saved.serialize(), self.work.work_id,
            )
            return Position()
        return saved

    @property
    def position(self) -> Position:
        return self._position

    @property
    def book_index(self) -> int:
        return self._position.book_index

    @property
    def line_index(self) -> int:
        return self._position.line_index

    def current_page(self) -> str:
        """Return the text of the current line."""
        book = self.work.books[self._position.book_index]
        return book.lines[self._position.line_index]

    def rendered_page(self) -> str:
        """Return the current line converted to Greek, if a converter is set."""
        page = self.current_page()
        if self.converter is None:
            return page
        return self.converter.convert_line(page)

    def advance(self, delta: int) -> None:
        """
        Move forward (positive) or backward (negative) by ``delta`` lines.

        Moving past the end of a book continues into the next one, and
        moving before its start continues from the end of the previous one.
        Past either end of the work, the position stops at the first or
        last line. The new position is saved.
        """
        books = self.work.books
        book = self._position.book_index
        line = self._position.line_index + delta

        while True:
            count = books[book].line_count
            if line >= count:
                if book + 1 >= len(books):
                    line = count - 1
                    break
                line -= count
                book += 1
            elif line < 0:
                if book == 0:
                    line = 0
                    break
                book -= 1
                line += books[book].line_count
            else:
                break

        self._position = Position(book, line)
        if self.store is not None:
            self.store.save(self.work.work_id, self._position)

    def reading_info(self) -> str:
        """Return ``"<author>, <title> <book>.<line>"`` with one-based numbers."""
        return "%s, %s %d.%d" % (
            self.work.author,
            self.work.title,
            self._position.book_index + 1,
            self._position.line_index + 1,
        )
