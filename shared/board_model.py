"""
Snapshot model of a rendered Kanban board.

The board is never owned by the tests: page objects read it into these
immutable snapshots, and fixture selection and outcome checks run against
snapshots only. A snapshot is taken fresh after every mutation because the
application re-renders the whole tree.

Key Concepts Demonstrated:
- Parsing DOM text into typed values
- Predicate-based fixture selection in document order
- Postcondition checks that report expected vs actual values
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from shared.errors import PostconditionMismatch

# "substasks" is what the board renders; match it literally.
SUBTASK_SUMMARY_PATTERN = re.compile(r"(\d+)\s+of\s+(\d+)\s+substasks", re.IGNORECASE)
SUBTASK_SUMMARY_MARKER = "substasks"
HEADER_COUNT_PATTERN = re.compile(r"\((\d+)\)")
STRIKE_THROUGH = "line-through"


# -----------------------------------------------------------------------------
# Text Parsing
# -----------------------------------------------------------------------------

def clean_column_name(header: str | None) -> str:
    """Strip whitespace and any trailing "(count)" from a column heading."""
    if not header:
        return ""
    return header.strip().split("(")[0].strip()


def parse_header_count(header: str | None) -> int | None:
    """Return the parenthesised card count of a column heading, if any."""
    if not header:
        return None
    match = HEADER_COUNT_PATTERN.search(header)
    if match is None:
        return None
    return int(match.group(1))


def same_column_name(left: str | None, right: str | None) -> bool:
    """Compare two headings by cleaned name, ignoring case."""
    return clean_column_name(left).lower() == clean_column_name(right).lower()


@dataclass(frozen=True)
class SubtaskProgress:
    """Completed and total subtask counts shown on a card."""

    completed: int
    total: int

    @property
    def is_incomplete(self) -> bool:
        return self.total > 0 and self.completed < self.total

    @classmethod
    def parse(cls, text: str | None) -> SubtaskProgress | None:
        """
        Parse a "<completed> of <total> substasks" summary.

        Returns:
            The parsed progress, or None when the text does not match.
        """
        if not text or SUBTASK_SUMMARY_MARKER not in text.lower():
            return None
        match = SUBTASK_SUMMARY_PATTERN.search(text)
        if match is None:
            return None
        return cls(completed=int(match.group(1)), total=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.completed} of {self.total} {SUBTASK_SUMMARY_MARKER}"


# -----------------------------------------------------------------------------
# Snapshots
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CardSnapshot:
    """A card as rendered at snapshot time."""

    title: str
    index: int
    progress: SubtaskProgress | None = None
    visible: bool = True


@dataclass(frozen=True)
class ColumnSnapshot:
    """A column heading and its cards in document order."""

    index: int
    header: str
    cards: tuple[CardSnapshot, ...] = ()

    @property
    def name(self) -> str:
        return clean_column_name(self.header)

    @property
    def header_count(self) -> int | None:
        return parse_header_count(self.header)

    @property
    def card_count(self) -> int:
        return len(self.cards)

    @property
    def titles(self) -> list[str]:
        return [card.title for card in self.cards]

    @property
    def visible_cards(self) -> list[CardSnapshot]:
        return [card for card in self.cards if card.visible]


@dataclass(frozen=True)
class BoardSnapshot:
    """The whole board: columns in display order."""

    columns: tuple[ColumnSnapshot, ...] = ()

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def first_column(self) -> ColumnSnapshot | None:
        return self.columns[0] if self.columns else None

    def column_named(self, name: str) -> ColumnSnapshot | None:
        """Find a column by cleaned, case-insensitive name."""
        for column in self.columns:
            if same_column_name(column.header, name):
                return column
        return None

    def titles_in(self, name: str) -> list[str]:
        column = self.column_named(name)
        return column.titles if column else []

    def all_titles(self) -> list[str]:
        return [title for column in self.columns for title in column.titles]

    def describe(self) -> str:
        """
        Summarise the board for skip and failure messages.

        One line per column: card count, cards showing a subtask summary,
        and cards whose subtasks are incomplete.
        """
        lines = []
        for column in self.columns:
            with_subtasks = [card for card in column.cards if card.progress]
            incomplete = [card for card in with_subtasks if card.progress.is_incomplete]
            lines.append(
                f"Column {column.index + 1} ({column.header.strip()}): "
                f"{column.card_count} cards, {len(with_subtasks)} with subtasks, "
                f"{len(incomplete)} incomplete"
            )
        return "\n".join(lines)


# -----------------------------------------------------------------------------
# Fixture Selection
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Fixture:
    """A card chosen at runtime to satisfy a scenario precondition."""

    column: ColumnSnapshot
    card: CardSnapshot
    completed: int = 0
    total: int = 0

    @property
    def title(self) -> str:
        return self.card.title

    @property
    def column_name(self) -> str:
        return self.column.name


FixturePredicate = Callable[[BoardSnapshot, ColumnSnapshot, CardSnapshot], bool]


def incomplete_outside_first_column(
    board: BoardSnapshot, column: ColumnSnapshot, card: CardSnapshot
) -> bool:
    """Card has unfinished subtasks and does not sit in the first column."""
    first = board.first_column
    if first is None or column.index == first.index:
        return False
    if same_column_name(column.header, first.header):
        return False
    return card.progress is not None and card.progress.is_incomplete


def any_visible_card(
    board: BoardSnapshot, column: ColumnSnapshot, card: CardSnapshot
) -> bool:
    """Any card the user can see."""
    return card.visible


def select_fixture(
    board: BoardSnapshot,
    predicate: FixturePredicate,
    exclude: Iterable[str] = (),
) -> Fixture | None:
    """
    Return the first card in document order that satisfies ``predicate``.

    Columns are scanned by ascending index, cards by ascending index within
    a column. Invisible cards and titles in ``exclude`` are skipped.
    """
    excluded = set(exclude)
    for column in board.columns:
        for card in column.cards:
            if not card.visible or card.title in excluded:
                continue
            if predicate(board, column, card):
                progress = card.progress
                return Fixture(
                    column=column,
                    card=card,
                    completed=progress.completed if progress else 0,
                    total=progress.total if progress else 0,
                )
    return None


# -----------------------------------------------------------------------------
# Outcome Verification
# -----------------------------------------------------------------------------

def verify_membership_moved(
    title: str, source_titles: Iterable[str], destination_titles: Iterable[str]
) -> None:
    """The card now lives in the destination column and not in the source."""
    destination = list(destination_titles)
    source = list(source_titles)
    if title not in destination:
        raise PostconditionMismatch(
            f"card {title!r} in destination column", "present", destination
        )
    if title in source:
        raise PostconditionMismatch(
            f"card {title!r} in source column", "absent", source
        )


def verify_subtask_increment(before: SubtaskProgress, after: SubtaskProgress | None) -> None:
    """Exactly one more subtask is complete and the total is unchanged."""
    if after is None:
        raise PostconditionMismatch("subtask summary", str(before), None)
    if after.completed != before.completed + 1:
        raise PostconditionMismatch(
            "completed subtasks", before.completed + 1, after.completed
        )
    if after.total != before.total:
        raise PostconditionMismatch("total subtasks", before.total, after.total)


def verify_struck(class_name: str | None, text_decoration: str | None) -> None:
    """Either the class list or the computed style marks strike-through."""
    has_class = STRIKE_THROUGH in (class_name or "")
    has_style = STRIKE_THROUGH in (text_decoration or "").lower()
    if not (has_class or has_style):
        raise PostconditionMismatch(
            "subtask strike-through",
            STRIKE_THROUGH,
            {"class": class_name, "text-decoration": text_decoration},
        )


def verify_header_count(column: ColumnSnapshot) -> None:
    """A heading's "(count)" suffix, when present, equals the card count."""
    header_count = column.header_count
    if header_count is not None and header_count != column.card_count:
        raise PostconditionMismatch(
            f"header count of column {column.name!r}", column.card_count, header_count
        )


def verify_deleted(
    title: str, before: BoardSnapshot, after: BoardSnapshot, column_name: str
) -> None:
    """
    The card is gone from the board, its column shrank by one and every
    other column kept its card count.

    Raises:
        PostconditionMismatch: Naming the first check that failed.
    """
    remaining = after.all_titles()
    if title in remaining:
        raise PostconditionMismatch(f"card {title!r} on board", "absent", remaining)

    if after.column_count != before.column_count:
        raise PostconditionMismatch(
            "column count", before.column_count, after.column_count
        )

    column_before = before.column_named(column_name)
    column_after = after.column_named(column_name)
    if column_before is None or column_after is None:
        raise PostconditionMismatch(
            f"column {column_name!r} present", "present in both snapshots", None
        )
    if column_after.card_count != column_before.card_count - 1:
        raise PostconditionMismatch(
            f"card count of column {column_name!r}",
            column_before.card_count - 1,
            column_after.card_count,
        )
    for other_before in before.columns:
        if same_column_name(other_before.header, column_name):
            continue
        other_after = after.column_named(other_before.name)
        count_after = other_after.card_count if other_after else None
        if count_after != other_before.card_count:
            raise PostconditionMismatch(
                f"card count of column {other_before.name!r}",
                other_before.card_count,
                count_after,
            )
    if len(remaining) != len(before.all_titles()) - 1:
        raise PostconditionMismatch(
            "cards on board", len(before.all_titles()) - 1, len(remaining)
        )
    verify_header_count(column_after)
