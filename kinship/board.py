"""
Sorting board: contact cards moved between category columns.

Columns are Uncategorized, Family, Friend and Work. Each category
column has two lanes, 'improve' and 'satisfied'; a drop target is
either a column id ('Family') or a lane id ('Family-improve').

Moves return a new board and never mutate the one passed in.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Union

from regions import membership_key

UNCATEGORIZED = 'Uncategorized'
FAMILY = 'Family'
FRIEND = 'Friend'
WORK = 'Work'

COLUMNS = (UNCATEGORIZED, FAMILY, FRIEND, WORK)
STATUSES = ('satisfied', 'improve')

STATUS_LABELS = {
    FAMILY: {'satisfied': 'This is right', 'improve': 'Want to be closer'},
    FRIEND: {'satisfied': 'Great spot', 'improve': 'I miss them'},
    WORK: {'satisfied': 'Great as it is', 'improve': 'Want to nurture'},
}

# Membership key (sorted region names joined by '+') -> chip color token
CATEGORY_COLORS = {
    'family+friends+work': 'bg-purple-400 text-purple-900',
    'family+friends': 'bg-orange-400 text-orange-900',
    'family+work': 'bg-yellow-400 text-yellow-900',
    'friends+work': 'bg-teal-400 text-teal-900',
    'family': 'bg-rose-400 text-rose-900',
    'friends': 'bg-emerald-400 text-emerald-900',
    'work': 'bg-sky-400 text-sky-900',
}
DEFAULT_COLOR = 'bg-gray-400 text-gray-900'

Board = Dict[str, List['Card']]


@dataclass(frozen=True)
class Card:
    id: Union[int, str]
    name: str
    category: Optional[str] = None
    status: Optional[str] = None


def initial_board(people: Iterable) -> Board:
    """Every card starts uncategorized. Accepts Contacts or Cards."""
    board = {column: [] for column in COLUMNS}
    for person in people:
        board[UNCATEGORIZED].append(Card(id=person.id, name=person.name))
    return board


def parse_target(target: str):
    """'Family-improve' -> ('Family', 'improve'); 'Work' -> ('Work', None)."""
    column, _, status = str(target).partition('-')
    return column, (status or None)


def move_card(board: Board, card_id, target: str) -> Board:
    """
    Move a card onto a column or lane.

    Drops on Uncategorized are ignored. Dropping on a bare column keeps
    the card's existing status.
    """
    column, status = parse_target(target)
    if column == UNCATEGORIZED:
        return board
    if column not in COLUMNS:
        raise ValueError(f"Unknown column: {column}. Available: {list(COLUMNS)}")
    if status is not None and status not in STATUSES:
        raise ValueError(f"Unknown lane status: {status}")

    source = find_card(board, card_id)
    card = next(c for c in board[source] if c.id == card_id)

    moved = replace(card, category=column, status=status or card.status)
    updated = {key: list(cards) for key, cards in board.items()}
    updated[source] = [c for c in updated[source] if c.id != card_id]
    updated.setdefault(column, []).append(moved)
    return updated


def find_card(board: Board, card_id) -> str:
    """Column currently holding `card_id`."""
    for column, cards in board.items():
        if any(c.id == card_id for c in cards):
            return column
    raise KeyError(f"Unknown card: {card_id}")


def is_complete(board: Board) -> bool:
    """Sorting is done once nothing is left uncategorized."""
    return not board.get(UNCATEGORIZED)


def lane_label(column: str, status: str) -> str:
    return STATUS_LABELS[column][status]


def category_color(regions: Iterable[str]) -> str:
    """Chip color token for a membership set (gray when unknown/empty)."""
    key = membership_key(regions)
    return CATEGORY_COLORS.get(key, DEFAULT_COLOR)
