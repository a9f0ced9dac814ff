"""Import lists and cards from JSON or CSV exports.

Imported records are appended in source order, each one ranked with
key_after the previous record in its group.
"""

import csv
import io
import logging

from kanrank.models import Board, Card, Column, next_id
from kanrank.rank import key_after
from kanrank.siblings import sort_by_rank

logger = logging.getLogger(__name__)


class ImportFormatError(ValueError):
    """The import payload doesn't have the expected shape."""


def _last_rank(items) -> str | None:
    ordered = sort_by_rank(items)
    return ordered[-1].rank if ordered else None


def _append_column(board: Board, name: str) -> Column:
    col = Column(
        id=next_id(c.id for c in board.columns),
        name=name,
        rank=key_after(_last_rank(board.columns)),
    )
    board.columns.append(col)
    return col


def _append_card(board: Board, column: Column, title: str, body: str = "") -> Card:
    card = Card(
        id=next_id(c.id for c in board.all_cards()),
        title=title,
        body=body,
        rank=key_after(_last_rank(column.cards)),
    )
    column.cards.append(card)
    return card


def import_json(board: Board, payload) -> dict:
    """Append the lists and cards of a JSON export to the board.

    Expects ``{"board": {"name": ...}, "lists": [{"title": ..., "cards":
    [{"title": ..., "description": ...}]}]}``. Lists may use "name" instead
    of "title". Returns counts of what was created.
    """
    if not isinstance(payload, dict):
        raise ImportFormatError("JSON import must be an object")
    lists = payload.get("lists") or []
    if not isinstance(lists, list):
        raise ImportFormatError("'lists' must be an array")

    if not board.title and isinstance(payload.get("board"), dict):
        board.title = str(payload["board"].get("name") or "")

    columns = cards = 0
    for i, raw in enumerate(lists):
        raw = raw if isinstance(raw, dict) else {}
        col = _append_column(board, str(raw.get("title") or raw.get("name") or f"List {i + 1}"))
        columns += 1
        raw_cards = raw.get("cards")
        if not isinstance(raw_cards, list):
            continue
        for j, raw_card in enumerate(raw_cards):
            raw_card = raw_card if isinstance(raw_card, dict) else {}
            title = str(raw_card.get("title") or f"Card {j + 1}")
            _append_card(board, col, title, str(raw_card.get("description") or ""))
            cards += 1

    logger.info("imported %d columns and %d cards from JSON", columns, cards)
    return {"columns": columns, "cards": cards}


def import_csv(board: Board, text: str) -> dict:
    """Append rows of a CSV export to the board.

    Each row needs a ``listTitle`` and may have ``cardTitle`` and
    ``description``. Columns are created the first time their title is
    seen, reusing an existing visible column with the same name.
    """
    reader = csv.DictReader(io.StringIO(text))
    if not reader.fieldnames or "listTitle" not in reader.fieldnames:
        raise ImportFormatError("CSV import needs a 'listTitle' column")

    by_name = {c.name: c for c in board.visible_columns()}
    columns = cards = 0
    for row in reader:
        list_title = (row.get("listTitle") or "").strip()
        if not list_title:
            continue
        col = by_name.get(list_title)
        if col is None:
            col = by_name[list_title] = _append_column(board, list_title)
            columns += 1
        card_title = (row.get("cardTitle") or "").strip()
        if card_title:
            _append_card(board, col, card_title, (row.get("description") or "").strip())
            cards += 1

    logger.info("imported %d columns and %d cards from CSV", columns, cards)
    return {"columns": columns, "cards": cards}
