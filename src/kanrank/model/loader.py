"""Load a kanrank board from its YAML file."""

import logging
from pathlib import Path

import yaml

from kanrank.models import Board, Card, Column
from kanrank.rank import is_valid_key

logger = logging.getLogger(__name__)

DEFAULT_FILE = "kanrank.yaml"


class BoardFileError(ValueError):
    """The board file is missing, unreadable or malformed."""


def load_board(path: str | Path, legacy: bool = False) -> Board:
    """Load a complete board from a YAML file.

    With legacy=True, records may lack a rank or carry one that isn't a valid
    key; their integer ``position`` is kept so backfill can rank them.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise BoardFileError(f"No board at {path}; run 'kanrank init' first") from None
    except OSError as e:
        raise BoardFileError(f"Can't read {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise BoardFileError(f"{path} is not valid YAML: {e}") from e

    board = board_from_dict(data if data is not None else {}, legacy=legacy)
    board.path = str(path)
    logger.debug("loaded %d columns from %s", len(board.columns), path)
    return board


def board_from_dict(data, legacy: bool = False) -> Board:
    """Build a Board from the plain structure stored in a board file."""
    if not isinstance(data, dict):
        raise BoardFileError("Board file must contain a mapping")

    meta = data.get("meta") or {}
    if not isinstance(meta, dict):
        raise BoardFileError("Board 'meta' must be a mapping")

    board = Board(title=str(data.get("title") or ""), meta=meta)
    for raw_col in _items(data, "columns", "board"):
        col = Column(
            id=_id(raw_col, "column"),
            name=str(raw_col.get("name") or ""),
            rank=_rank(raw_col, "column", legacy),
            archived=bool(raw_col.get("archived", False)),
            position=_position(raw_col),
        )
        for raw_card in _items(raw_col, "cards", f"column '{col.id}'"):
            col.cards.append(
                Card(
                    id=_id(raw_card, "card"),
                    title=str(raw_card.get("title") or ""),
                    body=str(raw_card.get("body") or ""),
                    rank=_rank(raw_card, "card", legacy),
                    archived=bool(raw_card.get("archived", False)),
                    position=_position(raw_card),
                )
            )
        board.columns.append(col)
    return board


def _items(data: dict, key: str, owner: str) -> list[dict]:
    items = data.get(key) or []
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise BoardFileError(f"'{key}' of {owner} must be a list of mappings")
    return items


def _id(raw: dict, kind: str) -> str:
    value = raw.get("id")
    if value is None or value == "":
        raise BoardFileError(f"A {kind} has no id")
    return str(value)


def _rank(raw: dict, kind: str, legacy: bool):
    value = raw.get("rank")
    if legacy:
        return str(value) if value is not None else None
    if not is_valid_key(value):
        raise BoardFileError(
            f"{kind.capitalize()} '{raw.get('id')}' has invalid rank {value!r}; run 'kanrank board backfill'"
        )
    return value


def _position(raw: dict) -> int | None:
    value = raw.get("position")
    return value if isinstance(value, int) and not isinstance(value, bool) else None
