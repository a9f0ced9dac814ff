"""Save a kanrank board to its YAML file."""

import logging
import os
import tempfile
from pathlib import Path

import yaml

from kanrank.model.loader import DEFAULT_FILE
from kanrank.models import Board, Card, Column
from kanrank.rank import evenly_spaced_keys
from kanrank.siblings import sort_by_rank

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = ("Backlog", "Doing", "Done")


def new_board(title: str = "kanrank") -> Board:
    """Build an empty board with the default columns."""
    keys = evenly_spaced_keys(len(DEFAULT_COLUMNS))
    columns = [Column(id=str(i + 1), name=name, rank=key) for i, (name, key) in enumerate(zip(DEFAULT_COLUMNS, keys))]
    return Board(title=title, columns=columns)


def _card_to_dict(card: Card) -> dict:
    data = {"id": card.id, "title": card.title, "rank": card.rank}
    if card.body:
        data["body"] = card.body
    if card.archived:
        data["archived"] = True
    return data


def _column_to_dict(col: Column) -> dict:
    data = {"id": col.id, "name": col.name, "rank": col.rank}
    if col.archived:
        data["archived"] = True
    data["cards"] = [_card_to_dict(c) for c in sort_by_rank(col.cards)]
    return data


def board_to_dict(board: Board) -> dict:
    """Convert a Board to the plain structure stored in a board file."""
    data = {"title": board.title}
    if board.meta:
        data["meta"] = dict(board.meta)
    data["columns"] = [_column_to_dict(c) for c in sort_by_rank(board.columns)]
    return data


def save_board(board: Board, path: str | Path | None = None) -> Path:
    """Write the board to path (default: where it was loaded from).

    The file is replaced atomically so readers never see a partial board.
    """
    target = Path(path or board.path or DEFAULT_FILE)
    text = yaml.safe_dump(board_to_dict(board), default_flow_style=False, sort_keys=False, allow_unicode=True)

    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, target)
    except BaseException:
        os.unlink(tmp)
        raise

    board.path = str(target)
    logger.debug("saved board to %s", target)
    return target
