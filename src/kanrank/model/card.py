"""Card mutation operations for kanrank boards."""

import logging

from kanrank.models import Board, Card, Column, MoveError, next_id
from kanrank.rank import evenly_spaced_keys
from kanrank.siblings import append_rank, fit_rank, needs_rebalance, neighbours_at, rebalance

logger = logging.getLogger(__name__)


def find_card(board: Board, card_id: str) -> Card | None:
    """Lookup card by id anywhere on the board."""
    for card in board.all_cards():
        if card.id == card_id:
            return card
    return None


def find_card_column(board: Board, card_id: str) -> Column | None:
    """Find the column containing a card."""
    for col in board.columns:
        if any(c.id == card_id for c in col.cards):
            return col
    return None


def settle_cards(board: Board, column: Column) -> bool:
    """Rebalance a column's cards if their ranks are too long or collide."""
    visible = column.visible_cards()
    if not needs_rebalance(visible, board.max_rank_length):
        return False
    logger.info("rebalancing %d cards in column %r", len(visible), column.name)
    rebalance(visible)
    return True


def _default_column(board: Board) -> Column:
    visible = board.visible_columns()
    if not visible:
        raise MoveError("Board has no columns")
    return visible[0]


def create_card(
    board: Board,
    title: str,
    body: str = "",
    column: Column | None = None,
    position: int | None = None,
) -> Card:
    """Create a new card and add it to a column.

    Goes to the end of the first visible column unless told otherwise;
    position is a 0-based index among the column's visible cards.
    """
    target = column or _default_column(board)
    if target.archived:
        raise MoveError(f"Column '{target.id}' is archived")
    settle_cards(board, target)
    visible = target.visible_cards()
    if position is None:
        rank = append_rank(visible)
    else:
        rank = fit_rank(visible, *neighbours_at(visible, position))

    card = Card(id=next_id(c.id for c in board.all_cards()), title=title, body=body, rank=rank)
    target.cards.append(card)
    logger.debug("created card %s in column %s at rank %s", card.id, target.id, rank)
    settle_cards(board, target)
    return card


def _neighbour(column: Column, card_id: str | None, moving: Card) -> Card | None:
    if card_id is None:
        return None
    for card in column.visible_cards():
        if card.id == card_id:
            if card is moving:
                raise MoveError(f"Card '{card_id}' can't be its own neighbour")
            return card
    raise MoveError(f"Card '{card_id}' is not in column '{column.id}'")


def _adjacent(ordered: list[Card], card: Card, step: int) -> Card | None:
    i = ordered.index(card) + step
    return ordered[i] if 0 <= i < len(ordered) else None


def move_card(
    board: Board,
    card_id: str,
    target: Column,
    before_id: str | None = None,
    after_id: str | None = None,
) -> Card:
    """Move a card into target between two neighbouring cards.

    before_id names the card that should sort just before the moved card,
    after_id the one just after it. With neither, the card goes to the end
    of target. Only the moved card's rank changes, unless the move pushes
    the column past the board's max_rank_length.
    """
    card = find_card(board, card_id)
    if card is None:
        raise MoveError(f"Card '{card_id}' not found")
    if target.archived:
        raise MoveError(f"Column '{target.id}' is archived")

    settle_cards(board, target)
    before = _neighbour(target, before_id, card)
    after = _neighbour(target, after_id, card)
    if before is not None and after is not None and before.rank >= after.rank:
        raise MoveError(f"Card '{before.id}' doesn't sort before card '{after.id}'")

    siblings = [c for c in target.visible_cards() if c is not card]
    if before is not None and after is not None and _adjacent(siblings, before, 1) is not after:
        raise MoveError(f"Cards '{before.id}' and '{after.id}' are not next to each other")

    if before is None and after is None:
        rank = append_rank(siblings)
    else:
        # A single named neighbour means "right next to it"
        if after is None:
            after = _adjacent(siblings, before, 1)
        elif before is None:
            before = _adjacent(siblings, after, -1)
        rank = fit_rank(siblings, before, after)

    source = find_card_column(board, card_id)
    if source is not target:
        source.cards.remove(card)
        target.cards.append(card)
    card.rank = rank
    logger.debug("moved card %s to column %s at rank %s", card.id, target.id, rank)
    settle_cards(board, target)
    return card


def move_card_to(board: Board, card_id: str, target: Column, position: int | None = None) -> Card:
    """Move a card to a 0-based position among target's visible cards."""
    card = find_card(board, card_id)
    if card is None:
        raise MoveError(f"Card '{card_id}' not found")
    if position is None:
        return move_card(board, card_id, target)
    settle_cards(board, target)
    before, after = neighbours_at(target.visible_cards(), position, moving=card)
    return move_card(
        board,
        card_id,
        target,
        before_id=before.id if before else None,
        after_id=after.id if after else None,
    )


def reorder_column(board: Board, column: Column, card_ids: list[str]) -> None:
    """Give the column's visible cards evenly spaced ranks in the order of card_ids."""
    visible = {c.id: c for c in column.visible_cards()}
    if sorted(card_ids) != sorted(visible):
        raise MoveError(f"Card order must name every card in column '{column.id}' exactly once")
    if not card_ids:
        return
    for card_id, key in zip(card_ids, evenly_spaced_keys(len(card_ids))):
        visible[card_id].rank = key


def archive_card(board: Board, card_id: str) -> None:
    """Archive a card. It keeps its rank and column."""
    card = find_card(board, card_id)
    if card is not None:
        card.archived = True
