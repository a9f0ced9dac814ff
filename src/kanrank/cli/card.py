"""Handlers for 'kanrank card' commands."""

from kanrank.cli._common import (
    card_summary,
    error,
    find_card,
    find_column,
    load_board_or_die,
    output_json,
    output_result,
    save,
    to_index,
)
from kanrank.model.card import (
    archive_card,
    create_card,
    find_card_column,
    move_card,
    move_card_to,
    reorder_column,
)
from kanrank.models import MoveError
from kanrank.rank import RankError


def card_list(args) -> int:
    """List cards grouped by column, in rank order."""
    board = load_board_or_die(args.file, args.json)

    columns = []
    for col in board.visible_columns():
        if args.column and col.id != args.column:
            continue
        cards = [card_summary(c) for c in col.visible_cards()]
        columns.append({"id": col.id, "name": col.name, "cards": cards})

    if args.json:
        items = [
            {**c, "column": {"id": col["id"], "name": col["name"]}}
            for col in columns
            for c in col["cards"]
        ]
        output_json(items)
    else:
        for col in columns:
            print(f"{col['id']}  {col['name']}")
            for c in col["cards"]:
                print(f"  {c['id']}  {c['title']:<24} [{c['rank']}]")

    return 0


def card_add(args) -> int:
    """Create a new card."""
    board = load_board_or_die(args.file, args.json)

    column = None
    if args.column:
        column = find_column(board, args.column, args.json)

    try:
        card = create_card(board, args.title, args.body, column=column, position=to_index(args.position, args.json))
    except (MoveError, RankError) as e:
        error(str(e), args.json)

    col = find_card_column(board, card.id)
    save(board)

    output_result(
        {**card_summary(card), "column": {"id": col.id, "name": col.name}},
        f"Created card {card.id} in {col.name} (rank {card.rank})",
        args.json,
    )

    return 0


def card_move(args) -> int:
    """Move a card to a column, between neighbours or at a position."""
    board = load_board_or_die(args.file, args.json)
    find_card(board, args.id, args.json)
    target = find_column(board, args.column, args.json)

    if args.position is not None and (args.before or args.after):
        error("Use either --position or --before/--after, not both", args.json)

    try:
        if args.position is not None:
            card = move_card_to(board, args.id, target, position=to_index(args.position, args.json))
        else:
            card = move_card(board, args.id, target, before_id=args.before, after_id=args.after)
    except (MoveError, RankError) as e:
        error(str(e), args.json)

    save(board)

    output_result(
        {**card_summary(card), "column": {"id": target.id, "name": target.name}},
        f"Moved card {card.id} to {target.name} (rank {card.rank})",
        args.json,
    )

    return 0


def card_reorder(args) -> int:
    """Put a column's visible cards in the given order with evenly spaced ranks."""
    board = load_board_or_die(args.file, args.json)
    col = find_column(board, args.column, args.json)

    try:
        reorder_column(board, col, args.ids)
    except MoveError as e:
        error(str(e), args.json)
    save(board)

    cards = [card_summary(c) for c in col.visible_cards()]
    output_result(
        {"id": col.id, "name": col.name, "cards": cards},
        "\n".join([f"{col.id}  {col.name}"] + [f"  {c['id']}  {c['title']:<24} [{c['rank']}]" for c in cards]),
        args.json,
    )

    return 0


def card_archive(args) -> int:
    """Archive a card."""
    board = load_board_or_die(args.file, args.json)
    card = find_card(board, args.id, args.json)

    archive_card(board, card.id)
    save(board)

    output_result({"id": card.id}, f"Archived card {card.id}", args.json)

    return 0
