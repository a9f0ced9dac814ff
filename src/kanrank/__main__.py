"""Entry point for kanrank CLI."""

import os
import sys
from pathlib import Path

from kanrank.model.loader import DEFAULT_FILE

NOUNS = {"init", "rank", "board", "column", "card"}


def main():
    # No subcommand or non-noun argument = TUI mode
    if len(sys.argv) < 2 or (sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-")):
        from kanrank.ui import KanrankApp

        default = os.environ.get("KANRANK_FILE", DEFAULT_FILE)
        path = sys.argv[1] if len(sys.argv) > 1 else default
        app = KanrankApp(Path(path).resolve())
        app.run()
        return

    from kanrank.cli import build_parser
    from kanrank.cli._common import configure_logging

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
