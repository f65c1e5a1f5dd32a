import logging
import sys

from ..config import setup_logging
from ..fuzzy.core.types import FuzzyError
from .commands.parser import build_parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else args.log_level)
    try:
        return args.func(args)
    except FuzzyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
