"""Console entry point: ``python -m cli`` or ``vocadrill``."""

import argparse
import os
import sys

from core.config import DIRECTIONS
from cli.api_client import DrillAPIClient, DEFAULT_SERVER
from cli.console import ConsoleUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Vocadrill - translate each word shown; mistakes come back more often'
    )
    parser.add_argument('--server', default=DEFAULT_SERVER,
                        help=f'Drill server URL (default: {DEFAULT_SERVER}, or $DRILL_SERVER)')
    parser.add_argument('--user', default=os.environ.get('DRILL_USER', 'default'),
                        help='Learner id; error counts are kept per learner (default: $DRILL_USER or "default")')
    parser.add_argument('--direction', choices=DIRECTIONS,
                        help='Start in this direction instead of the one the session is in')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    client = DrillAPIClient(base_url=args.server, user_id=args.user)
    ui = ConsoleUI(client)

    try:
        ui.run(direction=args.direction)
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
