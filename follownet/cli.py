"""Command-line interface for exploring a follow network."""

import argparse
import logging
import os

from follownet.exporter import GraphExporter
from follownet.loader import FixtureError, load_network
from follownet.network import Network
from follownet.user import DEFAULT_MAX_FOLLOWEES


def _env_int(name: str):
    """Read an optional integer setting from the environment."""
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        print(f"⚠ Ignoring {name}={value!r}: not an integer")
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load a follow network and query recommendations and popularity"
    )
    parser.add_argument(
        'fixture',
        nargs='?',
        help='JSON fixture with users and follows (default: Foo/Bar/Baz starter network)'
    )
    parser.add_argument(
        '--max-users',
        type=int,
        default=_env_int('FOLLOWNET_MAX_USERS'),
        help='Maximum number of users (or set FOLLOWNET_MAX_USERS)'
    )
    parser.add_argument(
        '--max-followees',
        type=int,
        default=_env_int('FOLLOWNET_MAX_FOLLOWEES'),
        help='Maximum followees per user (or set FOLLOWNET_MAX_FOLLOWEES)'
    )
    parser.add_argument(
        '--recommend',
        action='append',
        default=[],
        metavar='NAME',
        help='Recommend someone for NAME to follow (repeatable)'
    )
    parser.add_argument(
        '--popular',
        action='store_true',
        help='Show the most popular user'
    )
    parser.add_argument(
        '--export',
        type=str,
        metavar='PATH',
        help='Write the follow graph as d3.js JSON to PATH'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    print("=" * 60)
    print("Follow Network")
    print("=" * 60)
    print()

    # Build network
    if args.fixture:
        try:
            report = load_network(
                args.fixture,
                max_users=args.max_users,
                max_followees=args.max_followees
            )
        except FixtureError as e:
            print(f"Error loading fixture: {e}")
            return 1

        network = report.network
        print(f"✓ Loaded {network.get_user_count()} users from {args.fixture}")
        for rejection in report.rejections:
            print(f"⚠ Skipped {rejection.action} {rejection.describe()}")
    else:
        try:
            network = Network.getting_started(
                max_users=args.max_users if args.max_users is not None else 10,
                max_followees=(args.max_followees if args.max_followees is not None
                               else DEFAULT_MAX_FOLLOWEES)
            )
        except ValueError as e:
            print(f"Error creating network: {e}")
            return 1
        print(f"✓ Created starter network with {network.get_user_count()} users")

    print()
    print(network)

    # Queries
    if args.recommend or args.popular:
        print()
    for name in args.recommend:
        if network.get_user(name) is None:
            print(f"⚠ {name}: no such user")
            continue
        recommended = network.recommend_who_to_follow(name)
        if recommended:
            print(f"  {name} should follow {recommended}")
        else:
            print(f"  No recommendation for {name}")

    if args.popular:
        popular = network.most_popular_user()
        if popular:
            print(f"  Most popular user: {popular} "
                  f"({network.popularity(popular)} followers)")
        else:
            print("  Nobody follows anybody yet")

    # Export
    if args.export:
        try:
            output_file = GraphExporter().export(network, args.export)
        except OSError as e:
            print(f"Error exporting graph: {e}")
            return 1
        print()
        print(f"✓ Exported graph to {output_file}")

    print("=" * 60)
    return 0

