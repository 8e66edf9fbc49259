"""Command line entry point: fetch a feed URL and print the parsed channel."""

import argparse
import json
import sys
from datetime import UTC, datetime

import requests

from .config import LOG_LEVELS, Config, LinkPolicy
from .fetch import FeedFetcher
from .logging_config import create_execution_logger, setup_structured_logging
from .rss import ChannelExtractor
from .validate import validate_channel

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_NO_CHANNEL = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the rss-parser command."""
    parser = argparse.ArgumentParser(
        prog="rss-parser",
        description="Fetch an RSS feed and print it as JSON",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Feed URL; read from standard input when omitted",
    )
    parser.add_argument(
        "--link-policy",
        type=LinkPolicy.from_str,
        default=None,
        help="How to combine <link> and <atom:link>: fallback or atom_only",
    )
    parser.add_argument("--timeout", type=int, default=None, help="HTTP timeout in seconds")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="DEBUG, INFO, WARNING or ERROR",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Also report missing required channel fields",
    )
    return parser


def read_feed_url(stdin=None) -> str:
    """Prompt for a feed URL and read it from standard input."""
    stdin = stdin or sys.stdin
    print("Please input the feed URL:", file=sys.stderr)
    return stdin.readline().strip()


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = Config()
    except ValueError as e:
        parser.error(str(e))

    setup_structured_logging(args.log_level or config.log_level)
    execution_id = f"cli_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
    logger = create_execution_logger("cli", execution_id)

    parser_config = config.get_parser_config()
    if args.link_policy is not None:
        parser_config.link_policy = args.link_policy
    fetch_config = config.get_fetch_config()
    if args.timeout is not None:
        fetch_config.timeout = args.timeout

    feed_url = args.url or read_feed_url()
    logger.log_execution_start(feed_url=feed_url, link_policy=parser_config.link_policy.value)

    try:
        content = FeedFetcher(fetch_config, execution_id=execution_id).fetch(feed_url)
    except requests.RequestException as e:
        logger.log_execution_end(success=False, error=str(e))
        return EXIT_FETCH_FAILED

    channel = ChannelExtractor(parser_config, execution_id=execution_id).parse(content)
    if channel is None:
        logger.log_execution_end(success=False, error="No channel in document")
        return EXIT_NO_CHANNEL

    output = channel.to_dict()
    if args.validate:
        output["issues"] = [
            {"field": issue.field, "message": issue.message, "item_index": issue.item_index}
            for issue in validate_channel(channel)
        ]

    print(json.dumps(output, indent=2, ensure_ascii=False))
    logger.log_execution_end(success=True, items_count=len(channel.items))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
