"""Helper functions for embed_content CLI."""

from __future__ import annotations

import argparse


def parse_embed_content_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for embed_content."""

    parser = argparse.ArgumentParser(
        description="Replay a captured DynamoDB Streams event through the embedding pipeline",
    )

    # Input options
    parser.add_argument(
        "--events-file",
        required=True,
        help="Lambda stream event JSON (an object with a Records list)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under embed_content/configs (default: CONFIG_ENV or prod)",
    )

    # Pipeline options
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and log content without calling the model or writing",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Concurrent events (default: pipeline.max_workers from config)",
    )

    # Output options
    parser.add_argument("--load-local", action="store_true", help="Save per-event outcomes to local file")

    return parser.parse_args(argv)
