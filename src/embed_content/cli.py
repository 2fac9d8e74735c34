"""CLI for replaying stream events through the embedding pipeline."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from dotenv import load_dotenv

from common.cli_helpers import load_json_file, save_jsonl_local, setup_logging
from common.serialization import serialize_dataclass
from embed_content.config import load_config
from embed_content.handler import build_pipeline
from embed_content.helpers import parse_embed_content_args
from embed_content.models import ChangeEvent

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_embed_content_args(argv)

    config = load_config(args.config)
    if args.dry_run:
        config.pipeline.dry_run = True
    if args.max_workers is not None:
        config.pipeline.max_workers = args.max_workers

    payload = load_json_file(args.events_file)
    records = payload.get("Records", []) if isinstance(payload, dict) else payload
    if not records:
        logger.warning("No records in %s", args.events_file)
        return 0

    events = [ChangeEvent.from_stream_record(record) for record in records]
    pipeline = build_pipeline(config)
    result = pipeline.process_batch(events)

    print(
        f"{result.total} events: {result.embedded} embedded, {result.skipped} skipped, "
        f"{result.model_failed} model failures, {result.failed} failed"
    )

    if args.load_local:
        now = datetime.now(timezone.utc)
        outcomes = [serialize_dataclass(outcome) for outcome in result.outcomes]
        filepath = save_jsonl_local(outcomes, "embed_outcomes", now)
        logger.info("Saved %d outcomes to %s", len(outcomes), filepath)

    return 1 if result.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
