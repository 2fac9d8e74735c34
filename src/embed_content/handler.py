"""Lambda entry point for the DynamoDB Streams trigger."""

import logging
from typing import Any

from common.aws import get_bedrock_runtime_client, get_dynamodb_client
from common.cli_helpers import setup_logging
from embed_content.config import Config, get_config
from embed_content.embed_content import EmbeddingPipeline
from embed_content.embedder import Embedder
from embed_content.models import ChangeEvent
from embed_content.store import RecordStore

setup_logging()
logger = logging.getLogger(__name__)

# Created once per container and reused across invocations
_pipeline: EmbeddingPipeline | None = None


def build_pipeline(config: Config) -> EmbeddingPipeline:
    """Create the pipeline and its AWS clients from configuration."""
    missing = config.missing_tables()
    if missing:
        logger.error("No destination table configured for: %s", ", ".join(missing))

    pool_size = max(10, config.pipeline.max_workers)
    dynamodb = get_dynamodb_client(config.aws.region, max_pool_connections=pool_size)
    bedrock = get_bedrock_runtime_client(config.aws.region, max_pool_connections=pool_size)
    return EmbeddingPipeline(config, RecordStore(dynamodb), Embedder(bedrock, config.model))


def get_pipeline() -> EmbeddingPipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = build_pipeline(get_config())
    return _pipeline


def reset_pipeline():
    """Drop the cached pipeline (forces client re-creation on next use)."""
    global _pipeline
    _pipeline = None


def handler(event: dict[str, Any], context: Any = None) -> dict[str, list[dict[str, str]]]:
    """
    Embed the records touched by one stream batch.

    Returns:
        {"batchItemFailures": [...]}; empty unless pipeline.report_failures
        is enabled, in which case it lists the sequence numbers of events
        whose write failed
    """
    records = event.get("Records") or []
    pipeline = get_pipeline()

    events = [ChangeEvent.from_stream_record(record) for record in records]
    result = pipeline.process_batch(events)

    if not pipeline.config.pipeline.report_failures:
        return {"batchItemFailures": []}

    failures = result.batch_item_failures()
    if failures:
        logger.warning("Requesting redelivery of %d items", len(failures))
    return {"batchItemFailures": failures}
