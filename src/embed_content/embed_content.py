"""Core change-event processing: classify, filter, build, embed, write back."""

import logging
from concurrent.futures import ThreadPoolExecutor

from botocore.exceptions import BotoCoreError, ClientError

from common.utils import get_string
from embed_content.config import Config
from embed_content.content import build_content, has_embeddable_content
from embed_content.embedder import Embedder, EmbeddingError, serialize_embedding
from embed_content.enrich import EnrichmentFetcher
from embed_content.models import (
    EMBEDDED,
    FAILED,
    MODEL_FAILED,
    SKIPPED,
    BatchResult,
    ChangeEvent,
    EventOutcome,
)
from embed_content.records import classify, is_embedding_relevant, snapshot_from_image
from embed_content.store import RecordStore

logger = logging.getLogger(__name__)


class EmbeddingPipeline:
    """Processes change-stream batches against shared store and model clients."""

    def __init__(self, config: Config, store: RecordStore, embedder: Embedder):
        self.config = config
        self.store = store
        self.embedder = embedder
        self.enricher = EnrichmentFetcher(store, config.tables)

    def process_batch(self, events: list[ChangeEvent]) -> BatchResult:
        """
        Process a batch of change events concurrently.

        Each event runs in isolation: an exception in one never affects its
        siblings, and nothing is rolled back. Outcomes keep input order.

        Args:
            events: Decoded change events from one stream invocation

        Returns:
            BatchResult with one outcome per event
        """
        if not events:
            logger.info("No events to process")
            return BatchResult()

        logger.info("Processing %d events", len(events))
        max_workers = max(1, min(self.config.pipeline.max_workers, len(events)))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(self._process_isolated, events))

        result = BatchResult(outcomes=outcomes)
        if result.failed:
            logger.error("%d events failed to process", result.failed)
        logger.info(
            "Processed %d of %d events successfully (%d embedded, %d skipped, %d model failures, %d failed)",
            result.succeeded, result.total, result.embedded, result.skipped,
            result.model_failed, result.failed,
        )
        return result

    def _process_isolated(self, event: ChangeEvent) -> EventOutcome:
        try:
            return self.process_event(event)
        except Exception as exc:
            logger.exception(
                "Unexpected error processing event %s (record %s)",
                event.event_id, get_string(event.new_image, "id"),
            )
            return EventOutcome(
                event_id=event.event_id,
                kind=classify(event.source_arn),
                record_id=get_string(event.new_image, "id"),
                status=FAILED,
                reason=f"{type(exc).__name__}: {exc}",
                sequence_number=event.sequence_number,
            )

    def process_event(self, event: ChangeEvent) -> EventOutcome:
        """
        Run one event through the pipeline.

        Skips and model or write failures are returned as outcomes.
        """
        def outcome(status, reason=None, kind=None, record_id=None):
            return EventOutcome(
                event_id=event.event_id,
                kind=kind,
                record_id=record_id,
                status=status,
                reason=reason,
                sequence_number=event.sequence_number,
            )

        if event.is_delete:
            logger.debug("Skipping delete event %s", event.event_id)
            return outcome(SKIPPED, "delete")

        kind = classify(event.source_arn)
        if kind is None:
            logger.info("Unknown table, skipping: %s", event.source_arn)
            return outcome(SKIPPED, "unknown_source")

        table_name = self.config.tables.for_kind(kind)
        if not table_name:
            logger.error("No destination table configured for %s, skipping", kind)
            return outcome(SKIPPED, "no_destination", kind)

        record = snapshot_from_image(kind, event.new_image)
        if record is None:
            logger.info("No new image on %s event %s, skipping", kind, event.event_id)
            return outcome(SKIPPED, "no_new_image", kind)

        if event.is_update:
            previous = snapshot_from_image(kind, event.old_image)
            if not is_embedding_relevant(kind, previous, record):
                logger.info("%s %s updated but embeddable fields unchanged, skipping", kind, record.id)
                return outcome(SKIPPED, "unchanged", kind, record.id)

        if not record.id:
            logger.warning("%s event %s has no record id, skipping", kind, event.event_id)
            return outcome(SKIPPED, "missing_id", kind)

        if not has_embeddable_content(kind, record):
            logger.info("No content to embed for %s %s, skipping", kind, record.id)
            return outcome(SKIPPED, "no_content", kind, record.id)

        logger.info("Processing %s record: %s", kind, record.id)
        enrichment = self.enricher.resolve(kind, record)
        content = build_content(kind, record, enrichment)
        if content is None:
            return outcome(SKIPPED, "no_content", kind, record.id)

        if self.config.pipeline.dry_run:
            logger.info("Dry run, not embedding %s %s:\n%s", kind, record.id, content)
            return outcome(SKIPPED, "dry_run", kind, record.id)

        logger.info("Content length: %d chars", len(content))
        try:
            embedding = self.embedder.embed(content)
        except EmbeddingError as exc:
            logger.error(
                "Failed to generate embedding for %s %s (content length %d): %s",
                kind, record.id, len(content), exc,
            )
            return outcome(MODEL_FAILED, str(exc), kind, record.id)

        logger.info("Generated embedding with %d dimensions", len(embedding))
        try:
            self.store.set_embedding(table_name, record.id, serialize_embedding(embedding))
        except (ClientError, BotoCoreError) as exc:
            logger.error("Failed to write embedding to %s %s: %s", kind, record.id, exc)
            return outcome(FAILED, str(exc), kind, record.id)
        logger.info("Updated %s %s with embedding", kind, record.id)

        return outcome(EMBEDDED, None, kind, record.id)
