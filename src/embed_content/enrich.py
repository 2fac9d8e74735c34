"""Best-effort context lookups for sub-records."""

import logging
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from common.utils import get_string, humanize_enum
from embed_content.config import ACTIVITY, COMMENT, PHASE_NOTE, TableConfig
from embed_content.content import UNKNOWN
from embed_content.models import EnrichmentContext, Snapshot
from embed_content.store import RecordStore

logger = logging.getLogger(__name__)


class EnrichmentFetcher:
    """Resolves the owning engagement's company and industry.

    Every lookup failure degrades to None; nothing here raises.
    """

    def __init__(self, store: RecordStore, tables: TableConfig):
        self.store = store
        self.tables = tables

    def fetch_subject_context(self, engagement_id: Optional[str]) -> Optional[EnrichmentContext]:
        if not engagement_id or not self.tables.engagement:
            return None

        try:
            item = self.store.get_item(self.tables.engagement, engagement_id, ["company", "industry"])
        except (ClientError, BotoCoreError) as exc:
            logger.error("Error fetching engagement %s: %s", engagement_id, exc)
            return None

        if item is None:
            logger.info("Engagement %s not found, embedding without context", engagement_id)
            return None

        return EnrichmentContext(
            company=get_string(item, "company") or UNKNOWN,
            industry=humanize_enum(get_string(item, "industry")),
        )

    def fetch_parent_id(self, activity_id: Optional[str]) -> Optional[str]:
        """Engagement id of the activity a comment is attached to."""
        if not activity_id or not self.tables.activity:
            return None

        try:
            item = self.store.get_item(self.tables.activity, activity_id, ["engagementId"])
        except (ClientError, BotoCoreError) as exc:
            logger.error("Error fetching activity %s: %s", activity_id, exc)
            return None

        if item is None:
            logger.info("Activity %s not found", activity_id)
            return None

        return get_string(item, "engagementId") or None

    def resolve(self, kind: str, record: Snapshot) -> Optional[EnrichmentContext]:
        """Context for a record of the given kind, following one level of indirection for comments."""
        if kind in (PHASE_NOTE, ACTIVITY):
            return self.fetch_subject_context(record.engagement_id)
        if kind == COMMENT:
            return self.fetch_subject_context(self.fetch_parent_id(record.activity_id))
        # Engagements carry their own company and industry
        return None
