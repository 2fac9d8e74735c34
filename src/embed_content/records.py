"""Record classification, snapshot decoding and change relevance."""

import logging
from typing import Any, Optional

from common.utils import get_string
from embed_content.config import ACTIVITY, COMMENT, ENGAGEMENT, PHASE_NOTE
from embed_content.models import (
    ActivitySnapshot,
    CommentSnapshot,
    EngagementSnapshot,
    PhaseNoteSnapshot,
    Snapshot,
)

logger = logging.getLogger(__name__)

# Checked in order against the stream ARN, e.g.
# arn:aws:dynamodb:us-east-1:123:table/PhaseNote-abc123-NONE/stream/2024-...
ORIGIN_MARKERS = (
    ("/PhaseNote-", PHASE_NOTE),
    ("/Activity-", ACTIVITY),
    ("/Comment-", COMMENT),
    ("/Engagement-", ENGAGEMENT),
)


def classify(source_arn: Optional[str]) -> Optional[str]:
    """Map a stream source ARN to a record kind, or None for unknown tables."""
    if not source_arn:
        return None
    for marker, kind in ORIGIN_MARKERS:
        if marker in source_arn:
            return kind
    return None


def snapshot_from_image(kind: str, image: Optional[dict[str, Any]]) -> Optional[Snapshot]:
    """Convert a decoded record image into the typed snapshot for its kind."""
    if image is None:
        return None

    if kind == ENGAGEMENT:
        return EngagementSnapshot(
            id=get_string(image, "id"),
            company=get_string(image, "company"),
            industry=get_string(image, "industry"),
            competitor_notes=get_string(image, "competitorNotes"),
            closed_reason=get_string(image, "closedReason"),
        )
    if kind == PHASE_NOTE:
        return PhaseNoteSnapshot(
            id=get_string(image, "id"),
            engagement_id=get_string(image, "engagementId"),
            phase_type=get_string(image, "phaseType"),
            text=get_string(image, "text"),
        )
    if kind == ACTIVITY:
        return ActivitySnapshot(
            id=get_string(image, "id"),
            engagement_id=get_string(image, "engagementId"),
            type=get_string(image, "type"),
            description=get_string(image, "description"),
        )
    if kind == COMMENT:
        return CommentSnapshot(
            id=get_string(image, "id"),
            activity_id=get_string(image, "activityId"),
            text=get_string(image, "text"),
        )

    raise ValueError(f"Unknown record kind: {kind}")


def is_embedding_relevant(
    kind: str,
    old: Optional[Snapshot],
    new: Optional[Snapshot],
) -> bool:
    """Whether an update touched any field that feeds the embedding.

    Only engagements are filtered; they change often for reasons that never
    reach the embedded text (status, owners, integration links). Every other
    kind is always relevant.
    """
    if kind != ENGAGEMENT:
        return True

    old_notes = (old.competitor_notes if old else None) or ""
    new_notes = (new.competitor_notes if new else None) or ""
    old_reason = (old.closed_reason if old else None) or ""
    new_reason = (new.closed_reason if new else None) or ""

    return old_notes != new_notes or old_reason != new_reason
