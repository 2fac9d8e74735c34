"""Build the text that gets embedded for each record kind."""

from typing import Optional

from common.utils import humanize_enum, is_blank
from embed_content.config import ACTIVITY, COMMENT, ENGAGEMENT, PHASE_NOTE
from embed_content.models import (
    ActivitySnapshot,
    CommentSnapshot,
    EngagementSnapshot,
    EnrichmentContext,
    PhaseNoteSnapshot,
    Snapshot,
)

DEFAULT_ACTIVITY_TYPE = "Activity"
UNKNOWN = "Unknown"


def has_embeddable_content(kind: str, record: Snapshot) -> bool:
    """Whether the record carries any text worth embedding."""
    if kind == ENGAGEMENT:
        return not (is_blank(record.competitor_notes) and is_blank(record.closed_reason))
    if kind == ACTIVITY:
        return not is_blank(record.description)
    if kind in (PHASE_NOTE, COMMENT):
        return not is_blank(record.text)
    return False


def _context_lines(enrichment: Optional[EnrichmentContext]) -> list[str]:
    if enrichment is None:
        return []
    return [f"Company: {enrichment.company}", f"Industry: {enrichment.industry}"]


def _build_engagement(record: EngagementSnapshot, enrichment: Optional[EnrichmentContext]) -> str:
    # Engagements carry their own context; enrichment is never looked up.
    parts = [
        f"Company: {record.company or UNKNOWN}",
        f"Industry: {humanize_enum(record.industry)}",
    ]
    if record.competitor_notes:
        parts.append(f"Competitor Notes: {record.competitor_notes}")
    if record.closed_reason:
        parts.append(f"Closed Reason: {record.closed_reason}")
    return "\n".join(parts)


def _build_phase_note(record: PhaseNoteSnapshot, enrichment: Optional[EnrichmentContext]) -> str:
    parts = _context_lines(enrichment)
    parts.append(f"Phase: {humanize_enum(record.phase_type)}")
    parts.append(f"Content: {record.text}")
    return "\n".join(parts)


def _build_activity(record: ActivitySnapshot, enrichment: Optional[EnrichmentContext]) -> str:
    parts = _context_lines(enrichment)
    parts.append(f"Type: {record.type or DEFAULT_ACTIVITY_TYPE}")
    parts.append(f"Content: {record.description}")
    return "\n".join(parts)


def _build_comment(record: CommentSnapshot, enrichment: Optional[EnrichmentContext]) -> str:
    parts = _context_lines(enrichment)
    parts.append(f"Content: {record.text}")
    return "\n".join(parts)


_BUILDERS = {
    ENGAGEMENT: _build_engagement,
    PHASE_NOTE: _build_phase_note,
    ACTIVITY: _build_activity,
    COMMENT: _build_comment,
}


def build_content(
    kind: str,
    record: Snapshot,
    enrichment: Optional[EnrichmentContext] = None,
) -> Optional[str]:
    """
    Assemble the labelled text block for a record.

    The output is a pure function of its inputs, so re-processing the same
    event yields the same text (and the same vector).

    Args:
        kind: Record kind (Engagement, PhaseNote, Activity, Comment)
        record: Typed snapshot of the record's new image
        enrichment: Company/industry of the owning engagement, if resolved

    Returns:
        Newline-joined content, or None when there is nothing to embed
    """
    if not has_embeddable_content(kind, record):
        return None
    return _BUILDERS[kind](record, enrichment)
