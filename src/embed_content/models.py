"""Data models for the embed_content pipeline."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from boto3.dynamodb.types import TypeDeserializer

logger = logging.getLogger(__name__)

# Stream event names
INSERT = "INSERT"
MODIFY = "MODIFY"
REMOVE = "REMOVE"

# Outcome statuses
EMBEDDED = "embedded"
SKIPPED = "skipped"
MODEL_FAILED = "model_failed"
FAILED = "failed"

_ATTRIBUTE_TYPES = {"S", "N", "B", "SS", "NS", "BS", "M", "L", "NULL", "BOOL"}
_deserializer = TypeDeserializer()


def _is_attribute_value(value: Any) -> bool:
    return isinstance(value, dict) and len(value) == 1 and next(iter(value)) in _ATTRIBUTE_TYPES


def deserialize_image(image: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Decode a stream image from attribute-value JSON into plain Python values.

    Values that are already plain pass through unchanged. An attribute that
    cannot be decoded is dropped.
    """
    if image is None:
        return None

    decoded = {}
    for name, value in image.items():
        if not _is_attribute_value(value):
            decoded[name] = value
            continue
        try:
            decoded[name] = _deserializer.deserialize(value)
        except (TypeError, ValueError, ArithmeticError, AttributeError) as exc:
            logger.warning("Dropping undecodable attribute %s: %s", name, exc)
    return decoded


@dataclass
class ChangeEvent:
    """One decoded record from the change stream."""
    event_name: str
    source_arn: str
    new_image: Optional[dict[str, Any]] = None
    old_image: Optional[dict[str, Any]] = None
    event_id: Optional[str] = None
    sequence_number: Optional[str] = None

    @classmethod
    def from_stream_record(cls, raw: dict[str, Any]) -> "ChangeEvent":
        """Build an event from one DynamoDB Streams Lambda record."""
        dynamodb = raw.get("dynamodb") or {}
        return cls(
            event_name=raw.get("eventName") or "",
            source_arn=raw.get("eventSourceARN") or "",
            new_image=deserialize_image(dynamodb.get("NewImage")),
            old_image=deserialize_image(dynamodb.get("OldImage")),
            event_id=raw.get("eventID"),
            sequence_number=dynamodb.get("SequenceNumber"),
        )

    @property
    def is_delete(self) -> bool:
        return self.event_name == REMOVE

    @property
    def is_update(self) -> bool:
        return self.event_name == MODIFY


@dataclass
class EngagementSnapshot:
    id: Optional[str] = None
    company: Optional[str] = None
    industry: Optional[str] = None
    competitor_notes: Optional[str] = None
    closed_reason: Optional[str] = None


@dataclass
class PhaseNoteSnapshot:
    id: Optional[str] = None
    engagement_id: Optional[str] = None
    phase_type: Optional[str] = None
    text: Optional[str] = None


@dataclass
class ActivitySnapshot:
    id: Optional[str] = None
    engagement_id: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None


@dataclass
class CommentSnapshot:
    id: Optional[str] = None
    activity_id: Optional[str] = None
    text: Optional[str] = None


Snapshot = EngagementSnapshot | PhaseNoteSnapshot | ActivitySnapshot | CommentSnapshot


@dataclass
class EnrichmentContext:
    """Display context resolved from the owning engagement."""
    company: str
    industry: str


@dataclass
class EventOutcome:
    """Terminal result of processing one change event."""
    event_id: Optional[str]
    kind: Optional[str]
    record_id: Optional[str]
    status: str
    reason: Optional[str] = None
    sequence_number: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """Embedded and skipped events both count as handled."""
        return self.status in (EMBEDDED, SKIPPED)


@dataclass
class BatchResult:
    """Per-event outcomes for one stream batch."""
    outcomes: list[EventOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == FAILED)

    @property
    def model_failed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == MODEL_FAILED)

    @property
    def embedded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == EMBEDDED)

    @property
    def skipped(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == SKIPPED)

    def batch_item_failures(self) -> list[dict[str, str]]:
        """Stream items to redeliver: write failures that carry a sequence number."""
        return [
            {"itemIdentifier": outcome.sequence_number}
            for outcome in self.outcomes
            if outcome.status == FAILED and outcome.sequence_number
        ]
