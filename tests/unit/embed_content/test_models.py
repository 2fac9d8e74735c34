"""Tests for embed_content.models module."""

from embed_content.models import BatchResult, EventOutcome


def _outcome(status, sequence_number="1"):
    return EventOutcome(
        event_id="e", kind="Comment", record_id="c", status=status, sequence_number=sequence_number
    )


class TestBatchResult:
    def test_counts(self) -> None:
        result = BatchResult(
            outcomes=[
                _outcome("embedded"),
                _outcome("skipped"),
                _outcome("model_failed"),
                _outcome("failed", "9"),
            ]
        )

        assert result.total == 4
        assert result.succeeded == 2
        assert result.embedded == 1
        assert result.skipped == 1
        assert result.model_failed == 1
        assert result.failed == 1

    def test_batch_item_failures_lists_write_failures(self) -> None:
        result = BatchResult(
            outcomes=[_outcome("failed", "9"), _outcome("model_failed", "10"), _outcome("failed", None)]
        )
        assert result.batch_item_failures() == [{"itemIdentifier": "9"}]

    def test_empty(self) -> None:
        result = BatchResult()
        assert result.total == 0
        assert result.batch_item_failures() == []
