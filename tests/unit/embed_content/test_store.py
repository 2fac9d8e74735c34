"""Tests for embed_content.store module."""

from decimal import Decimal
from unittest.mock import MagicMock

from embed_content.store import RecordStore


class TestGetItem:
    def test_sends_typed_key_and_projection(self) -> None:
        client = MagicMock()
        client.get_item.return_value = {"Item": {"company": {"S": "Acme"}, "industry": {"S": "TECHNOLOGY"}}}

        item = RecordStore(client).get_item("Engagement-x", "e1", ["company", "industry"])

        assert item == {"company": "Acme", "industry": "TECHNOLOGY"}
        client.get_item.assert_called_once_with(
            TableName="Engagement-x",
            Key={"id": {"S": "e1"}},
            ProjectionExpression="#f0, #f1",
            ExpressionAttributeNames={"#f0": "company", "#f1": "industry"},
        )

    def test_decodes_non_string_attributes(self) -> None:
        client = MagicMock()
        client.get_item.return_value = {"Item": {"engagementId": {"S": "e1"}, "count": {"N": "3"}}}

        item = RecordStore(client).get_item("Activity-x", "a1", ["engagementId", "count"])

        assert item == {"engagementId": "e1", "count": Decimal("3")}

    def test_not_found(self) -> None:
        client = MagicMock()
        client.get_item.return_value = {}
        assert RecordStore(client).get_item("Activity-x", "a1", ["engagementId"]) is None


class TestSetEmbedding:
    def test_sets_only_embedding_with_typed_values(self) -> None:
        client = MagicMock()

        RecordStore(client).set_embedding("Comment-x", "c1", "[0.1,0.2]")

        client.update_item.assert_called_once_with(
            TableName="Comment-x",
            Key={"id": {"S": "c1"}},
            UpdateExpression="SET #embedding = :embedding",
            ExpressionAttributeNames={"#embedding": "embedding"},
            ExpressionAttributeValues={":embedding": {"S": "[0.1,0.2]"}},
        )
