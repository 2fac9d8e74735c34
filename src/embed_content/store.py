"""DynamoDB access for record lookups and embedding writes."""

import logging
from typing import Any, Optional

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

logger = logging.getLogger(__name__)

EMBEDDING_FIELD = "embedding"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def _key(record_id: str) -> dict[str, Any]:
    return {"id": _serializer.serialize(record_id)}


class RecordStore:
    """Thin wrapper over a shared low-level boto3 DynamoDB client.

    Low-level clients are thread safe, so one client serves every worker
    thread. Values cross the boundary in attribute-value form.
    """

    def __init__(self, client):
        self._client = client

    def get_item(self, table_name: str, record_id: str, fields: list[str]) -> Optional[dict[str, Any]]:
        """
        Point-read a record by id, projecting only the requested fields.

        Returns:
            The projected item as plain values, or None when the id does not exist

        Raises:
            botocore.exceptions.ClientError / BotoCoreError on transport errors
        """
        # text, type, etc. are reserved words, so every field goes through a placeholder
        names = {f"#f{i}": name for i, name in enumerate(fields)}
        response = self._client.get_item(
            TableName=table_name,
            Key=_key(record_id),
            ProjectionExpression=", ".join(names),
            ExpressionAttributeNames=names,
        )
        item = response.get("Item")
        if item is None:
            return None
        return {name: _deserializer.deserialize(value) for name, value in item.items()}

    def set_embedding(self, table_name: str, record_id: str, embedding: str) -> None:
        """Set the serialized embedding on a record without touching other attributes."""
        self._client.update_item(
            TableName=table_name,
            Key=_key(record_id),
            UpdateExpression="SET #embedding = :embedding",
            ExpressionAttributeNames={"#embedding": EMBEDDING_FIELD},
            ExpressionAttributeValues={":embedding": _serializer.serialize(embedding)},
        )
        logger.debug("Wrote embedding to %s/%s", table_name, record_id)
