"""Bedrock Titan text embeddings."""

import json
import logging

from botocore.exceptions import BotoCoreError, ClientError

from embed_content.config import ModelConfig

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "...[truncated]"


class EmbeddingError(Exception):
    """The model call failed or returned an unusable vector."""


def truncate_content(content: str, max_length: int) -> str:
    """Cut content to max_length characters and mark it as truncated."""
    if len(content) <= max_length:
        return content
    return content[:max_length] + TRUNCATION_MARKER


def serialize_embedding(embedding: list[float]) -> str:
    """Stored form of a vector: a compact JSON array."""
    return json.dumps(embedding, separators=(",", ":"))


class Embedder:
    """Calls the embedding model through a shared bedrock-runtime client. No retries."""

    def __init__(self, client, model: ModelConfig):
        self.client = client
        self.model = model

    def embed(self, content: str) -> list[float]:
        """
        Embed one block of text.

        Args:
            content: Text to embed; truncated to the configured maximum length

        Returns:
            A vector of exactly `model.dimensions` floats

        Raises:
            EmbeddingError: On transport errors, malformed responses or a
                dimension mismatch
        """
        body = {
            "inputText": truncate_content(content, self.model.max_content_length),
            "dimensions": self.model.dimensions,
            "normalize": self.model.normalize,
        }

        try:
            response = self.client.invoke_model(
                modelId=self.model.model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(body),
            )
            payload = json.loads(response["body"].read())
        except (ClientError, BotoCoreError) as exc:
            raise EmbeddingError(f"invoke_model failed: {exc}") from exc
        except (KeyError, ValueError) as exc:
            raise EmbeddingError(f"unreadable model response: {exc}") from exc

        embedding = payload.get("embedding") if isinstance(payload, dict) else None
        if not isinstance(embedding, list):
            raise EmbeddingError("model response has no embedding")
        if len(embedding) != self.model.dimensions:
            raise EmbeddingError(
                f"expected {self.model.dimensions} dimensions, got {len(embedding)}"
            )

        try:
            return [float(value) for value in embedding]
        except (TypeError, ValueError) as exc:
            raise EmbeddingError(f"non-numeric embedding value: {exc}") from exc
