"""Shared boto3 client factories."""

import logging
import os

import boto3
from botocore.config import Config as BotoConfig
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"


def resolve_region(region: str | None = None) -> str:
    """Pick the AWS region: explicit value, then AWS_REGION, then the default."""
    return region or os.environ.get("AWS_REGION") or DEFAULT_REGION


def get_dynamodb_client(region: str | None = None, max_pool_connections: int = 10):
    """Create a low-level DynamoDB client.

    The pool size should be at least the number of worker threads that
    share the client.
    """
    region = resolve_region(region)
    logger.debug("Creating DynamoDB client in %s", region)
    return boto3.client(
        "dynamodb",
        region_name=region,
        config=BotoConfig(max_pool_connections=max_pool_connections),
    )


def get_bedrock_runtime_client(region: str | None = None, max_pool_connections: int = 10):
    """Create a Bedrock Runtime client for model invocation."""
    region = resolve_region(region)
    logger.debug("Creating Bedrock Runtime client in %s", region)
    return boto3.client(
        "bedrock-runtime",
        region_name=region,
        config=BotoConfig(max_pool_connections=max_pool_connections),
    )
