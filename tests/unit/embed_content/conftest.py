"""Shared fixtures for embed_content tests."""

import pytest

from embed_content.config import Config, TableConfig, reset_config
from embed_content.handler import reset_pipeline


@pytest.fixture
def config() -> Config:
    return Config(
        tables=TableConfig(
            engagement="Engagement-abc123-NONE",
            phase_note="PhaseNote-abc123-NONE",
            activity="Activity-abc123-NONE",
            comment="Comment-abc123-NONE",
        ),
    )


@pytest.fixture(autouse=True)
def reset_globals():
    yield
    reset_config()
    reset_pipeline()
