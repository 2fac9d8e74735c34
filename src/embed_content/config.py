"""Configuration loader for embed_content."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

CONFIG_DIR = Path(__file__).parent / "configs"

# Record kinds, in the order their origin markers are checked.
PHASE_NOTE = "PhaseNote"
ACTIVITY = "Activity"
COMMENT = "Comment"
ENGAGEMENT = "Engagement"

RECORD_KINDS = (PHASE_NOTE, ACTIVITY, COMMENT, ENGAGEMENT)

TABLE_ENV_VARS = {
    ENGAGEMENT: "ENGAGEMENT_TABLE_NAME",
    PHASE_NOTE: "PHASE_NOTE_TABLE_NAME",
    ACTIVITY: "ACTIVITY_TABLE_NAME",
    COMMENT: "COMMENT_TABLE_NAME",
}


@dataclass
class AwsConfig:
    region: str = "us-east-1"


@dataclass
class TableConfig:
    engagement: str = ""
    phase_note: str = ""
    activity: str = ""
    comment: str = ""

    def for_kind(self, kind: str) -> str:
        return {
            ENGAGEMENT: self.engagement,
            PHASE_NOTE: self.phase_note,
            ACTIVITY: self.activity,
            COMMENT: self.comment,
        }.get(kind, "")


@dataclass
class ModelConfig:
    model_id: str = "amazon.titan-embed-text-v2:0"
    dimensions: int = 512
    normalize: bool = True
    max_content_length: int = 25000


@dataclass
class PipelineConfig:
    max_workers: int = 8
    report_failures: bool = False  # False: never ask the stream to redeliver
    dry_run: bool = False


@dataclass
class Config:
    aws: AwsConfig = field(default_factory=AwsConfig)
    tables: TableConfig = field(default_factory=TableConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)

    def missing_tables(self) -> list[str]:
        """Record kinds that have no destination table configured."""
        return [kind for kind in RECORD_KINDS if not self.tables.for_kind(kind)]


def load_config(config_name: str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded Config object, with table names and region overridden by
        the environment where set.
    """
    if config_name is None:
        config_name = os.environ.get("CONFIG_ENV", "prod")

    config_path = CONFIG_DIR / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return apply_env_overrides(_parse_config(data))


def _parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object."""
    aws = AwsConfig(
        region=data.get("aws", {}).get("region", "us-east-1"),
    )

    tables = TableConfig(
        engagement=data.get("tables", {}).get("engagement") or "",
        phase_note=data.get("tables", {}).get("phase_note") or "",
        activity=data.get("tables", {}).get("activity") or "",
        comment=data.get("tables", {}).get("comment") or "",
    )

    model = ModelConfig(
        model_id=data.get("model", {}).get("model_id", "amazon.titan-embed-text-v2:0"),
        dimensions=data.get("model", {}).get("dimensions", 512),
        normalize=data.get("model", {}).get("normalize", True),
        max_content_length=data.get("model", {}).get("max_content_length", 25000),
    )

    pipeline = PipelineConfig(
        max_workers=data.get("pipeline", {}).get("max_workers", 8),
        report_failures=data.get("pipeline", {}).get("report_failures", False),
        dry_run=data.get("pipeline", {}).get("dry_run", False),
    )

    return Config(aws=aws, tables=tables, model=model, pipeline=pipeline)


def apply_env_overrides(config: Config) -> Config:
    """Override table names and region from the deployment environment."""
    if os.environ.get(TABLE_ENV_VARS[ENGAGEMENT]):
        config.tables.engagement = os.environ[TABLE_ENV_VARS[ENGAGEMENT]]
    if os.environ.get(TABLE_ENV_VARS[PHASE_NOTE]):
        config.tables.phase_note = os.environ[TABLE_ENV_VARS[PHASE_NOTE]]
    if os.environ.get(TABLE_ENV_VARS[ACTIVITY]):
        config.tables.activity = os.environ[TABLE_ENV_VARS[ACTIVITY]]
    if os.environ.get(TABLE_ENV_VARS[COMMENT]):
        config.tables.comment = os.environ[TABLE_ENV_VARS[COMMENT]]
    if os.environ.get("AWS_REGION"):
        config.aws.region = os.environ["AWS_REGION"]
    return config


# Global config instance (loaded on first access)
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (lazy-loaded)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config):
    """Set the global configuration (useful for testing)."""
    global _config
    _config = config


def reset_config():
    """Reset the global configuration (forces reload on next access)."""
    global _config
    _config = None
