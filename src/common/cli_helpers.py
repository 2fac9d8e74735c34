"""Common CLI helper utilities."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging format for CLI tools and the Lambda runtime.

    The level comes from ``level``, then the LOG_LEVEL env var, then INFO.
    """
    level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    # The Lambda runtime installs its own handler before our code runs,
    # which makes basicConfig a no-op; set the level explicitly.
    logging.getLogger().setLevel(level)


def load_json_file(path: str | Path) -> Any:
    """Read a JSON document from disk."""
    with open(path) as f:
        return json.load(f)


def save_jsonl_local(
    records: list[dict[str, Any]],
    prefix: str,
    timestamp: datetime,
    output_dir: str = "output",
) -> Path:
    """Save records to a local JSONL file.

    Args:
        records: List of dictionaries to save.
        prefix: Filename prefix (e.g., "embed_outcomes").
        timestamp: Timestamp to include in filename.
        output_dir: Directory to save to (default: "output").

    Returns:
        Path to the created file.
    """
    output_path = Path(output_dir)
    output_path.mkdir(exist_ok=True)
    filename = f"{prefix}_{timestamp.strftime('%Y_%m_%d_%H_%M')}.jsonl"
    filepath = output_path / filename
    with filepath.open("w") as f:
        for record in records:
            f.write(json.dumps(record, default=str, ensure_ascii=False) + "\n")
    return filepath
