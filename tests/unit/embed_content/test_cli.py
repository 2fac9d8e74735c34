"""Tests for embed_content.cli module."""

import json
from unittest.mock import MagicMock, patch

from embed_content import config as config_module
from embed_content.cli import main
from embed_content.models import BatchResult, EventOutcome

ARN = "arn:aws:dynamodb:us-east-1:123456789012:table/Comment-abc123-NONE/stream/2024-05-01T00:00:00.000"


def _write_events(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({
        "Records": [
            {
                "eventID": "e1",
                "eventName": "INSERT",
                "eventSourceARN": ARN,
                "dynamodb": {"SequenceNumber": "1", "NewImage": {"id": {"S": "c1"}, "text": {"S": "hi"}}},
            }
        ]
    }))
    return path


class TestMain:
    @patch("embed_content.cli.build_pipeline")
    def test_replays_events_with_overrides(self, mock_build, tmp_path, capsys) -> None:
        pipeline = MagicMock()
        pipeline.process_batch.return_value = BatchResult(
            outcomes=[EventOutcome(event_id="e1", kind="Comment", record_id="c1", status="skipped", reason="dry_run")]
        )
        mock_build.return_value = pipeline

        exit_code = main(["--events-file", str(_write_events(tmp_path)), "--config", "local", "--max-workers", "2"])

        assert exit_code == 0
        config = mock_build.call_args.args[0]
        assert config.pipeline.max_workers == 2
        assert config.pipeline.dry_run is True
        events = pipeline.process_batch.call_args.args[0]
        assert [e.new_image for e in events] == [{"id": "c1", "text": "hi"}]
        assert "1 events: 0 embedded, 1 skipped" in capsys.readouterr().out
        assert config_module._config is None

    @patch("embed_content.cli.build_pipeline")
    def test_failed_events_set_exit_code(self, mock_build, tmp_path) -> None:
        pipeline = MagicMock()
        pipeline.process_batch.return_value = BatchResult(
            outcomes=[EventOutcome(event_id="e1", kind="Comment", record_id="c1", status="failed", reason="x")]
        )
        mock_build.return_value = pipeline

        assert main(["--events-file", str(_write_events(tmp_path)), "--config", "local"]) == 1

    @patch("embed_content.cli.build_pipeline")
    def test_load_local_writes_outcomes(self, mock_build, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        pipeline = MagicMock()
        pipeline.process_batch.return_value = BatchResult(
            outcomes=[EventOutcome(event_id="e1", kind="Comment", record_id="c1", status="embedded")]
        )
        mock_build.return_value = pipeline

        main(["--events-file", str(_write_events(tmp_path)), "--config", "local", "--load-local"])

        files = list((tmp_path / "output").glob("embed_outcomes_*.jsonl"))
        assert len(files) == 1
        assert json.loads(files[0].read_text().strip())["record_id"] == "c1"

    @patch("embed_content.cli.build_pipeline")
    def test_empty_file(self, mock_build, tmp_path) -> None:
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"Records": []}))

        assert main(["--events-file", str(path), "--config", "local"]) == 0
        mock_build.assert_not_called()
