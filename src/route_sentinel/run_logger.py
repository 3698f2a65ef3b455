"""Run logger for recording the stages of an assessment to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from route_sentinel.data import Usage


class StageRecord(BaseModel):
    """Record of a single assessment stage."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    usage: dict[str, Any] | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of a complete assessment run."""

    run_id: str
    route: str
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    succeeded: bool = False
    error: str | None = None
    total_usage: dict[str, Any] | None = None


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, lists, dicts, and primitives.
    For Usage objects, includes computed token totals.
    """
    if obj is None:
        return None
    if isinstance(obj, Usage):
        return {
            "api_calls": [_serialize(c) for c in obj.api_calls],
            "input_tokens": obj.input_tokens,
            "output_tokens": obj.output_tokens,
        }
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Builds one RunRecord per assessment and writes it as a JSON file.

    Records are handed back to the caller rather than held on the logger, so
    concurrent assessments never share state. When ``enabled=False``,
    ``start_run`` returns None and every other method is a no-op.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, route: str) -> RunRecord | None:
        """Create a new run record for *route*, or None if disabled."""
        if not self._enabled:
            return None
        return RunRecord(
            run_id=str(uuid.uuid4()),
            route=route,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        record: RunRecord | None,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        usage: Usage | None,
        duration_seconds: float,
    ) -> None:
        """Append a stage record to *record*.

        Args:
            record: Run record returned by ``start_run``.
            stage: Stage name (e.g. "news_lookup", "assessment").
            component: Component class name.
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            usage: Usage for this stage (None for non-LLM stages).
            duration_seconds: Wall-clock time for this stage.
        """
        if record is None:
            return

        record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_serialize(input_data),
                output=_serialize(output_data),
                usage=_serialize(usage) if usage is not None else None,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        record: RunRecord | None,
        usage: Usage | None,
        *,
        error: BaseException | None = None,
    ) -> Path | None:
        """Write *record* to a JSON file.

        Args:
            record: Run record returned by ``start_run``.
            usage: Total accumulated usage.
            error: The exception that ended the run, if it failed.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if record is None:
            return None

        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.succeeded = error is None
        record.error = f"{type(error).__name__}: {error}" if error is not None else None
        record.total_usage = _serialize(usage) if usage is not None else None

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # run_2026-02-12T14-30-00_<id>.json (colons → dashes)
        ts = record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"run_{ts}_{record.run_id[:8]}.json"

        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
