from __future__ import annotations

"""Versioned JSON summary of a batch of autopilot games."""

import json
from pathlib import Path
from typing import Any

SCHEMA_VERSION = 1

TRACK_FIELDS = ("width", "height")
STAT_FIELDS = (
    "avg_alive",
    "std_alive",
    "min_alive",
    "max_alive",
    "avg_score",
    "std_score",
    "best_score",
    "crash_rate",
)
PER_RUN_FIELDS = ("alive_ticks", "scores")


class SummarySchemaError(ValueError):
    """A saved simulation summary is missing fields or comes from a newer writer."""


def build_summary(width: int, height: int, results: dict[str, Any]) -> dict[str, Any]:
    """Flatten `run_simulations` output into the on-disk summary layout.

    Per-run dicts are dropped; only their tick and score columns are kept.
    """
    runs = results.get("runs", [])
    summary: dict[str, Any] = {"width": width, "height": height}
    for key in STAT_FIELDS:
        summary[key] = results[key]
    summary["alive_ticks"] = [r["alive_ticks"] for r in runs]
    summary["scores"] = [r["score"] for r in runs]
    return summary


def validate_summary(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SummarySchemaError(f"Expected a JSON object, got {type(data).__name__}")
    version = data.get("schema_version", 0)
    if version > SCHEMA_VERSION:
        raise SummarySchemaError(f"schema_version {version} is newer than supported ({SCHEMA_VERSION})")
    missing = [k for k in TRACK_FIELDS + STAT_FIELDS + PER_RUN_FIELDS if k not in data]
    if missing:
        raise SummarySchemaError(f"Summary is missing fields: {', '.join(missing)}")
    if len(data["alive_ticks"]) != len(data["scores"]):
        raise SummarySchemaError(
            f"alive_ticks has {len(data['alive_ticks'])} entries but scores has {len(data['scores'])}"
        )
    return data


def save_summary_json(path: Path, summary: dict[str, Any]) -> Path:
    path = Path(path)
    data = validate_summary({"schema_version": SCHEMA_VERSION, **summary})
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    return path


def load_summary_json(path: Path) -> dict[str, Any]:
    """Read a saved summary. Files written before versioning read as version 0."""
    with open(path, "r") as f:
        data = json.load(f)
    if isinstance(data, dict) and "schema_version" not in data:
        data = {"schema_version": 0, **data}
    return validate_summary(data)
