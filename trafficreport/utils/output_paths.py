"""Conventional artifact names for API scenario runs.

Pure string helpers used by the code that drives scenario replays. Paths use
``/`` separators regardless of platform and are never validated; malformed
input yields a best-effort string.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

_DIR_PREFIX_RE = re.compile(r"^.*[\\/]")


def default_quality_report_file_path(report_file_path: str) -> str:
    """Place the quality report beside a run report: ``x.json`` -> ``x/report.json``."""
    return report_file_path.replace(".json", "/report.json", 1)


def default_collection_file_name(scenario_file_name: str, run_id: str) -> str:
    return f"{scenario_file_name}/{run_id}/collection.json"


def default_env_file_name(scenario_file_name: str, run_id: str) -> str:
    return f"{scenario_file_name}/{run_id}/env.json"


def default_newman_report(
    scenario_file_name: str, run_id: str, scenario_name: str
) -> str:
    return f"{scenario_file_name}/{run_id}/{scenario_name}.json"


def default_newman_dir(scenario_file_name: str, run_id: str) -> str:
    return f"{scenario_file_name}/{run_id}"


def get_file_name_from_path(file_path: str) -> str:
    """Return the final path segment with the first ``.yaml`` removed.

    Both ``/`` and ``\\`` count as separators.
    """
    return _DIR_PREFIX_RE.sub("", file_path).replace(".yaml", "", 1)


def blob_name_date_postfix(name: str, now: Optional[datetime] = None) -> str:
    """Append the current UTC date: ``name`` -> ``name_YYYY-MM-DD``."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return f"{name}_{now.date().isoformat()}"


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
