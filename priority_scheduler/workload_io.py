from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

from .errors import WorkloadError
from .models import Process

logger = logging.getLogger(__name__)

FIELDS = ("pid", "arrival_time", "burst_time", "priority")


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects,
    in file order.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.debug("loaded %d process(es) from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[Process]:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except UnicodeDecodeError as exc:
        raise WorkloadError(f"{path} is not valid UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise WorkloadError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))
    except UnicodeDecodeError as exc:
        raise WorkloadError(f"{path} is not valid UTF-8") from exc
    except csv.Error as exc:
        raise WorkloadError(f"Invalid CSV in {path}: {exc}") from exc

    return [_process_from_mapping(row) for row in rows]


def _to_int(value: Any) -> int:
    # JSON numbers must already be integers; CSV cells arrive as strings.
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"expected an integer, got {value!r}")
    return int(value)


def _process_from_mapping(mapping: Mapping[str, Any]) -> Process:
    try:
        values = {name: _to_int(mapping[name]) for name in FIELDS}
    except (KeyError, TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc

    return Process(**values)
