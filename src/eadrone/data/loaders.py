"""Waypoint loading utilities for various formats."""

import json
import logging
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Any, Tuple

from ..core.waypoints import Waypoint
from .validators import validate_waypoint

logger = logging.getLogger(__name__)

COORDINATE_COLUMNS = ['x', 'y', 'z']


def waypoint_from_raw(raw: Any) -> Waypoint:
    """Build a Waypoint from a [x, y, z] list or {'x', 'y', 'z'} dict.

    Raises:
        ValueError: If the data is not a valid waypoint
    """
    is_valid, errors = validate_waypoint(raw)
    if not is_valid:
        raise ValueError(f"Invalid waypoint {raw!r}: {'; '.join(errors)}")

    if isinstance(raw, dict):
        return Waypoint(float(raw['x']), float(raw['y']), float(raw['z']))
    x, y, z = raw
    return Waypoint(float(x), float(y), float(z))


def load_waypoints_from_table(file_path: Path) -> Tuple[Waypoint, ...]:
    """Load waypoints from a CSV or TSV file with x, y, z columns.

    Rows are kept in file order. Files ending in ``.csv`` are read as
    comma-separated, everything else as tab-separated.

    Args:
        file_path: Path to CSV/TSV file

    Returns:
        Tuple of waypoints

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If coordinate columns are missing or non-numeric
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    sep = ',' if file_path.suffix.lower() == '.csv' else '\t'
    df = pd.read_csv(file_path, sep=sep)
    df.columns = [str(col).strip().lower() for col in df.columns]

    missing_cols = set(COORDINATE_COLUMNS) - set(df.columns)
    if missing_cols:
        raise ValueError(f"Missing required columns: {sorted(missing_cols)}")

    try:
        coords = df[COORDINATE_COLUMNS].astype(float)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Non-numeric coordinates in {file_path}: {e}")

    if coords.isna().any().any():
        raise ValueError(f"Missing coordinate values in {file_path}")

    if not np.isfinite(coords.values).all():
        raise ValueError(f"Non-finite coordinate values in {file_path}")

    waypoints = tuple(Waypoint(row.x, row.y, row.z) for row in coords.itertuples(index=False))
    logger.debug(f"Loaded {len(waypoints)} waypoints from {file_path}")
    return waypoints


def load_waypoints_from_json(file_path: Path) -> Tuple[Waypoint, ...]:
    """Load waypoints from a JSON file.

    The file holds either a list of waypoints or an object with a
    ``waypoints`` list.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON is malformed or a waypoint is invalid
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")

    if isinstance(data, dict):
        data = data.get('waypoints')
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of waypoints in {file_path}")

    waypoints = tuple(waypoint_from_raw(item) for item in data)
    logger.debug(f"Loaded {len(waypoints)} waypoints from {file_path}")
    return waypoints


def load_waypoints(file_path: Path) -> Tuple[Waypoint, ...]:
    """Load waypoints from a JSON, CSV or TSV file based on its suffix."""
    file_path = Path(file_path)
    if file_path.suffix.lower() == '.json':
        return load_waypoints_from_json(file_path)
    return load_waypoints_from_table(file_path)
