# persistence.py
"""
CSV storage for sample series.

Layout:
    Time,Value
    0,0
    0.001,0.00628314
    ...

Numbers use the %g format (six significant digits).
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from src.waveforms.errors import PersistenceFailure
from src.waveforms.sampler import Sample

logger = logging.getLogger(__name__)

HEADER = ("Time", "Value")


def _fmt(x: float) -> str:
    return f"{x:g}"


def write_csv(path: Union[str, Path], series: Iterable[Sample]) -> Path:
    """Write `series` to `path` in series order and return the path written."""
    p = Path(path)
    rows = 0
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(HEADER)
            for time, value in series:
                writer.writerow((_fmt(time), _fmt(value)))
                rows += 1
    except OSError as e:
        raise PersistenceFailure(f"Failed to open file for writing: {p}") from e
    logger.debug("Wrote %d samples to %s", rows, p)
    return p


def read_csv(path: Union[str, Path]) -> List[Sample]:
    """Load a series written by write_csv."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open(newline="") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None or tuple(header) != HEADER:
            raise ValueError(f"{p.name}: expected header 'Time,Value', got {header!r}")
        series = []
        for line_no, row in enumerate(reader, start=2):
            if len(row) != 2:
                raise ValueError(f"{p.name}:{line_no}: expected 2 columns, got {len(row)}")
            try:
                series.append(Sample(float(row[0]), float(row[1])))
            except ValueError as e:
                raise ValueError(f"{p.name}:{line_no}: not a number: {row!r}") from e
    return series
