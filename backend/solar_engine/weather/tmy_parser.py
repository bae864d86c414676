"""TMY (Typical Meteorological Year) hourly irradiance ingestion.

Meteorological-service exports carry a variable block of metadata lines
before the actual data table, may use ``,`` or ``;`` as delimiter, and
label their columns in Korean (년/월/일/시간/풍속/일사량) or English
(year/month/day/hour/wind/ghi).  The parser locates the header row by
keyword and maps the columns it needs.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np

from ..constants import MIN_TMY_RECORDS

logger = logging.getLogger(__name__)

HEADER_SEARCH_LINES: int = 50

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_UNCERTAINTY = "불확도"


@dataclass(frozen=True)
class IrradianceRecord:
    """One hourly weather record."""

    year: int
    month: int
    day: int
    hour: int
    wind_speed: float  # m/s
    ghi: float  # Global Horizontal Irradiance (W/m² averaged over the hour)
    wind_speed_uncertainty: float = 0.0
    ghi_uncertainty: float = 0.0


def has_hourly_coverage(records, minimum: int = MIN_TMY_RECORDS) -> bool:
    """True when enough in-year records (month 1..12) are present to run an hourly simulation."""
    if records is None:
        return False
    return sum(1 for r in records if 1 <= r.month <= 12) >= minimum


def records_to_arrays(records) -> dict[str, np.ndarray]:
    """Column-wise numpy view of the records used for vectorised accumulation."""
    return {
        "month": np.array([r.month for r in records], dtype=np.int64),
        "hour": np.array([r.hour for r in records], dtype=np.int64),
        "ghi": np.array([r.ghi for r in records], dtype=np.float64),
    }


def _leading_number(text: str) -> float | None:
    match = _NUMBER_RE.match(text.strip())
    if match is None:
        return None
    return float(match.group(0))


def _as_int(text: str) -> int:
    value = _leading_number(text)
    return int(value) if value is not None else 0


def _as_float(text: str) -> float:
    value = _leading_number(text)
    return value if value is not None else 0.0


def _find_header(lines: list[str]) -> tuple[int, list[str], str]:
    for i, line in enumerate(lines[:HEADER_SEARCH_LINES]):
        delimiter = ";" if ";" in line else ","
        parts = [p.strip() for p in line.split(delimiter)]
        lowered = [p.lower() for p in parts]

        has_time = any(
            "시간" in p or "hour" in lp or "time" in lp for p, lp in zip(parts, lowered)
        )
        has_ghi = any(
            "일사량" in p or "ghi" in lp or "irradiance" in lp for p, lp in zip(parts, lowered)
        )
        if has_time and has_ghi:
            return i, parts, delimiter

    raise ValueError("No TMY header row found (needs an hour/time and a GHI column)")


def _column(headers: list[str], keywords: list[str]) -> int:
    for idx, header in enumerate(headers):
        lowered = header.lower()
        if any(k.lower() in lowered for k in keywords):
            return idx
    return -1


def _measure_column(headers: list[str], keywords: list[str], uncertainty: bool) -> int:
    for idx, header in enumerate(headers):
        lowered = header.lower()
        if any(k in header or k in lowered for k in keywords) and (_UNCERTAINTY in header) == uncertainty:
            return idx
    return -1


def parse_tmy_csv(csv_text: str) -> list[IrradianceRecord]:
    """Parse a TMY CSV export into hourly irradiance records.

    Rows shorter than the header are skipped, as are rows whose month is
    outside 1..12.  Unparseable numeric cells read as 0.

    Raises
    ------
    ValueError
        If no header row is found within the first lines, or the month,
        hour or GHI column is missing.
    """
    lines = [line.strip() for line in csv_text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return []

    header_index, headers, delimiter = _find_header(lines)

    idx_year = _column(headers, ["년", "year"])
    idx_month = _column(headers, ["월", "month"])
    idx_day = _column(headers, ["일", "day"])
    idx_hour = _column(headers, ["시간", "hour", "time"])
    idx_wind = _measure_column(headers, ["풍속", "wind"], uncertainty=False)
    idx_ghi = _measure_column(headers, ["일사량", "ghi"], uncertainty=False)
    idx_wind_unc = _measure_column(headers, ["풍속", "wind"], uncertainty=True)
    idx_ghi_unc = _measure_column(headers, ["일사량", "ghi"], uncertainty=True)

    if idx_month < 0 or idx_hour < 0 or idx_ghi < 0:
        raise ValueError("TMY CSV is missing a required column (month, hour, GHI)")

    def cell(cols: list[str], idx: int) -> str:
        return cols[idx] if idx > -1 else ""

    records: list[IrradianceRecord] = []
    for line in lines[header_index + 1:]:
        cols = [c.strip() for c in line.split(delimiter)]
        if len(cols) < len(headers):
            continue

        month = _as_int(cols[idx_month])
        if not 1 <= month <= 12:
            continue

        records.append(
            IrradianceRecord(
                year=_as_int(cell(cols, idx_year)),
                month=month,
                day=_as_int(cell(cols, idx_day)),
                hour=_as_int(cols[idx_hour]),
                wind_speed=_as_float(cell(cols, idx_wind)),
                ghi=_as_float(cols[idx_ghi]),
                wind_speed_uncertainty=_as_float(cell(cols, idx_wind_unc)),
                ghi_uncertainty=_as_float(cell(cols, idx_ghi_unc)),
            )
        )

    logger.info("Parsed %d TMY records (header at line %d)", len(records), header_index + 1)
    return records
