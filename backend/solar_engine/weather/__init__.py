"""Weather data module (hourly TMY irradiance ingestion)."""

from .tmy_parser import IrradianceRecord, has_hourly_coverage, parse_tmy_csv, records_to_arrays

__all__ = [
    "IrradianceRecord",
    "has_hourly_coverage",
    "parse_tmy_csv",
    "records_to_arrays",
]
