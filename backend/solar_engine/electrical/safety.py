"""Electrical safety checks for a string design.

Six independent predicates compare the string voltages at the design
temperature extremes (and the DC cable drop) against the inverter's
limits.  The result is advisory: nothing here raises, and an infeasible
array (zero modules per string) simply fails the MPPT-floor check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import DEFAULT_CABLE_TEMP_C, VOLTAGE_DROP_LIMIT_PCT
from ..equipment import Inverter, PVModule, SystemConfig
from .cable import voltage_drop
from .temperature import TemperatureVoltages

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StringVoltages:
    """String voltages (V) for ``series_modules`` modules in series."""

    voc_winter: float   # highest voltage the inverter can see
    vmp_summer: float   # lowest operating voltage
    voc_summer: float   # open-circuit voltage on a hot morning (start-up)
    vmp_winter: float   # highest operating voltage


@dataclass(frozen=True)
class SafetyCheck:
    is_voc_safe: bool
    is_vmp_min_safe: bool
    is_vmp_max_safe: bool
    is_current_safe: bool
    is_startup_safe: bool
    is_voltage_drop_safe: bool
    voltage_drop_pct: float

    @property
    def passed(self) -> bool:
        """Overall verdict: every predicate must hold."""
        return all(
            (
                self.is_voc_safe,
                self.is_vmp_min_safe,
                self.is_vmp_max_safe,
                self.is_current_safe,
                self.is_startup_safe,
                self.is_voltage_drop_safe,
            )
        )

    def failures(self) -> list[str]:
        """Names of the predicates that do not hold."""
        return [
            name
            for name in (
                "is_voc_safe",
                "is_vmp_min_safe",
                "is_vmp_max_safe",
                "is_current_safe",
                "is_startup_safe",
                "is_voltage_drop_safe",
            )
            if not getattr(self, name)
        ]


def string_voltages(series_modules: int, temps: TemperatureVoltages) -> StringVoltages:
    return StringVoltages(
        voc_winter=series_modules * temps.voc_winter,
        vmp_summer=series_modules * temps.vmp_summer,
        voc_summer=series_modules * temps.voc_summer,
        vmp_winter=series_modules * temps.vmp_winter,
    )


def evaluate_safety(
    module: PVModule,
    inverter: Inverter,
    config: SystemConfig,
    series_modules: int,
    temps: TemperatureVoltages,
) -> SafetyCheck:
    """Evaluate the six safety predicates for one string.

    The voltage drop is computed for the string's max-power current over
    the configured DC run and expressed relative to the STC string
    operating voltage.  Current headroom is checked per string; how
    strings fan out across MPPT channels is left to the caller.
    """
    strings = string_voltages(series_modules, temps)

    v_drop = voltage_drop(
        module.imp,
        config.cable_length,
        config.cable_cross_section,
        config.cable_material or "copper",
        config.cable_temp if config.cable_temp is not None else DEFAULT_CABLE_TEMP_C,
    )
    operating_voltage = series_modules * module.vmp
    drop_pct = (v_drop / operating_voltage) * 100.0 if operating_voltage > 0 else 0.0

    check = SafetyCheck(
        is_voc_safe=strings.voc_winter < inverter.max_input_voltage,
        is_vmp_min_safe=(strings.vmp_summer - v_drop) > inverter.min_mppt_voltage,
        is_vmp_max_safe=strings.vmp_winter < inverter.max_mppt_voltage,
        is_current_safe=module.isc < inverter.max_short_circuit_current,
        is_startup_safe=strings.voc_summer > inverter.startup_voltage,
        is_voltage_drop_safe=drop_pct < VOLTAGE_DROP_LIMIT_PCT,
        voltage_drop_pct=drop_pct,
    )

    if not check.passed:
        logger.warning("Safety check failed: %s", ", ".join(check.failures()))
    return check
