"""Temperature correction of module voltages.

Module voltages rise on cold days and sag in the heat.  Datasheets quote
them at 25 degC together with a linear coefficient in %/degC, which is
all the string sizing needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import STC_TEMPERATURE_C
from ..equipment import PVModule, SystemConfig


def corrected_voltage(base_voltage: float, temp_coeff_pct: float, target_temp_c: float) -> float:
    """Voltage at *target_temp_c* given the 25 degC value and its %/degC coefficient."""
    return base_voltage * (1.0 + (temp_coeff_pct / 100.0) * (target_temp_c - STC_TEMPERATURE_C))


@dataclass(frozen=True)
class TemperatureVoltages:
    """Per-module voltages at the site's design temperature extremes."""

    voc_winter: float
    voc_summer: float
    vmp_summer: float
    vmp_winter: float


def module_voltages_at_extremes(module: PVModule, config: SystemConfig) -> TemperatureVoltages:
    """Correct Voc and Vmp for the winter low and summer high.

    The Voc coefficient is applied to Vmp as well; datasheets rarely
    publish a separate Vmp coefficient.
    """
    coeff = module.temp_coefficients.voc
    return TemperatureVoltages(
        voc_winter=corrected_voltage(module.voc, coeff, config.ambient_temp_winter),
        voc_summer=corrected_voltage(module.voc, coeff, config.ambient_temp_summer),
        vmp_summer=corrected_voltage(module.vmp, coeff, config.ambient_temp_summer),
        vmp_winter=corrected_voltage(module.vmp, coeff, config.ambient_temp_winter),
    )
