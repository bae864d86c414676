"""Array configuration optimiser.

Sizes the string length and string count for a module/inverter pair and
a target DC capacity.

The string length is bounded on two sides:

* the coldest day, when open-circuit voltage peaks, must not push the
  string above the inverter's absolute input ceiling, and
* the hottest day, when operating voltage sags, must keep the string
  above the inverter's MPPT floor.

Within those bounds the longest string is chosen, which minimises the
number of strings (and so combiner, cabling and connector cost).  An
empty window is reported as ``series_modules == 0`` rather than raised.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from ..constants import BIFACIALITY_FACTOR, MAX_HEIGHT_FACTOR
from ..equipment import Inverter, PVModule, SystemConfig
from .inverter_groups import InverterGroup, allocate_strings, describe_configuration
from .safety import SafetyCheck, StringVoltages, evaluate_safety, string_voltages
from .temperature import TemperatureVoltages, module_voltages_at_extremes

logger = logging.getLogger(__name__)


# ======================================================================
# Result records
# ======================================================================

@dataclass(frozen=True)
class ArrayConfiguration:
    series_modules: int       # 0 means no feasible configuration
    parallel_strings: int
    total_modules: int
    total_capacity_kw: float  # DC, bifacial adjusted

    @property
    def is_feasible(self) -> bool:
        return self.series_modules > 0


@dataclass(frozen=True)
class SeriesBounds:
    max_series: int
    min_series: int


@dataclass(frozen=True)
class ArrayDesign:
    """Everything the engineering view (and the BOM generator) consumes."""

    array_configuration: ArrayConfiguration
    safety_check: SafetyCheck
    string_voltages: StringVoltages
    temperature_voltages: TemperatureVoltages
    series_bounds: SeriesBounds
    inverter_count: int
    dc_ac_ratio: float
    bifacial_gain_pct: float
    inverter_groups: list[InverterGroup] = field(default_factory=list)
    summary: str = ""


# ======================================================================
# Helpers
# ======================================================================

def bifacial_gain(albedo: float = 0.2, height: float = 1.0) -> float:
    """Rear-side gain (%) from ground albedo and mounting height.

    Higher mounting and brighter ground both raise the gain; the height
    benefit saturates at 1.2.
    """
    height_factor = min(MAX_HEIGHT_FACTOR, 0.5 + height / 2.0)
    return round(albedo * 100.0 * height_factor * BIFACIALITY_FACTOR, 2)


def effective_bifacial_gain(config: SystemConfig) -> float:
    if config.albedo is not None:
        return bifacial_gain(config.albedo, config.mounting_height or 1.0)
    return config.bifacial_gain or 0.0


def series_bounds(temps: TemperatureVoltages, inverter: Inverter) -> SeriesBounds:
    max_series = math.floor(inverter.max_input_voltage / temps.voc_winter) if temps.voc_winter > 0 else 0
    min_series = math.ceil(inverter.min_mppt_voltage / temps.vmp_summer) if temps.vmp_summer > 0 else 0
    return SeriesBounds(max_series=max_series, min_series=min_series)


def inverter_count_for(target_capacity_kw: float, inverter: Inverter) -> int:
    if inverter.rated_output_power <= 0:
        return 0
    return math.ceil(target_capacity_kw / inverter.rated_output_power)


# ======================================================================
# Optimiser
# ======================================================================

def optimize_array(
    module: PVModule,
    inverter: Inverter,
    config: SystemConfig,
    temps: TemperatureVoltages | None = None,
) -> tuple[ArrayConfiguration, SeriesBounds]:
    """Choose series/parallel counts for *config.target_capacity*.

    The built module count is rounded up to whole strings, so the built
    capacity may slightly exceed the target.
    """
    if temps is None:
        temps = module_voltages_at_extremes(module, config)

    bounds = series_bounds(temps, inverter)
    series = bounds.max_series if bounds.max_series >= bounds.min_series else 0

    modules_needed = math.ceil(config.target_capacity * 1000.0 / module.pmax) if module.pmax > 0 else 0
    parallel = math.ceil(modules_needed / series) if series > 0 else 0
    total_modules = parallel * series

    gain_factor = 1.0 + effective_bifacial_gain(config) / 100.0
    total_capacity_kw = (total_modules * module.pmax / 1000.0) * gain_factor

    if series == 0:
        logger.warning(
            "No feasible string length: max %d by Voc(winter) < min %d by Vmp(summer)",
            bounds.max_series,
            bounds.min_series,
        )

    return (
        ArrayConfiguration(
            series_modules=series,
            parallel_strings=parallel,
            total_modules=total_modules,
            total_capacity_kw=total_capacity_kw,
        ),
        bounds,
    )


def compute_array_design(module: PVModule, inverter: Inverter, config: SystemConfig) -> ArrayDesign:
    """Size the array and validate it against the inverter's limits.

    Callers must check ``array_configuration.is_feasible`` before reading
    the voltage and safety figures of the result.
    """
    temps = module_voltages_at_extremes(module, config)
    configuration, bounds = optimize_array(module, inverter, config, temps)

    inverter_count = inverter_count_for(config.target_capacity, inverter)
    ac_capacity_kw = inverter_count * inverter.rated_output_power
    dc_ac_ratio = configuration.total_capacity_kw / ac_capacity_kw if ac_capacity_kw > 0 else 0.0

    strings = string_voltages(configuration.series_modules, temps)
    safety = evaluate_safety(module, inverter, config, configuration.series_modules, temps)

    logger.info(
        "Array design: %d x %d modules (%.2f kW DC), %d inverters, DC/AC %.2f",
        configuration.series_modules,
        configuration.parallel_strings,
        configuration.total_capacity_kw,
        inverter_count,
        dc_ac_ratio,
    )

    return ArrayDesign(
        array_configuration=configuration,
        safety_check=safety,
        string_voltages=strings,
        temperature_voltages=temps,
        series_bounds=bounds,
        inverter_count=inverter_count,
        dc_ac_ratio=dc_ac_ratio,
        bifacial_gain_pct=effective_bifacial_gain(config),
        inverter_groups=allocate_strings(
            configuration.parallel_strings,
            inverter_count,
            configuration.series_modules,
            module,
            inverter,
            strings,
        ),
        summary=describe_configuration(
            module,
            inverter,
            configuration.series_modules,
            configuration.parallel_strings,
            configuration.total_capacity_kw,
            inverter_count,
        ),
    )
