"""
Electrical design engine.

Temperature correction of module voltages, DC cable voltage drop, string
sizing against inverter voltage windows, safety validation and the
string-to-inverter allocation schedule.
"""

from .array_design import (
    ArrayConfiguration,
    ArrayDesign,
    SeriesBounds,
    bifacial_gain,
    compute_array_design,
    optimize_array,
)
from .cable import corrected_resistivity, voltage_drop
from .inverter_groups import InverterGroup, allocate_strings, describe_configuration
from .safety import SafetyCheck, StringVoltages, evaluate_safety, string_voltages
from .temperature import TemperatureVoltages, corrected_voltage, module_voltages_at_extremes

__all__ = [
    # temperature
    "TemperatureVoltages",
    "corrected_voltage",
    "module_voltages_at_extremes",
    # cable
    "corrected_resistivity",
    "voltage_drop",
    # array_design
    "ArrayConfiguration",
    "ArrayDesign",
    "SeriesBounds",
    "bifacial_gain",
    "compute_array_design",
    "optimize_array",
    # safety
    "SafetyCheck",
    "StringVoltages",
    "evaluate_safety",
    "string_voltages",
    # inverter_groups
    "InverterGroup",
    "allocate_strings",
    "describe_configuration",
]
