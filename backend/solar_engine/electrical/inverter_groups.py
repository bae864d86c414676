"""String-to-inverter allocation schedule and plain-text design summary."""

from __future__ import annotations

from dataclasses import dataclass

from ..equipment import Inverter, PVModule
from .safety import StringVoltages


@dataclass(frozen=True)
class InverterGroup:
    """A run of identical inverters sharing the same string count."""

    id_range: str
    count: int
    strings: int          # parallel strings per inverter
    modules: int          # modules per inverter
    kw: float             # DC capacity per inverter (kW)
    current: float        # DC input current per inverter (A)
    dc_ac_ratio_pct: float
    voltage_range: str
    note: str


def _id_range(first: int, last: int) -> str:
    return f"Inv #{first}" if first == last else f"Inv #{first} ~ #{last}"


def _group(
    first: int,
    last: int,
    strings: int,
    series_modules: int,
    module: PVModule,
    inverter: Inverter,
    voltage_range: str,
    note: str,
) -> InverterGroup:
    modules = strings * series_modules
    kw = modules * module.pmax / 1000.0
    ratio = (kw / inverter.rated_output_power) * 100.0 if inverter.rated_output_power > 0 else 0.0
    return InverterGroup(
        id_range=_id_range(first, last),
        count=last - first + 1,
        strings=strings,
        modules=modules,
        kw=kw,
        current=strings * module.imp,
        dc_ac_ratio_pct=ratio,
        voltage_range=voltage_range,
        note=note,
    )


def allocate_strings(
    parallel_strings: int,
    inverter_count: int,
    series_modules: int,
    module: PVModule,
    inverter: Inverter,
    strings: StringVoltages,
) -> list[InverterGroup]:
    """Spread parallel strings as evenly as possible across the inverters.

    When the strings do not divide evenly, the first ``remainder``
    inverters carry one extra string ("High Load") and the rest carry the
    base count ("Normal Load").  An even split yields a single
    "Balanced" group.
    """
    if inverter_count <= 0 or parallel_strings <= 0:
        return []

    base, remainder = divmod(parallel_strings, inverter_count)
    voltage_range = f"{strings.vmp_summer:.1f} ~ {strings.voc_winter:.1f}"

    groups: list[InverterGroup] = []
    if remainder > 0:
        groups.append(
            _group(1, remainder, base + 1, series_modules, module, inverter, voltage_range, "High Load")
        )
    if inverter_count - remainder > 0:
        groups.append(
            _group(
                remainder + 1,
                inverter_count,
                base,
                series_modules,
                module,
                inverter,
                voltage_range,
                "Normal Load" if remainder > 0 else "Balanced",
            )
        )
    return groups


def describe_configuration(
    module: PVModule,
    inverter: Inverter,
    series_modules: int,
    parallel_strings: int,
    total_capacity_kw: float,
    inverter_count: int,
) -> str:
    """One-paragraph summary of the array for reports."""
    if series_modules <= 0:
        return (
            "No valid array can be built under these conditions. "
            "Check the module and inverter ratings or the target capacity."
        )
    return (
        f"The array connects {series_modules} {module.manufacturer} {module.model} "
        f"({module.pmax:g} W) modules in series per string, with {parallel_strings} "
        f"strings in parallel, feeding {inverter_count} {inverter.manufacturer} "
        f"{inverter.model} ({inverter.rated_output_power:g} kW) inverters. "
        f"Yield and revenue figures are based on the built capacity of "
        f"{total_capacity_kw:.2f} kW rather than the target capacity."
    )
