"""DC cable voltage drop.

Resistivity values are for annealed conductors at 20 degC and are
corrected linearly to the conductor operating temperature:

    rho(T) = rho_20 * (1 + alpha * (T - 20))

The DC circuit has a go and a return conductor, so the one-way run
length is counted twice.
"""

from __future__ import annotations

from ..constants import (
    CABLE_RESISTIVITY,
    DEFAULT_CABLE_TEMP_C,
    RESISTIVITY_REFERENCE_TEMP_C,
    TEMP_COEFF_RESISTANCE,
)


def corrected_resistivity(material: str = "copper", temp_c: float = DEFAULT_CABLE_TEMP_C) -> float:
    """Resistivity (Ohm*mm^2/m) of *material* at *temp_c*."""
    base = CABLE_RESISTIVITY[material]
    return base * (1.0 + TEMP_COEFF_RESISTANCE * (temp_c - RESISTIVITY_REFERENCE_TEMP_C))


def voltage_drop(
    current: float,
    length: float,
    cross_section: float,
    material: str = "copper",
    temp_c: float = DEFAULT_CABLE_TEMP_C,
) -> float:
    """Round-trip voltage drop (V) along a DC cable.

    Parameters
    ----------
    current : float
        Current through the conductor (A).
    length : float
        One-way cable length (m).
    cross_section : float
        Conductor cross-section (mm^2).  A value <= 0 means no cable has
        been selected and yields 0.
    material : str
        ``"copper"`` or ``"aluminum"``.
    temp_c : float
        Conductor operating temperature (degC).
    """
    if cross_section <= 0:
        return 0.0

    rho = corrected_resistivity(material, temp_c)
    return 2.0 * length * current * rho / cross_section
