"""Environmental benefit of the generated energy."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import CO2_T_PER_MWH, CO2_T_PER_PINE_TREE, OIL_TOE_PER_MWH


@dataclass(frozen=True)
class EnvironmentalImpact:
    co2_reduction: float        # t CO2 / yr
    pine_trees_planted: int     # equivalent 30-year-old pine trees
    oil_substitution: float     # TOE / yr


def environmental_impact(annual_mwh: float) -> EnvironmentalImpact:
    """CO2 avoided, tree equivalent and oil displaced by *annual_mwh* of PV output."""
    co2 = annual_mwh * CO2_T_PER_MWH
    return EnvironmentalImpact(
        co2_reduction=round(co2, 2),
        pine_trees_planted=round(co2 / CO2_T_PER_PINE_TREE),
        oil_substitution=round(annual_mwh * OIL_TOE_PER_MWH, 2),
    )
