"""
PV plant design and simulation engine.

Sizes strings against inverter voltage windows, validates the electrical
design, and projects 20-year yield and cash flow for the built array.
"""

from .economics.cashflow import SimulationResult, compute_economics
from .electrical.array_design import ArrayDesign, compute_array_design
from .equipment import (
    BessConfig,
    EconomicConfig,
    Inverter,
    LossFactors,
    PVModule,
    SystemConfig,
    TempCoefficients,
)
from .simulation.runner import DesignCache, DesignOutcome, run_design

__all__ = [
    "BessConfig",
    "EconomicConfig",
    "Inverter",
    "LossFactors",
    "PVModule",
    "SystemConfig",
    "TempCoefficients",
    "ArrayDesign",
    "compute_array_design",
    "SimulationResult",
    "compute_economics",
    "DesignCache",
    "DesignOutcome",
    "run_design",
]
