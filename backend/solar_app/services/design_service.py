"""Run the design engine for the API and shape its results as JSON-ready dicts."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from solar_app.config import settings
from solar_app.schemas.document import DesignDocument
from solar_engine.economics.cashflow import SimulationResult, compute_economics
from solar_engine.electrical.array_design import ArrayDesign, compute_array_design
from solar_engine.equipment import BessConfig, EconomicConfig, Inverter, PVModule, SystemConfig
from solar_engine.simulation.runner import DesignCache, fingerprint

logger = logging.getLogger(__name__)

# Singleton instance
design_cache = DesignCache(max_entries=settings.design_cache_size)


def array_design_payload(design: ArrayDesign) -> dict[str, Any]:
    payload = asdict(design)
    payload["array_configuration"]["is_feasible"] = design.array_configuration.is_feasible
    payload["safety_check"]["passed"] = design.safety_check.passed
    payload["safety_check"]["failures"] = design.safety_check.failures()
    payload["dc_ac_ratio"] = round(design.dc_ac_ratio, 4)
    return payload


def simulation_payload(result: SimulationResult) -> dict[str, Any]:
    return asdict(result)


def design_array(module: PVModule, inverter: Inverter, config: SystemConfig) -> dict[str, Any]:
    return array_design_payload(compute_array_design(module, inverter, config))


def simulate(
    capacity_kw: float,
    dc_ac_ratio: float,
    econ: EconomicConfig,
    bess: BessConfig | None = None,
) -> dict[str, Any]:
    return simulation_payload(compute_economics(capacity_kw, dc_ac_ratio, econ, bess=bess))


def run_document(document: DesignDocument, cache: DesignCache | None = None) -> dict[str, Any]:
    """Full design run for a validated document, memoised in *cache*."""
    cache = cache if cache is not None else design_cache
    module = document.module.to_engine()
    inverter = document.inverter.to_engine()
    config = document.system_config.to_engine()
    econ = document.economic_config.to_engine()

    key = fingerprint(module, inverter, config, econ)
    hits_before = cache.hits
    outcome = cache.get_or_compute(module, inverter, config, econ)
    logger.info(
        "Design run %s (%s)",
        key[:12],
        "cached" if cache.hits > hits_before else "computed",
        extra={"design_key": key},
    )

    return {
        "design_key": key,
        "engineering": array_design_payload(outcome.engineering),
        "simulation": simulation_payload(outcome.simulation),
    }
