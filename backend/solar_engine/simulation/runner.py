"""Design orchestrator.

``run_design`` wires the electrical design and the economic simulation
into one end-to-end computation: array sizing and safety validation
first, then the 20-year simulation on the built (bifacial-adjusted) DC
capacity.  Every call recomputes the full result from its inputs.

``DesignCache`` is an optional caller-owned memo keyed by a fingerprint
of the input snapshot.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections import OrderedDict
from dataclasses import asdict, dataclass
from typing import Callable

from ..economics.cashflow import SimulationResult, compute_economics
from ..electrical.array_design import ArrayDesign, compute_array_design
from ..equipment import EconomicConfig, Inverter, PVModule, SystemConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignOutcome:
    engineering: ArrayDesign
    simulation: SimulationResult


# ======================================================================
# Pipeline
# ======================================================================

def run_design(
    module: PVModule,
    inverter: Inverter,
    config: SystemConfig,
    econ: EconomicConfig,
) -> DesignOutcome:
    """Size the array, validate it and simulate its economics.

    An infeasible array (no valid string length) is still simulated; its
    built capacity is zero, so every energy and revenue figure is zero.
    """
    engineering = compute_array_design(module, inverter, config)
    if not engineering.array_configuration.is_feasible:
        logger.warning("Simulating an infeasible array design; results will be empty")

    simulation = compute_economics(
        engineering.array_configuration.total_capacity_kw,
        engineering.dc_ac_ratio,
        econ,
        bess=config.bess,
    )
    return DesignOutcome(engineering=engineering, simulation=simulation)


def fingerprint(
    module: PVModule,
    inverter: Inverter,
    config: SystemConfig,
    econ: EconomicConfig,
) -> str:
    """SHA-256 over the canonical JSON of the four input records."""
    snapshot = {
        "module": asdict(module),
        "inverter": asdict(inverter),
        "config": asdict(config),
        "economic_config": asdict(econ),
    }
    payload = json.dumps(snapshot, sort_keys=True, default=str)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


# ======================================================================
# Memoisation
# ======================================================================

class DesignCache:
    """Bounded LRU of design outcomes keyed by input fingerprint."""

    def __init__(self, max_entries: int = 32):
        self.max_entries = max_entries
        self._entries: OrderedDict[str, DesignOutcome] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> DesignOutcome | None:
        outcome = self._entries.get(key)
        if outcome is not None:
            self._entries.move_to_end(key)
        return outcome

    def put(self, key: str, outcome: DesignOutcome) -> None:
        self._entries[key] = outcome
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def get_or_compute(
        self,
        module: PVModule,
        inverter: Inverter,
        config: SystemConfig,
        econ: EconomicConfig,
        compute: Callable[..., DesignOutcome] = run_design,
    ) -> DesignOutcome:
        """Return the cached outcome for these inputs, computing it on a miss."""
        key = fingerprint(module, inverter, config, econ)
        cached = self.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        outcome = compute(module, inverter, config, econ)
        if self.max_entries > 0:
            self.put(key, outcome)
        return outcome
