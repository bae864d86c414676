"""Tests for the end-to-end design pipeline and its memo cache."""
from dataclasses import replace

import pytest

from solar_engine.simulation.runner import DesignCache, fingerprint, run_design


class TestRunDesign:
    def test_reference_design(self, module, inverter, system_config, economic_config):
        outcome = run_design(module, inverter, system_config, economic_config)
        configuration = outcome.engineering.array_configuration
        assert configuration.series_modules == 18
        assert configuration.is_feasible
        assert outcome.simulation.system_capacity_kw == pytest.approx(configuration.total_capacity_kw)
        assert outcome.simulation.dc_ac_ratio == pytest.approx(outcome.engineering.dc_ac_ratio)
        assert len(outcome.simulation.yearly_data) == 20
        assert outcome.simulation.total_generation_20y > 0

    def test_disabled_bess_not_reported(self, module, inverter, system_config, economic_config):
        outcome = run_design(module, inverter, system_config, economic_config)
        assert outcome.simulation.bess_result is None

    def test_infeasible_design_simulates_nothing(self, module, inverter, system_config, economic_config):
        narrow = replace(inverter, max_input_voltage=300.0, min_mppt_voltage=290.0)
        outcome = run_design(module, narrow, system_config, economic_config)
        assert not outcome.engineering.array_configuration.is_feasible
        assert outcome.simulation.system_capacity_kw == 0.0
        assert outcome.simulation.total_generation_20y == 0.0
        assert outcome.simulation.total_gross_revenue == 0.0
        assert outcome.simulation.lcoe == 0.0

    def test_recomputes_on_every_call(self, module, inverter, system_config, economic_config):
        first = run_design(module, inverter, system_config, economic_config)
        second = run_design(module, inverter, system_config, economic_config)
        assert first is not second
        assert first.simulation.npv == pytest.approx(second.simulation.npv)


class TestFingerprint:
    def test_stable(self, module, inverter, system_config, economic_config):
        a = fingerprint(module, inverter, system_config, economic_config)
        b = fingerprint(module, inverter, system_config, economic_config)
        assert a == b
        assert len(a) == 64

    def test_changes_with_any_input(self, module, inverter, system_config, economic_config):
        base = fingerprint(module, inverter, system_config, economic_config)
        assert fingerprint(module, inverter, replace(system_config, cable_length=51.0), economic_config) != base
        assert fingerprint(module, inverter, system_config, replace(economic_config, smp=181.0)) != base


class TestDesignCache:
    def test_hit_after_miss(self, module, inverter, system_config, economic_config):
        cache = DesignCache()
        first = cache.get_or_compute(module, inverter, system_config, economic_config)
        second = cache.get_or_compute(module, inverter, system_config, economic_config)
        assert first is second
        assert (cache.hits, cache.misses) == (1, 1)
        assert len(cache) == 1

    def test_lru_eviction(self, module, inverter, system_config, economic_config):
        calls = []

        def compute(*args):
            calls.append(args)
            return object()

        cache = DesignCache(max_entries=2)
        configs = [replace(system_config, cable_length=float(n)) for n in (10, 20, 30)]
        cache.get_or_compute(module, inverter, configs[0], economic_config, compute=compute)
        cache.get_or_compute(module, inverter, configs[1], economic_config, compute=compute)
        # touch the first entry so the second becomes least recently used
        cache.get_or_compute(module, inverter, configs[0], economic_config, compute=compute)
        cache.get_or_compute(module, inverter, configs[2], economic_config, compute=compute)
        assert len(cache) == 2
        assert cache.get(fingerprint(module, inverter, configs[1], economic_config)) is None
        assert cache.get(fingerprint(module, inverter, configs[0], economic_config)) is not None
        assert len(calls) == 3

    def test_disabled_cache_stores_nothing(self, module, inverter, system_config, economic_config):
        cache = DesignCache(max_entries=0)
        cache.get_or_compute(module, inverter, system_config, economic_config)
        cache.get_or_compute(module, inverter, system_config, economic_config)
        assert len(cache) == 0
        assert cache.misses == 2

    def test_clear(self, module, inverter, system_config, economic_config):
        cache = DesignCache()
        cache.get_or_compute(module, inverter, system_config, economic_config)
        cache.clear()
        assert len(cache) == 0
