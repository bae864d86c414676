"""Tests for temperature correction, cable voltage drop and safety checks."""
from dataclasses import replace

import pytest

from solar_engine.electrical.cable import corrected_resistivity, voltage_drop
from solar_engine.electrical.safety import evaluate_safety, string_voltages
from solar_engine.electrical.temperature import corrected_voltage, module_voltages_at_extremes


class TestCorrectedVoltage:
    def test_identity_at_25c(self):
        assert corrected_voltage(53.68, -0.26, 25.0) == pytest.approx(53.68)

    def test_cold_raises_voltage(self):
        # 53.68 * (1 + (-0.0026) * (-35)) = 53.68 * 1.091
        assert corrected_voltage(53.68, -0.26, -10.0) == pytest.approx(58.56488)

    def test_heat_lowers_voltage(self):
        assert corrected_voltage(44.88, -0.26, 70.0) == pytest.approx(39.62904)

    def test_zero_coefficient(self):
        assert corrected_voltage(40.0, 0.0, 80.0) == pytest.approx(40.0)

    def test_module_extremes_use_voc_coefficient(self, module, system_config):
        temps = module_voltages_at_extremes(module, system_config)
        assert temps.voc_winter > module.voc > temps.voc_summer
        assert temps.vmp_winter > module.vmp > temps.vmp_summer
        assert temps.vmp_summer == pytest.approx(module.vmp * (1 - 0.0026 * 45))


class TestVoltageDrop:
    def test_copper_at_70c(self):
        rho = 0.0172 * (1 + 0.00393 * 50)
        expected = 2 * 50 * 13.04 * rho / 6
        assert voltage_drop(13.04, 50, 6) == pytest.approx(expected)

    def test_aluminum_higher_than_copper(self):
        assert voltage_drop(10, 100, 6, "aluminum") > voltage_drop(10, 100, 6, "copper")

    def test_zero_cross_section(self):
        assert voltage_drop(13.04, 50, 0) == 0.0

    def test_negative_cross_section(self):
        assert voltage_drop(13.04, 50, -4) == 0.0

    def test_reference_temperature(self):
        assert corrected_resistivity("copper", 20.0) == pytest.approx(0.0172)

    @pytest.mark.parametrize("length", [10, 50, 100, 200])
    def test_monotonic_in_length(self, length):
        assert voltage_drop(10, length + 1, 6) > voltage_drop(10, length, 6)

    def test_monotonic_in_current_and_temperature(self):
        assert voltage_drop(11, 50, 6) > voltage_drop(10, 50, 6)
        assert voltage_drop(10, 50, 6, temp_c=90) > voltage_drop(10, 50, 6, temp_c=40)

    def test_thicker_cable_drops_less(self):
        assert voltage_drop(10, 50, 10) < voltage_drop(10, 50, 6)


class TestSafety:
    def test_default_design_passes(self, module, inverter, system_config):
        temps = module_voltages_at_extremes(module, system_config)
        check = evaluate_safety(module, inverter, system_config, 18, temps)
        assert check.passed
        assert check.failures() == []
        assert check.voltage_drop_pct == pytest.approx(0.5537, abs=1e-3)

    def test_string_voltages_scale_with_series(self, module, system_config):
        temps = module_voltages_at_extremes(module, system_config)
        strings = string_voltages(18, temps)
        assert strings.voc_winter == pytest.approx(18 * temps.voc_winter)
        assert strings.vmp_summer == pytest.approx(18 * temps.vmp_summer)

    def test_too_many_modules_fails_voc(self, module, inverter, system_config):
        temps = module_voltages_at_extremes(module, system_config)
        check = evaluate_safety(module, inverter, system_config, 19, temps)
        assert not check.is_voc_safe
        assert not check.passed
        assert "is_voc_safe" in check.failures()

    def test_zero_series_fails_mppt_floor(self, module, inverter, system_config):
        temps = module_voltages_at_extremes(module, system_config)
        check = evaluate_safety(module, inverter, system_config, 0, temps)
        assert not check.is_vmp_min_safe
        assert not check.is_startup_safe
        assert check.voltage_drop_pct == 0.0

    def test_long_thin_cable_fails_drop(self, module, inverter, system_config):
        config = replace(system_config, cable_length=1500.0, cable_cross_section=2.5)
        temps = module_voltages_at_extremes(module, config)
        check = evaluate_safety(module, inverter, config, 18, temps)
        assert not check.is_voltage_drop_safe
        assert check.voltage_drop_pct > 3.0

    def test_current_headroom(self, module, inverter, system_config):
        weak = replace(inverter, max_short_circuit_current=10.0)
        temps = module_voltages_at_extremes(module, system_config)
        check = evaluate_safety(module, weak, system_config, 18, temps)
        assert not check.is_current_safe
        assert check.is_voc_safe
