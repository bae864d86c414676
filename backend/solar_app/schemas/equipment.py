"""Pydantic schemas for equipment datasheets and the system configuration."""
import logging
from typing import Literal

from pydantic import Field, ValidationError, field_validator

from solar_app.schemas.base import CamelModel
from solar_engine.equipment import BessConfig, Inverter, PVModule, SystemConfig, TempCoefficients

logger = logging.getLogger(__name__)


class TempCoefficientsSchema(CamelModel):
    voc: float = Field(default=-0.26, description="Voc temperature coefficient (%/degC)")
    pmax: float = Field(default=-0.34, description="Pmax temperature coefficient (%/degC)")
    isc: float = Field(default=0.04, description="Isc temperature coefficient (%/degC)")

    def to_engine(self) -> TempCoefficients:
        return TempCoefficients(voc=self.voc, pmax=self.pmax, isc=self.isc)


class PVModuleSchema(CamelModel):
    manufacturer: str = Field(max_length=255)
    model: str = Field(max_length=255)
    pmax: float = Field(gt=0, description="Rated power at STC (W)")
    voc: float = Field(description="Open-circuit voltage (V)")
    isc: float = Field(description="Short-circuit current (A)")
    vmp: float = Field(description="Max-power voltage (V)")
    imp: float = Field(description="Max-power current (A)")
    efficiency: float = Field(default=0.0, ge=0.0, le=100.0)
    temp_coefficients: TempCoefficientsSchema = Field(default_factory=TempCoefficientsSchema)
    width: float = Field(default=0.0, ge=0.0, description="mm")
    height: float = Field(default=0.0, ge=0.0, description="mm")
    weight: float = Field(default=0.0, ge=0.0, description="kg")

    def to_engine(self) -> PVModule:
        return PVModule(
            manufacturer=self.manufacturer,
            model=self.model,
            pmax=self.pmax,
            voc=self.voc,
            isc=self.isc,
            vmp=self.vmp,
            imp=self.imp,
            efficiency=self.efficiency,
            temp_coefficients=self.temp_coefficients.to_engine(),
            width=self.width,
            height=self.height,
            weight=self.weight,
        )


class InverterSchema(CamelModel):
    manufacturer: str = Field(max_length=255)
    model: str = Field(max_length=255)
    max_input_voltage: float = Field(gt=0, description="Absolute DC input ceiling (V)")
    min_mppt_voltage: float = Field(ge=0)
    max_mppt_voltage: float = Field(gt=0)
    startup_voltage: float = Field(ge=0)
    max_input_current: float = Field(ge=0, description="Per MPPT (A)")
    max_short_circuit_current: float = Field(ge=0, description="Per MPPT (A)")
    rated_output_power: float = Field(gt=0, description="AC rated power (kW)")
    max_output_power: float = Field(default=0.0, ge=0)
    rated_output_voltage: float = Field(default=380.0, ge=0)
    efficiency: float = Field(default=98.0, ge=0.0, le=100.0)
    mppt_count: int = Field(default=1, ge=1)

    def to_engine(self) -> Inverter:
        return Inverter(**self.model_dump())


class BessConfigSchema(CamelModel):
    enabled: bool = False
    capacity_kwh: float = Field(default=0.0, ge=0.0)
    power_kw: float = Field(default=0.0, ge=0.0)
    efficiency: float = Field(default=90.0, ge=0.0, le=100.0)
    dod: float = Field(default=90.0, ge=0.0, le=100.0)
    cost_per_kwh: float = Field(default=500_000.0, ge=0.0)
    cycles_per_year: int = Field(default=350, ge=0)

    def to_engine(self) -> BessConfig:
        return BessConfig(**self.model_dump())


class SystemConfigSchema(CamelModel):
    target_capacity: float = Field(default=500.0, ge=0, description="Target DC capacity (kW)")
    cable_length: float = Field(default=50.0, ge=0, description="One-way DC cable run (m)")
    cable_cross_section: float = Field(default=6.0, ge=0, description="mm^2")
    cable_material: Literal["copper", "aluminum"] = "copper"
    cable_temp: float = Field(default=70.0, description="Conductor operating temperature (degC)")
    ambient_temp_winter: float = -10.0
    ambient_temp_summer: float = 70.0
    bifacial_gain: float = Field(default=0.0, ge=0.0)
    albedo: float | None = Field(default=None, ge=0.0, le=1.0)
    mounting_height: float | None = Field(default=None, ge=0.0)
    bess: BessConfigSchema | None = None

    @field_validator("bess", mode="wrap")
    @classmethod
    def _default_malformed_bess(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            logger.warning("Malformed bess configuration replaced by defaults")
            return BessConfigSchema()

    def to_engine(self) -> SystemConfig:
        return SystemConfig(
            target_capacity=self.target_capacity,
            cable_length=self.cable_length,
            cable_cross_section=self.cable_cross_section,
            cable_material=self.cable_material,
            cable_temp=self.cable_temp,
            ambient_temp_winter=self.ambient_temp_winter,
            ambient_temp_summer=self.ambient_temp_summer,
            bifacial_gain=self.bifacial_gain,
            albedo=self.albedo,
            mounting_height=self.mounting_height,
            bess=self.bess.to_engine() if self.bess is not None else None,
        )
