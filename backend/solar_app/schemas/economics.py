"""Pydantic schemas for the economic assumptions and irradiance records."""
import logging
from typing import Literal

from pydantic import Field, ValidationError, field_validator, model_validator

from solar_app.schemas.base import CamelModel
from solar_engine.equipment import EconomicConfig, LossFactors
from solar_engine.weather.tmy_parser import IrradianceRecord

logger = logging.getLogger(__name__)

# Mode names used by older saved configurations
_LEGACY_MODES = {"basic": "flat", "detailed": "hourly"}


class LossFactorsSchema(CamelModel):
    soiling: float = Field(default=2.0, ge=0.0, le=100.0)
    shading: float = Field(default=3.0, ge=0.0, le=100.0)
    iam_loss: float = Field(default=2.0, ge=0.0, le=100.0)
    mismatch: float = Field(default=2.0, ge=0.0, le=100.0)
    lid: float = Field(default=1.5, ge=0.0, le=100.0)
    dc_wiring: float = Field(default=1.5, ge=0.0, le=100.0)
    ac_wiring: float = Field(default=1.0, ge=0.0, le=100.0)
    inverter_efficiency: float = Field(default=98.0, ge=0.0, le=100.0)
    availability: float = Field(default=0.5, ge=0.0, le=100.0)

    def to_engine(self) -> LossFactors:
        return LossFactors(**self.model_dump())


class IrradianceRecordSchema(CamelModel):
    year: int
    month: int = Field(ge=1, le=12)
    day: int
    hour: int = Field(ge=0, le=24)
    wind_speed: float = 0.0
    ghi: float = Field(description="Global horizontal irradiance (W/m^2)")
    wind_speed_uncertainty: float = 0.0
    ghi_uncertainty: float = 0.0

    def to_engine(self) -> IrradianceRecord:
        return IrradianceRecord(**self.model_dump())


class EconomicConfigSchema(CamelModel):
    analysis_mode: Literal["flat", "monthly", "hourly"] = "flat"
    daily_insolation: float = Field(default=3.51, ge=0.0, description="Peak sun hours per day")
    monthly_insolation: list[float] = Field(default_factory=list, description="12 monthly peak-sun-hour values")
    tmy_records: list[IrradianceRecordSchema] = Field(default_factory=list)
    system_efficiency: float = Field(default=80.0, ge=0.0, le=100.0, description="Performance ratio (%)")
    loss_factors: LossFactorsSchema | None = None
    clipping_loss: float = Field(default=0.0, ge=0.0, le=100.0)
    annual_degradation: float = Field(default=0.33, ge=0.0, le=100.0)

    smp: float = Field(default=130.0, ge=0.0, description="Energy price per kWh")
    rec_price: float = Field(default=60_000.0, ge=0.0, description="Price per REC (1 MWh)")
    rec_weight: float = Field(default=1.0, ge=0.0)
    ppa_enabled: bool = False
    ppa_rate: float = Field(default=0.0, ge=0.0)
    ppa_escalation: float = 0.0
    itc_percent: float = Field(default=0.0, ge=0.0, le=100.0)

    installation_cost_per_kw: float = Field(default=1_200_000.0, ge=0.0)
    maintenance_cost_per_kw: float = Field(default=25_000.0, ge=0.0)
    lease_cost_per_kw: float = Field(default=40_000.0, ge=0.0)
    inflation_rate: float = 0.0

    equity_percent: float = Field(default=100.0, ge=0.0, le=100.0)
    loan_interest_rate: float = Field(default=0.0, ge=0.0)
    loan_term: int = Field(default=0, ge=0)
    loan_grace_period: int = Field(default=0, ge=0)
    discount_rate: float | None = None

    corporate_tax_rate: float = Field(default=0.0, ge=0.0, le=100.0)
    depreciation_period: int = Field(default=20, ge=0)

    @field_validator("analysis_mode", mode="before")
    @classmethod
    def _map_legacy_mode(cls, value):
        if isinstance(value, str):
            return _LEGACY_MODES.get(value, value)
        return value

    @field_validator("loss_factors", mode="wrap")
    @classmethod
    def _default_malformed_loss_factors(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            logger.warning("Malformed loss factors replaced by defaults")
            return LossFactorsSchema()

    @model_validator(mode="after")
    def _check_loan_terms(self):
        if self.loan_term < self.loan_grace_period:
            raise ValueError(
                f"loan_term ({self.loan_term}) must not be shorter than "
                f"loan_grace_period ({self.loan_grace_period})"
            )
        return self

    def to_engine(self) -> EconomicConfig:
        data = self.model_dump(exclude={"tmy_records", "loss_factors", "monthly_insolation"})
        return EconomicConfig(
            **data,
            monthly_insolation=tuple(self.monthly_insolation),
            tmy_records=tuple(r.to_engine() for r in self.tmy_records),
            loss_factors=self.loss_factors.to_engine() if self.loss_factors is not None else None,
        )
