"""Design document: the complete input set for one design run.

Serialised with the keys ``module``, ``inverter``, ``config`` and
``economicConfig``; this is the save/load interchange format.
"""
from pydantic import Field

from solar_app.schemas.base import CamelModel
from solar_app.schemas.economics import EconomicConfigSchema
from solar_app.schemas.equipment import BessConfigSchema, InverterSchema, PVModuleSchema, SystemConfigSchema


class DesignDocument(CamelModel):
    module: PVModuleSchema
    inverter: InverterSchema
    system_config: SystemConfigSchema = Field(default_factory=SystemConfigSchema, alias="config")
    economic_config: EconomicConfigSchema = Field(default_factory=EconomicConfigSchema)


class ArrayDesignRequest(CamelModel):
    module: PVModuleSchema
    inverter: InverterSchema
    system_config: SystemConfigSchema = Field(default_factory=SystemConfigSchema, alias="config")


class EconomicsRequest(CamelModel):
    capacity_kw: float = Field(ge=0, description="Built DC capacity (kW)")
    dc_ac_ratio: float = Field(default=0.0, ge=0)
    economic_config: EconomicConfigSchema = Field(default_factory=EconomicConfigSchema)
    bess: BessConfigSchema | None = None


class TmyUploadRequest(CamelModel):
    csv_text: str = Field(description="Raw TMY CSV export")
    include_records: bool = Field(default=False, description="Echo the parsed records in the response")
