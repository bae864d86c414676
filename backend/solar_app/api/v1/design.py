"""Array design and economic simulation endpoints."""
from typing import Any

from fastapi import APIRouter, Body
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from solar_app.schemas.document import ArrayDesignRequest, EconomicsRequest
from solar_app.services import design_service
from solar_app.services.config_document import default_document, dump_document, load_document

router = APIRouter()


@router.get(
    "/defaults",
    summary="Default design document",
    description="Factory default module, inverter, system and economic configuration.",
)
async def get_defaults():
    return dump_document(default_document())


@router.post(
    "/array",
    summary="Size the PV array",
    description="Choose modules per string and string count for the target capacity and validate the design against the inverter limits.",
)
async def design_array(body: ArrayDesignRequest):
    return design_service.design_array(
        body.module.to_engine(),
        body.inverter.to_engine(),
        body.system_config.to_engine(),
    )


@router.post(
    "/economics",
    summary="Run the 20-year economic simulation",
    description="Project yield, cash flow, ROI, payback, NPV, LCOE and price sensitivity for a built DC capacity.",
)
async def design_economics(body: EconomicsRequest):
    return design_service.simulate(
        body.capacity_kw,
        body.dc_ac_ratio,
        body.economic_config.to_engine(),
        bess=body.bess.to_engine() if body.bess is not None else None,
    )


@router.post(
    "",
    summary="Full design run",
    description="Merge a (partial) design document onto the defaults, then size, validate and simulate the plant.",
)
async def run_design(document: dict[str, Any] = Body(...)):
    try:
        doc = load_document(document)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
    return design_service.run_document(doc)
