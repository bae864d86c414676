"""TMY weather data ingestion endpoint."""
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from solar_app.schemas.document import TmyUploadRequest
from solar_engine.weather.tmy_parser import has_hourly_coverage, parse_tmy_csv, records_to_arrays

router = APIRouter()


@router.post(
    "/tmy",
    summary="Parse a TMY CSV export",
    description="Detect the header row, map the columns, and report whether the records cover enough hours for an hourly analysis.",
)
async def upload_tmy(body: TmyUploadRequest):
    try:
        records = parse_tmy_csv(body.csv_text)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    annual_ghi = 0.0
    if records:
        annual_ghi = float(records_to_arrays(records)["ghi"].sum()) / 1000.0

    response = {
        "record_count": len(records),
        "hourly_ready": has_hourly_coverage(records),
        "annual_ghi_kwh_m2": round(annual_ghi, 2),
    }
    if body.include_records:
        response["records"] = [asdict(r) for r in records]
    return response
