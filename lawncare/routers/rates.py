from fastapi import APIRouter, Depends

from ..calculators import RateTable, rate_table_from_settings
from ..config import settings
from .. import schemas

router = APIRouter(prefix="/rates", tags=["rates"])


def get_rates() -> RateTable:
    """Current rate schedule, built from settings (env / .env)."""
    return rate_table_from_settings(settings)


@router.get("/", response_model=schemas.RateTableOut)
def read_rates(rates: RateTable = Depends(get_rates)):
    return {**rates.model_dump(), "currency": settings.CURRENCY_CODE}
