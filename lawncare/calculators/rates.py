"""
Rate table: the immutable price schedule the invoice calculator runs on.

Every rate is a finite, non-negative float. The table is frozen: build a new
one (or use model_copy(update=...)) for an alternate schedule instead of
mutating the default.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..config import Settings


class RateTable(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    border_area_fraction: float = Field(0.04, ge=0)     # share of property treated as border
    mowing_area_fraction: float = Field(0.95, ge=0)     # share of property treated as lawn
    border_cost_per_area: float = Field(0.35, ge=0)
    mowing_cost_per_area: float = Field(0.07, ge=0)
    fertilizer_cost_per_area: float = Field(0.05, ge=0)  # applied to the full area
    tax_rate_primary: float = Field(0.15, ge=0)         # HST
    tax_rate_secondary: float = Field(0.014, ge=0)      # environmental tax


DEFAULT_RATES = RateTable()


def rate_table_from_settings(settings: Settings) -> RateTable:
    """Build the rate table from env-driven settings. Raises ValidationError on bad rates."""
    return RateTable(
        border_area_fraction=settings.BORDER_AREA_PERCENT,
        mowing_area_fraction=settings.MOWING_AREA_PERCENT,
        border_cost_per_area=settings.BORDER_COST_PER_SQFT,
        mowing_cost_per_area=settings.MOWING_COST_PER_SQFT,
        fertilizer_cost_per_area=settings.FERTILIZER_COST_PER_SQFT,
        tax_rate_primary=settings.HST_RATE,
        tax_rate_secondary=settings.ENV_TAX_RATE,
    )
