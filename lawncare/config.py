from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "Mo's Lawncare Services"
    COMPANY_ADDRESS: str = "St. John's, NL"
    COMPANY_PHONE: str = ""
    CURRENCY_CODE: str = "CAD"
    LOG_LEVEL: str = "INFO"

    # Rate schedule, defaults match calculators.rates.DEFAULT_RATES
    BORDER_AREA_PERCENT: float = 0.04
    MOWING_AREA_PERCENT: float = 0.95
    BORDER_COST_PER_SQFT: float = 0.35
    MOWING_COST_PER_SQFT: float = 0.07
    FERTILIZER_COST_PER_SQFT: float = 0.05
    HST_RATE: float = 0.15
    ENV_TAX_RATE: float = 0.014

    TAX_PRIMARY_LABEL: str = "HST"
    TAX_SECONDARY_LABEL: str = "Environmental Tax"

    class Config:
        env_file = ".env"


settings = Settings()
