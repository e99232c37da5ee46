from __future__ import annotations
import os
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SITE = "data.austintexas.gov"


class Settings(BaseModel):
    site: str = os.getenv("FRESHNESS_SITE", DEFAULT_SITE)
    max_days: float = float(os.getenv("FRESHNESS_MAX_DAYS", "5"))
    mailer: str = os.getenv("FRESHNESS_MAILER", "mail")
    country: str = os.getenv("FRESHNESS_COUNTRY", "US")
    timeout: float = float(os.getenv("FRESHNESS_TIMEOUT", "30"))

settings = Settings()


class RunConfig(BaseModel):
    """Everything one run needs, fixed once the command line is parsed."""

    model_config = ConfigDict(frozen=True)

    dataset_id: str = Field(min_length=1)
    site: str = settings.site
    max_days: float = Field(default=settings.max_days, ge=0)
    notify: tuple[str, ...] = ()
    mailer: str = settings.mailer
    command: Optional[str] = Field(default=None, min_length=1)
    country: str = settings.country
    timeout: float = Field(default=settings.timeout, gt=0)
    verbose: bool = False
