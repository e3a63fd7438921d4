import logging
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal

from config.marketing_tables import BUDGET_BANDS, DEFAULT_BUDGET_BAND, DEFAULT_MOTION

logger = logging.getLogger(__name__)

MAX_LIST_ITEMS = 5


def _clean_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    elif not isinstance(value, (list, tuple)):
        raise ValueError("must be a list of strings or a comma-separated string")
    items = [str(item).strip() for item in value if item is not None and str(item).strip()]
    return items[:MAX_LIST_ITEMS]


class PlanRequest(BaseModel):
    country: str
    sector: str = "General"
    product_type: str  # the offering being marketed
    audiences: List[str] = Field(min_length=1)
    competitors: List[str] = Field(default_factory=list)
    goal: Optional[str] = None
    motion: str = DEFAULT_MOTION
    action_custom: Optional[str] = None
    budget_band: Literal["none", "low", "medium", "high"] = DEFAULT_BUDGET_BAND

    @field_validator("country", "product_type", mode="before")
    @classmethod
    def strip_required_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("sector", "motion", mode="before")
    @classmethod
    def default_blank_text(cls, value, info):
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value.strip() if isinstance(value, str) else value

    @field_validator("goal", "action_custom", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return value or None

    @field_validator("audiences", "competitors", mode="before")
    @classmethod
    def clean_list(cls, value):
        return _clean_list(value)

    @field_validator("budget_band", mode="before")
    @classmethod
    def normalise_budget_band(cls, value):
        if value is None or value == "":
            return DEFAULT_BUDGET_BAND
        band = str(value).strip().lower()
        if band not in BUDGET_BANDS:
            logger.warning(f"Unknown budget band '{value}', defaulting to '{DEFAULT_BUDGET_BAND}'")
            return DEFAULT_BUDGET_BAND
        return band
