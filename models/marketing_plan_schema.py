from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator, model_validator
from typing import Optional, Dict, Any, List, Literal, Union

from config.fallback_sections import FALLBACK_SECTIONS

# A section is free-form text or a structured sub-object returned by the model.
SectionValue = Union[str, List[Any], Dict[str, Any]]


def _coerce_section(value):
    """Normalise a raw section value: blanks become None, scalars become text."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, (list, dict)):
        return value or None
    return str(value)


def _fallback_for(field_name):
    return Field(default=FALLBACK_SECTIONS[field_name])


# --- Branch fragments ---
class BranchFragment(BaseModel):
    """Partially-typed result of one completion branch. Every field is optional."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def coerce_section(cls, value):
        return _coerce_section(value)

    def present_sections(self):
        return {key: value for key, value in self.model_dump().items() if value is not None}


class FoundationFragment(BranchFragment):
    market_foundation: Optional[SectionValue] = None
    strategy_pillars: Optional[SectionValue] = None
    personas: Optional[SectionValue] = None


class CompetitionFragment(BranchFragment):
    competitors_brief: Optional[SectionValue] = None
    differentiators: Optional[SectionValue] = Field(
        default=None, validation_alias=AliasChoices("differentiators", "differentiation_moves")
    )
    seven_ps: Optional[SectionValue] = Field(
        default=None, validation_alias=AliasChoices("seven_ps", "marketing_mix_7ps", "marketing_mix")
    )


class ExecutionFragment(BranchFragment):
    budget_allocation: Optional[SectionValue] = Field(
        default=None, validation_alias=AliasChoices("budget_allocation", "allocation")
    )
    calendar_next_90_days: Optional[SectionValue] = None
    kpis: Optional[SectionValue] = None

    @model_validator(mode="before")
    @classmethod
    def lift_nested_allocation(cls, data):
        # The model sometimes answers with the full {"budget": {"allocation": ...}} shape.
        if isinstance(data, dict) and "budget_allocation" not in data and "allocation" not in data:
            budget = data.get("budget")
            if isinstance(budget, dict) and "allocation" in budget:
                data = {**data, "budget_allocation": budget["allocation"]}
        return data


class AssuranceFragment(BranchFragment):
    risks_and_safety_nets: Optional[SectionValue] = None
    experiments: Optional[SectionValue] = None


# --- Canonical document ---
class ChannelRecord(BaseModel):
    channel: str
    intent: Literal["High", "Mid", "Low"]
    role: str
    summary: str
    key_actions: List[str]
    success_metric: str
    budget_percent: int = Field(ge=0, le=100)
    why_it_works: str


class PlanMeta(BaseModel):
    title: str = "Marketing Strategy Report"
    country: str
    sector: str
    goal: str


class BudgetSection(BaseModel):
    band: str
    allocation: SectionValue = _fallback_for("budget_allocation")

    @field_validator("allocation", mode="before")
    @classmethod
    def default_allocation(cls, value):
        return _coerce_section(value) or FALLBACK_SECTIONS["budget_allocation"]


class MarketingPlan(BaseModel):
    """
    The fully merged marketing plan. Every key is always present: a text
    section that no branch produced holds its authored fallback content.
    """

    meta: PlanMeta
    market_foundation: SectionValue = _fallback_for("market_foundation")
    strategy_pillars: SectionValue = _fallback_for("strategy_pillars")
    personas: SectionValue = _fallback_for("personas")
    competitors_brief: SectionValue = _fallback_for("competitors_brief")
    differentiators: SectionValue = _fallback_for("differentiators")
    seven_ps: SectionValue = _fallback_for("seven_ps")
    channel_playbook: List[ChannelRecord]
    budget: BudgetSection
    calendar_next_90_days: SectionValue = _fallback_for("calendar_next_90_days")
    kpis: SectionValue = _fallback_for("kpis")
    risks_and_safety_nets: SectionValue = _fallback_for("risks_and_safety_nets")
    experiments: SectionValue = _fallback_for("experiments")

    @field_validator(
        "market_foundation", "strategy_pillars", "personas", "competitors_brief",
        "differentiators", "seven_ps", "calendar_next_90_days", "kpis",
        "risks_and_safety_nets", "experiments",
        mode="before",
    )
    @classmethod
    def default_missing_section(cls, value, info):
        return _coerce_section(value) or FALLBACK_SECTIONS[info.field_name]


DOCUMENT_KEYS = tuple(MarketingPlan.model_fields)
