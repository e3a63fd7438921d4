import json
from dataclasses import dataclass
from typing import List, Tuple

from config.marketing_tables import (
    CHANNELS_BY_MOTION,
    GOALS_BY_MOTION,
    DEFAULT_GOAL,
)
from models.plan_request_schema import PlanRequest

SYSTEM_ROLE = """You are Mark Ritson meets Philip Kotler - the world's leading marketing strategist.
Write comprehensive, actionable marketing strategies EXCLUSIVELY in British English with UK spelling and terminology.
Use clean, professional business report format with NO markdown formatting, NO asterisks, NO bullet symbols.
Always prominently feature any named competitors provided.
Use percentage allocations only for budgets - no currency symbols and no monetary amounts.
Put subheadings on their own lines with double line breaks before content.
Return valid JSON only."""

BRITISH_ENGLISH_RULES = """CRITICAL LANGUAGE REQUIREMENT:
- Write EXCLUSIVELY in British English with UK spelling throughout
- Use UK terminology: adverts (not ads), organisations (not organizations), realise (not realize), colour (not color), centre (not center), analyse (not analyze), optimise (not optimize), behaviour (not behavior), favourite (not favorite), programme (not program when referring to plans), whilst (not while), amongst (not among)
- NO American spellings or terminology whatsoever"""

FORMATTING_RULES = """CRITICAL FORMATTING REQUIREMENTS:
- Use section headings without any markdown formatting (no asterisks or special symbols)
- Put each subheading on its own line with double line breaks before content
- NO asterisks, NO bullet symbols, NO markdown formatting anywhere
- Never state prices, costs or monetary amounts; budgets are percentages only (e.g. "Search: 35%")"""

# Few-shot style references shown to the model as earlier assistant turns.
EXAMPLES = (
    """Market Foundation

Market Overview

The Australian seed market is diverse, with various offerings catering to gardening enthusiasts and agricultural professionals alike.

Customer Behaviour Insights

Peak demand occurs during spring planting season (September-November). Customers typically spend 2-3 weeks researching before purchase. Quality-focused decision making dominates, with 78% prioritising germination rates over price.""",
    """Competitor Analysis: SeedCo

Strengths: Strong brand recognition, extensive product range, established retail partnerships
Weaknesses: Higher price points, limited digital presence, slow innovation cycles
Share of voice: 20% of market conversation
Opportunity: Target their price-sensitive customers with value positioning""",
)


@dataclass(frozen=True)
class BranchPrompt:
    name: str
    keys: Tuple[str, ...]
    max_tokens: int
    system: str
    user: str

    def messages(self):
        return [
            {"role": "system", "content": self.system},
            *({"role": "assistant", "content": example} for example in EXAMPLES),
            {"role": "user", "content": self.user},
        ]


# name -> (output keys, token cap, JSON sub-schema shown to the model)
BRANCH_SCHEMAS = {
    "foundation": (
        ("market_foundation", "strategy_pillars", "personas"),
        1800,
        {
            "market_foundation": "Market Overview\n\nMarket size, growth trends and key dynamics.\n\nCustomer Behaviour Insights\n\nPurchasing patterns, decision factors, pain points and motivations.\n\nMarket Opportunities\n\nUnderserved segments and growth areas.",
            "strategy_pillars": "Pillar 1: Name\n\nFocus, key activities and success measures.\n\nPillar 2: Name\n\n...\n\nPillar 3: Name\n\n...",
            "personas": "Primary Persona: Name\n\nDemographics, psychographics, pain points, goals and preferred channels.\n\nSecondary Persona: Name\n\n...",
        },
    ),
    "competition": (
        ("competitors_brief", "differentiators", "seven_ps"),
        1800,
        {
            "competitors_brief": "[Competitor Name] Analysis\n\nStrengths, weaknesses, positioning and share of voice.\n\nCompetitive Landscape Summary\n\nMarket dynamics, gaps and positioning opportunities.",
            "differentiators": "Core Differentiation Strategy\n\nUnique value proposition and advantages.\n\nPositioning Tactics\n\n...\n\nMessaging Framework\n\n...",
            "seven_ps": "Product\n\n...\n\nPrice\n\n...\n\nPlace\n\n...\n\nPromotion\n\n...\n\nPeople\n\n...\n\nProcess\n\n...\n\nPhysical Evidence\n\n...",
        },
    ),
    "execution": (
        ("budget_allocation", "calendar_next_90_days", "kpis"),
        1400,
        {
            "budget_allocation": "Primary Allocation\n\nChannel allocation with percentages and rationale.\n\nAllocation Rationale\n\nStrategic reasoning and risk considerations.",
            "calendar_next_90_days": "Month 1: Foundation\n\nWeek-by-week set-up and launch.\n\nMonth 2: Scaling\n\n...\n\nMonth 3: Optimisation\n\n...\n\nCritical Milestones\n\n...",
            "kpis": "Primary KPIs\n\nCore metrics with targets.\n\nSecondary KPIs\n\n...\n\nLeading Indicators\n\n...\n\nMeasurement Framework\n\n...",
        },
    ),
    "assurance": (
        ("risks_and_safety_nets", "experiments"),
        1000,
        {
            "risks_and_safety_nets": "High-Risk Scenarios\n\nKey risks with impact and likelihood.\n\nMitigation Strategies\n\n...\n\nSafety Nets\n\n...",
            "experiments": "Priority Tests\n\nHypothesis, method and success criteria for each test.\n\nTesting Framework\n\n...",
        },
    ),
}

BRANCH_FOCUS = {
    "foundation": "the market foundation, the three strategy pillars and the customer personas",
    "competition": "the competitor brief, the differentiation moves and the marketing mix (7 Ps)",
    "execution": "the budget allocation in percentages, the 90-day calendar and the KPIs",
    "assurance": "the risks with their safety nets and the priority experiments",
}


def derive_goal(plan_request: PlanRequest, goals_by_motion=GOALS_BY_MOTION) -> str:
    if plan_request.motion == "custom" and plan_request.action_custom:
        return f"Goal aligned to: {plan_request.action_custom}"
    return goals_by_motion.get(plan_request.motion, DEFAULT_GOAL)


def competitor_instructions(plan_request: PlanRequest) -> str:
    if plan_request.competitors:
        names = ", ".join(plan_request.competitors)
        return (
            f"CRITICAL: You MUST prominently feature and analyse these specific competitors: {names}. "
            "Include each of them by name in the competitors_brief section and reference them in the "
            "differentiation moves. Do not ignore or generalise these competitors."
        )
    return "No specific competitors provided. Analyse the general competitive landscape."


def channel_hints(plan_request: PlanRequest, channels_by_motion=CHANNELS_BY_MOTION) -> str:
    templates = channels_by_motion.get(plan_request.motion, ())
    return json.dumps([dict(template) for template in templates])


def _input_block(plan_request: PlanRequest, goal: str, hints: str) -> str:
    audiences = ", ".join(plan_request.audiences) if plan_request.audiences else "General market"
    competitors = ", ".join(plan_request.competitors) if plan_request.competitors else "None specified"
    lines = [
        f"Country: {plan_request.country}",
        f"Sector: {plan_request.sector}",
        f"Offering: {plan_request.product_type}",
        f"Target segments: {audiences}",
        f"Primary goal: {goal}",
        f"Main action: {plan_request.motion}",
    ]
    if plan_request.motion == "custom" and plan_request.action_custom:
        lines.append(f"Custom main action: {plan_request.action_custom}")
    if plan_request.goal:
        lines.append(f"Business goal in the client's words: {plan_request.goal}")
    lines.append(f"Budget level: {plan_request.budget_band}")
    lines.append(f"Competitors: {competitors}")
    lines.append(f"Channel intent map (hints only): {hints}")
    return "\n".join(lines)


def build_branch_prompts(
    plan_request: PlanRequest,
    goals_by_motion=GOALS_BY_MOTION,
    channels_by_motion=CHANNELS_BY_MOTION,
) -> List[BranchPrompt]:
    """
    Build one prompt per completion branch. Each branch owns a disjoint set of
    document keys and asks for a JSON object holding exactly those keys.
    """
    goal = derive_goal(plan_request, goals_by_motion)
    hints = channel_hints(plan_request, channels_by_motion)
    inputs = _input_block(plan_request, goal, hints)
    competitor_rule = competitor_instructions(plan_request)

    prompts = []
    for name, (keys, max_tokens, schema) in BRANCH_SCHEMAS.items():
        schema_text = json.dumps(schema, indent=2, ensure_ascii=False)
        competitor_section = f"\nCOMPETITOR ANALYSIS REQUIREMENT:\n{competitor_rule}\n" if name == "competition" else ""
        user = f"""You are writing part of a marketing strategy report. Cover ONLY {BRANCH_FOCUS[name]}.

{BRITISH_ENGLISH_RULES}

{FORMATTING_RULES}
{competitor_section}
INPUT DATA:
{inputs}

REQUIRED JSON STRUCTURE WITH EXACT FIELD NAMES:
{schema_text}

OUTPUT:
Return a valid JSON object with exactly these keys: {", ".join(keys)}. Each value is a plain-text string of 150-300 words in British English."""
        prompts.append(BranchPrompt(name=name, keys=keys, max_tokens=max_tokens, system=SYSTEM_ROLE, user=user))
    return prompts
