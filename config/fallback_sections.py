# Authored content used when no completion branch produced a section.
from types import MappingProxyType

FALLBACK_SECTIONS = MappingProxyType({
    "market_foundation": (
        "Market Overview\n\n"
        "A detailed market overview could not be generated for this request. "
        "Start by sizing the addressable market from public industry reports and "
        "noting the main growth drivers in your sector.\n\n"
        "Customer Behaviour Insights\n\n"
        "Interview five to ten recent customers about how they discovered, compared "
        "and chose an offering like yours."
    ),
    "strategy_pillars": (
        "Pillar 1: Capture existing demand\n\n"
        "Be visible wherever customers already look for your offering.\n\n"
        "Pillar 2: Build distinctive brand memory\n\n"
        "Use consistent brand assets and a single clear promise.\n\n"
        "Pillar 3: Retain and grow customers\n\n"
        "Turn first-time buyers into repeat customers and advocates."
    ),
    "personas": (
        "Primary Persona\n\n"
        "Describe your most valuable customer segment: who they are, what problem "
        "they need solved and where they look for solutions.\n\n"
        "Secondary Persona\n\n"
        "Describe the next most important segment and how their needs differ."
    ),
    "competitors_brief": (
        "Competitive Landscape Summary\n\n"
        "A competitor analysis could not be generated for this request. List your "
        "three closest alternatives, then compare their positioning, strengths and "
        "weaknesses against your own."
    ),
    "differentiators": (
        "Core Differentiation Strategy\n\n"
        "Identify the one benefit customers value that competitors do not deliver "
        "well, and make it the centre of every message."
    ),
    "seven_ps": (
        "Product\n\nClarify the core offering and its key benefits.\n\n"
        "Price\n\nPosition pricing relative to the value delivered.\n\n"
        "Place\n\nMake the offering easy to find and buy.\n\n"
        "Promotion\n\nFocus effort on the channels in the playbook.\n\n"
        "People\n\nEquip customer-facing staff to represent the brand.\n\n"
        "Process\n\nRemove friction from the customer journey.\n\n"
        "Physical Evidence\n\nShow reviews, guarantees and credentials."
    ),
    "budget_allocation": (
        "Allocation Rationale\n\n"
        "Weight effort towards high-intent channels first, then widen reach once "
        "conversion tracking is proven."
    ),
    "calendar_next_90_days": (
        "Month 1: Foundation\n\nSet up tracking, audit existing assets and launch "
        "the highest-intent channel.\n\n"
        "Month 2: Scaling\n\nAdd the second and third channels and start creative "
        "testing.\n\n"
        "Month 3: Optimisation\n\nShift effort towards the best performing channels "
        "and review the plan."
    ),
    "kpis": (
        "Primary KPIs\n\nConversions against the main goal and conversion rate.\n\n"
        "Leading Indicators\n\nQualified traffic, engagement rate and repeat visits."
    ),
    "risks_and_safety_nets": (
        "High-Risk Scenarios\n\nChannel performance below target or tracking gaps.\n\n"
        "Safety Nets\n\nReview results weekly and reallocate effort from "
        "underperforming channels within a fortnight."
    ),
    "experiments": (
        "Priority Tests\n\nTest two value propositions in search adverts and two "
        "landing page headlines.\n\n"
        "Testing Framework\n\nRun one test per channel at a time and agree the "
        "success criterion before launch."
    ),
})
