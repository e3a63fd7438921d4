import itertools
import json

import pytest

from config.fallback_sections import FALLBACK_SECTIONS
from config.marketing_tables import CURRENCY_SYMBOLS
from models.marketing_plan_schema import DOCUMENT_KEYS, CompetitionFragment, ExecutionFragment
from models.plan_request_schema import PlanRequest
from services.completion_service import BranchOutcome
from services.plan_assembly import decode_fragment, generate_marketing_plan, merge_fragments
from services.channel_enrichment import build_channel_playbook
from utils.errors import InternalError, UpstreamTimeout

BRANCH_NAMES = ("foundation", "competition", "execution", "assurance")

EXPECTED_KEYS = [
    "meta", "market_foundation", "strategy_pillars", "personas", "competitors_brief",
    "differentiators", "seven_ps", "channel_playbook", "budget", "calendar_next_90_days",
    "kpis", "risks_and_safety_nets", "experiments",
]


@pytest.fixture
def seed_request(seed_request_body):
    return PlanRequest(**seed_request_body)


def test_document_keys_are_fixed():
    assert list(DOCUMENT_KEYS) == EXPECTED_KEYS


def test_decode_fragment_reconciles_field_names():
    outcome = BranchOutcome(name="competition", content=json.dumps({
        "competitors_brief": "SeedCo Analysis",
        "differentiation_moves": "Certified organic",
        "marketing_mix_7ps": {"product": "Heirloom"},
        "glossary": "ignored",
    }))
    fragment = decode_fragment(outcome, CompetitionFragment)
    assert fragment.present_sections() == {
        "competitors_brief": "SeedCo Analysis",
        "differentiators": "Certified organic",
        "seven_ps": {"product": "Heirloom"},
    }


def test_decode_fragment_lifts_nested_budget_allocation():
    outcome = BranchOutcome(name="execution", content='```json\n{"budget": {"allocation": "Search: 35%"}}\n```')
    assert decode_fragment(outcome, ExecutionFragment).budget_allocation == "Search: 35%"


def test_decode_fragment_marks_malformed_content():
    outcome = BranchOutcome(name="execution", content="Sorry, I cannot help with that.")
    fragment = decode_fragment(outcome, ExecutionFragment)
    assert fragment.present_sections() == {}
    assert outcome.error == "malformed_completion_content"


def test_decode_fragment_for_failed_branch_is_empty():
    outcome = BranchOutcome(name="execution", error="upstream_error")
    assert decode_fragment(outcome, ExecutionFragment).present_sections() == {}


def test_merge_with_no_fragments_uses_fallbacks(seed_request):
    playbook = build_channel_playbook(seed_request.motion, seed_request.budget_band)
    plan = merge_fragments(seed_request, [], playbook).model_dump()

    assert list(plan) == EXPECTED_KEYS
    assert plan["market_foundation"] == FALLBACK_SECTIONS["market_foundation"]
    assert plan["meta"] == {
        "title": "Marketing Strategy Report", "country": "Australia",
        "sector": "Agriculture", "goal": "Online orders",
    }
    assert plan["budget"]["band"] == "low"
    assert "Search: 35%" in plan["budget"]["allocation"]


def test_full_success_scenario(make_client, succeed, seed_request, plan_config):
    client = make_client(succeed)
    document = generate_marketing_plan(seed_request, client, plan_config)

    assert len(client.calls) == 4
    assert list(document) == EXPECTED_KEYS
    assert "SeedCo" in document["competitors_brief"]
    assert document["channel_playbook"][0]["channel"] == "Search"
    assert document["channel_playbook"][0]["budget_percent"] == 35
    assert document["differentiators"].startswith("Core Differentiation Strategy")
    assert document["budget"] == {"band": "low", "allocation": "Search: 35%\nPaid social: 25%"}
    # British English and no money left anywhere
    assert "favour organic" in document["market_foundation"]
    assert "Google adverts" in document["competitors_brief"]
    serialised = json.dumps(document, ensure_ascii=False)
    assert not any(symbol in serialised for symbol in CURRENCY_SYMBOLS)
    assert document["experiments"] == {"tests": [{"name": "Headline test"}]}


@pytest.mark.parametrize("failing", [
    set(combo) for size in range(len(BRANCH_NAMES) + 1) for combo in itertools.combinations(BRANCH_NAMES, size)
])
def test_every_failure_combination_keeps_all_keys(failing, make_client, fail_with, upstream_status_error,
                                                   seed_request, plan_config):
    client = make_client(fail_with(failing, lambda: upstream_status_error(502)))
    document = generate_marketing_plan(seed_request, client, plan_config)

    assert list(document) == EXPECTED_KEYS
    assert len(document["channel_playbook"]) == 5
    if "foundation" in failing:
        assert document["market_foundation"] == FALLBACK_SECTIONS["market_foundation"]
    else:
        assert document["market_foundation"] != FALLBACK_SECTIONS["market_foundation"]


def test_all_branches_failing_scenario(make_client, fail_with, upstream_status_error, seed_request, plan_config):
    client = make_client(fail_with(set(BRANCH_NAMES), lambda: upstream_status_error(500)))
    document = generate_marketing_plan(seed_request, client, plan_config)

    assert document["market_foundation"] == FALLBACK_SECTIONS["market_foundation"]
    assert [record["budget_percent"] for record in document["channel_playbook"]] == [35, 25, 20, 15, 5]
    assert document["budget"]["band"] == "low"


def test_assembly_crash_after_total_timeout(monkeypatch, make_client, fail_with, upstream_timeout_error,
                                            seed_request, plan_config):
    monkeypatch.setattr("services.plan_assembly.merge_fragments", _explode)
    client = make_client(fail_with(set(BRANCH_NAMES), upstream_timeout_error))
    with pytest.raises(UpstreamTimeout):
        generate_marketing_plan(seed_request, client, plan_config)


def test_assembly_crash_is_internal_error(monkeypatch, make_client, succeed, seed_request, plan_config):
    monkeypatch.setattr("services.plan_assembly.merge_fragments", _explode)
    with pytest.raises(InternalError):
        generate_marketing_plan(seed_request, make_client(succeed), plan_config)


def _explode(*args, **kwargs):
    raise RuntimeError("boom")
