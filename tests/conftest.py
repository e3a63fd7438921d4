import json
from types import SimpleNamespace

import httpx
import openai
import pytest

from app import create_app
from config.settings import Config
from services.prompt_builder import BRANCH_SCHEMAS

COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"

BRANCH_CONTENT = {
    "foundation": {
        "market_foundation": "Market Overview\n\nHome gardeners in Australia favor organic seed ranges. "
                             "Customer behavior peaks in spring.",
        "strategy_pillars": "Pillar 1: Trust\n\nShow germination results.",
        "personas": "Primary Persona: Weekend grower\n\nA suburban home gardener.",
    },
    "competition": {
        "competitors_brief": "SeedCo Analysis\n\nSeedCo sells packets from $4.50 and runs Google ads.",
        "differentiation_moves": "Core Differentiation Strategy\n\nCertified organic, locally grown.",
        "marketing_mix_7ps": "Product\n\nHeirloom varieties.",
    },
    "execution": {
        "budget": {"allocation": "Search: 35%\nPaid social: 25%", "budget_total": 12000},
        "calendar_next_90_days": "Month 1: Foundation\n\nSet up tracking.",
        "kpis": "Primary KPIs\n\nOnline orders. Cost: 500 per month is the ceiling.",
    },
    "assurance": {
        "risks_and_safety_nets": "High-Risk Scenarios\n\nA late spring.",
        "experiments": {"tests": [{"name": "Headline test", "price": "$10"}]},
    },
}


class PlanTestConfig(Config):
    OPENAI_API_KEY = "test-key"
    OPENAI_MODEL = "gpt-4o"
    AZURE_OPENAI_ENDPOINT = None
    AZURE_DEPLOYMENT_NAME = None
    BRANCH_TIMEOUT_SECONDS = 2.0
    FAN_OUT_GRACE_SECONDS = 0.5
    MAX_REQUEST_BYTES = 10240
    BUDGET_SPLIT = [35, 25, 20, 15, 5]
    CORS_ORIGINS = ["https://plans.example.com"]
    ENFORCE_ORIGIN = False


class FakeCompletionClient:
    """Stands in for openai.OpenAI; `responder(branch_name, kwargs)` returns content or raises."""

    def __init__(self, responder):
        self.responder = responder
        self.calls = []
        self.options = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def with_options(self, **options):
        self.options.append(options)
        return self

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        branch_name = branch_of(kwargs)
        content = self.responder(branch_name, kwargs)
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
            usage=SimpleNamespace(prompt_tokens=120, completion_tokens=340),
        )


def branch_of(kwargs):
    prompt = kwargs["messages"][-1]["content"]
    for name, (keys, _max_tokens, _schema) in BRANCH_SCHEMAS.items():
        if f"exactly these keys: {', '.join(keys)}." in prompt:
            return name
    raise AssertionError("prompt does not belong to a known branch")


def status_error(status_code):
    response = httpx.Response(status_code, request=httpx.Request("POST", COMPLETIONS_URL))
    return openai.APIStatusError(f"Error code: {status_code}", response=response, body=None)


def timeout_error():
    return openai.APITimeoutError(request=httpx.Request("POST", COMPLETIONS_URL))


@pytest.fixture
def plan_config():
    return PlanTestConfig


@pytest.fixture
def make_client():
    return FakeCompletionClient


@pytest.fixture
def succeed():
    def responder(branch_name, kwargs):
        return json.dumps(BRANCH_CONTENT[branch_name])
    return responder


@pytest.fixture
def fail_with():
    """Build a responder that fails the named branches with the given exception factory."""
    def build(failing, error_factory):
        def responder(branch_name, kwargs):
            if branch_name in failing:
                raise error_factory()
            return json.dumps(BRANCH_CONTENT[branch_name])
        return responder
    return build


@pytest.fixture
def upstream_status_error():
    return status_error


@pytest.fixture
def upstream_timeout_error():
    return timeout_error


@pytest.fixture
def seed_request_body():
    return {
        "country": "Australia",
        "sector": "Agriculture",
        "product_type": "organic seeds",
        "audiences": ["home gardeners"],
        "motion": "ecom_checkout",
        "competitors": ["SeedCo"],
        "budget_band": "low",
    }


@pytest.fixture
def app(plan_config):
    app = create_app(plan_config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def http_client(app):
    return app.test_client()
