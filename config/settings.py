import os
from dotenv import load_dotenv

load_dotenv()


def _split_env(name, default):
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def parse_budget_split(raw):
    """Parse a comma-separated split of whole percentages, failing fast on values no plan can carry."""
    try:
        split = [int(item.strip()) for item in raw.split(",") if item.strip()]
    except ValueError:
        raise ValueError(f"BUDGET_SPLIT must be comma-separated whole numbers, got {raw!r}")
    if not split or any(percent < 0 or percent > 100 for percent in split) or sum(split) > 100:
        raise ValueError(f"BUDGET_SPLIT must hold percentages between 0 and 100 summing to at most 100, got {raw!r}")
    return split


class Config:
    # OpenAI / Azure OpenAI
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
    AZURE_OPENAI_ENDPOINT = os.getenv("AZURE_OPENAI_ENDPOINT")
    AZURE_OPENAI_API_VERSION = os.getenv("AZURE_OPENAI_API_VERSION", "2024-02-01")
    AZURE_DEPLOYMENT_NAME = os.getenv("AZURE_DEPLOYMENT_NAME")

    # Fan-out limits
    BRANCH_TIMEOUT_SECONDS = float(os.getenv("BRANCH_TIMEOUT_SECONDS", "18"))
    FAN_OUT_GRACE_SECONDS = float(os.getenv("FAN_OUT_GRACE_SECONDS", "2"))

    # Request limits
    MAX_REQUEST_BYTES = int(os.getenv("MAX_REQUEST_BYTES", "10240"))

    # Channel budget split, descending percentages
    BUDGET_SPLIT = parse_budget_split(os.getenv("BUDGET_SPLIT", "35,25,20,15,5"))

    # CORS Configuration
    CORS_ORIGINS = _split_env("CORS_ORIGINS", "http://localhost:5173")
    ENFORCE_ORIGIN = os.getenv("ENFORCE_ORIGIN", "false").lower() == "true"

    FLASK_DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"
    PORT = int(os.getenv("PORT", "8000"))
