import json
import logging
from pydantic import ValidationError

from models.plan_request_schema import PlanRequest
from utils.errors import InvalidJson, RequestTooLarge, MissingRequiredFields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("country", "product_type", "audiences")


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return not any(str(item).strip() for item in value if item is not None)
    return False


def find_missing_fields(payload):
    return [field for field in REQUIRED_FIELDS if _is_blank(payload.get(field))]


def validate_payload(raw: bytes, max_bytes: int) -> PlanRequest:
    """
    Validate a raw request body and return a normalised PlanRequest.

    The size ceiling is checked on the raw bytes before any decoding so a large
    body never reaches the JSON parser.
    """
    # 1. Size ceiling
    if len(raw) > max_bytes:
        logger.warning(f"Rejected request body of {len(raw)} bytes (limit {max_bytes})")
        raise RequestTooLarge(detail={"limit_bytes": max_bytes})

    # 2. Decode JSON
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Rejected undecodable request body: {e}")
        raise InvalidJson(str(e))
    if not isinstance(payload, dict):
        raise InvalidJson("Request body must be a JSON object")

    # 3. Required fields
    missing = find_missing_fields(payload)
    if missing:
        logger.warning(f"Rejected request missing fields: {missing}")
        raise MissingRequiredFields(missing)

    # 4. Normalise with defaults
    try:
        return PlanRequest(**{key: value for key, value in payload.items() if key in PlanRequest.model_fields})
    except ValidationError as e:
        logger.warning(f"Rejected request with invalid field types: {e.error_count()} error(s)")
        raise InvalidJson(
            "Request fields have invalid types",
            detail={"fields": sorted({".".join(str(loc) for loc in err["loc"]) for err in e.errors()})},
        )
