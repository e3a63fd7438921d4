import logging
from flask import Blueprint, request, jsonify, current_app

from services.completion_service import get_completion_client
from services.plan_assembly import generate_marketing_plan
from services.request_validator import validate_payload
from utils.errors import PlanError, RequestTooLarge, ForbiddenOrigin, InternalError

logger = logging.getLogger(__name__)

generate_bp = Blueprint('generate', __name__)

ROUTES = ["/generate"]


def _plan_config():
    return current_app.config["PLAN_CONFIG"]


def _error_response(error: PlanError):
    return jsonify(error.to_dict()), error.status_code


def _check_origin(config):
    origin = request.headers.get("Origin")
    if config.ENFORCE_ORIGIN and origin and origin not in config.CORS_ORIGINS:
        logger.warning(f"Rejected request from origin {origin}")
        raise ForbiddenOrigin(detail={"origin": origin})


@generate_bp.route('/generate', methods=['POST'])
def generate_plan():
    config = _plan_config()
    try:
        # 1. Reject oversized bodies before reading them
        if request.content_length is not None and request.content_length > config.MAX_REQUEST_BYTES:
            logger.warning(f"Rejected declared body of {request.content_length} bytes")
            raise RequestTooLarge(detail={"limit_bytes": config.MAX_REQUEST_BYTES})

        _check_origin(config)

        # 2. Validate and normalise the payload
        plan_request = validate_payload(request.get_data(cache=False), config.MAX_REQUEST_BYTES)

        # 3. Fan out, merge and post-process
        client = get_completion_client(config)
        document = generate_marketing_plan(plan_request, client, config)
        return jsonify(document), 200

    except PlanError as e:
        return _error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error generating plan: {e}", exc_info=True)
        return _error_response(InternalError(detail=str(e)))


@generate_bp.route('/generate', methods=['GET', 'PUT', 'PATCH', 'DELETE'])
def generate_method_not_allowed():
    return jsonify({"error": "method_not_allowed", "routes": ROUTES}), 405
