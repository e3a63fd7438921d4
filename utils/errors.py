class PlanError(Exception):
    """Base error for the marketing plan service. Carries the wire kind and HTTP status."""

    kind = "internal_error"
    status_code = 500

    def __init__(self, message=None, detail=None):
        super().__init__(message or self.kind)
        self.detail = detail

    def to_dict(self):
        body = {"error": self.kind}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


# --- Validation errors (fatal, raised before any upstream call) ---
class InvalidJson(PlanError):
    kind = "invalid_json"
    status_code = 400


class RequestTooLarge(PlanError):
    kind = "request_too_large"
    status_code = 413


class MissingRequiredFields(PlanError):
    kind = "missing_required_fields"
    status_code = 400

    def __init__(self, missing):
        super().__init__(f"Missing required fields: {', '.join(missing)}", detail={"missing": list(missing)})
        self.missing = list(missing)


class ForbiddenOrigin(PlanError):
    kind = "forbidden_origin"
    status_code = 403


class ApiKeyNotConfigured(PlanError):
    kind = "api_key_not_configured"
    status_code = 500


# --- Upstream errors (per-branch, degrade to fallback content) ---
class UpstreamError(PlanError):
    kind = "upstream_error"
    status_code = 502


class UpstreamTimeout(PlanError):
    kind = "upstream_timeout"
    status_code = 408


class MalformedCompletionContent(PlanError):
    kind = "malformed_completion_content"
    status_code = 502


class InternalError(PlanError):
    kind = "internal_error"
    status_code = 500
