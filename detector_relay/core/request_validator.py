"""
Validation of inbound /api/analyze payloads.

validate_analysis_request() never raises on bad input: it returns a
ValidationResult listing every violated constraint, which the route renders
as a 400. Issues are flattened the same way the original JSON clients expect:

    {"formErrors": [...], "fieldErrors": {"url": ["..."]}}
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from detector_relay.schemas.analysis import AnalysisRequest

MISSING_SOURCE_MESSAGE = 'Debes enviar "url" o "base64" para analizar el archivo.'


@dataclass(frozen=True)
class ValidationIssue:
    path: str       # dotted field path, "" for form-level problems
    message: str


@dataclass
class ValidationResult:
    request: Optional[AnalysisRequest] = None
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.request is not None and not self.issues

    def flatten(self) -> dict:
        form_errors: list[str] = []
        field_errors: dict[str, list[str]] = {}
        for issue in self.issues:
            if issue.path:
                field_errors.setdefault(issue.path, []).append(issue.message)
            else:
                form_errors.append(issue.message)
        return {"formErrors": form_errors, "fieldErrors": field_errors}


def _issues_from(exc: ValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(".".join(str(part) for part in err["loc"]), err["msg"])
        for err in exc.errors()
    ]


def invalid_body(message: str) -> ValidationResult:
    return ValidationResult(issues=[ValidationIssue("", message)])


def validate_analysis_request(payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return invalid_body("El cuerpo de la solicitud debe ser un objeto JSON.")

    issues: list[ValidationIssue] = []
    request = None
    try:
        request = AnalysisRequest.model_validate(payload)
    except ValidationError as e:
        issues.extend(_issues_from(e))

    # Empty strings count as absent; the min-length rule already flags an empty base64
    if not payload.get("url") and not payload.get("base64"):
        issues.append(ValidationIssue("url", MISSING_SOURCE_MESSAGE))

    if issues:
        return ValidationResult(issues=issues)
    return ValidationResult(request=request)
