"""Pydantic schemas for sharable configs and rule settings."""


from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

SeverityValue: TypeAlias = Literal["off", "warning", "error", 0, 1, 2]
RuleSpec: TypeAlias = SeverityValue | list[Any]

_SEVERITY_VALUES: frozenset[object] = frozenset({"off", "warning", "error", 0, 1, 2})


def is_severity_value(value: object) -> bool:
    """Return whether ``value`` is an accepted severity token."""
    if isinstance(value, bool):
        return False
    return value in _SEVERITY_VALUES


def check_rule_specs(rules: dict[str, Any]) -> dict[str, Any]:
    """Require a leading severity in every list-form rule spec."""
    for name, spec in rules.items():
        if isinstance(spec, list):
            if not spec:
                raise ValueError(f"rule '{name}' has an empty configuration list")
            if not is_severity_value(spec[0]):
                raise ValueError(
                    f"rule '{name}' must start with a severity, got {spec[0]!r}"
                )
    return rules


def error_details(exc: ValidationError) -> tuple[dict[str, Any], ...]:
    """Flatten pydantic errors into plain location/message records."""
    return tuple(
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    )


class SharableConfig(BaseModel):
    """Shape every sharable config package must export."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    rules: dict[str, RuleSpec]

    @field_validator("rules")
    @classmethod
    def _validate_rule_specs(cls, rules: dict[str, Any]) -> dict[str, Any]:
        return check_rule_specs(rules)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a schema check, carrying errors alongside the verdict."""

    valid: bool
    errors: tuple[dict[str, Any], ...] = field(default_factory=tuple)
    config: SharableConfig | None = None

    def __bool__(self) -> bool:
        return self.valid


def validate_sharable_config(candidate: object) -> ValidationResult:
    """Validate a mapping, module, or attribute bag as a sharable config."""
    try:
        config = SharableConfig.model_validate(candidate)
    except ValidationError as exc:
        return ValidationResult(valid=False, errors=error_details(exc))
    return ValidationResult(valid=True, config=config)


class _RuleDocsShape(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    type: str
    description: str | None = None


class _RuleMetaShape(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    docs: _RuleDocsShape


class RuleDefinitionShape(BaseModel):
    """Minimum metadata a rule definition must expose to be executed."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    meta: _RuleMetaShape


def validate_rule_definition(candidate: object) -> ValidationResult:
    """Check that a loaded rule exposes ``meta.docs.type``."""
    if candidate is None:
        return ValidationResult(
            valid=False,
            errors=({"loc": [], "msg": "rule definition is missing", "type": "missing"},),
        )
    try:
        RuleDefinitionShape.model_validate(candidate, from_attributes=True)
    except ValidationError as exc:
        return ValidationResult(valid=False, errors=error_details(exc))
    return ValidationResult(valid=True)
