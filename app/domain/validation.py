from collections.abc import Mapping, Sequence
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict

from app.domain.constraints import ConstraintKind, FieldFormat, FieldKind, FieldRule
from app.domain.dates import is_valid_date


class BrokenConstraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ConstraintKind
    default_message: str


class FieldFailure(BaseModel):
    """All constraints a single field broke, in evaluation order.

    With first-failure-wins evaluation this holds exactly one entry.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    broken_constraints: tuple[BrokenConstraint, ...]


# Phrasing used when a constraint has no client-facing template below
_DEFAULT_MESSAGES: dict[ConstraintKind, str] = {
    ConstraintKind.IS_DEFINED: "{field} should not be null or undefined",
    ConstraintKind.IS_NOT_EMPTY: "{field} should not be empty",
    ConstraintKind.IS_STRING: "{field} must be a string",
    ConstraintKind.IS_INT: "{field} must be an integer number",
    ConstraintKind.MAX_LENGTH: "{field} must be shorter than or equal to {max_length} characters",
    ConstraintKind.IS_EMAIL: "{field} must be an email",
    ConstraintKind.IS_VALID_DATE: "{field} should have a valid date in YYYY-MM-DD format",
}

_MESSAGE_TEMPLATES: dict[ConstraintKind, str] = {
    ConstraintKind.IS_DEFINED: "{field} should not be omitted, undefined or null",
    ConstraintKind.IS_NOT_EMPTY: "{field} should not be an empty string",
    ConstraintKind.IS_STRING: "{field} must be a string",
    ConstraintKind.IS_EMAIL: "{field} property must contain a valid email",
    ConstraintKind.IS_VALID_DATE: "{field} should have a valid date in YYYY-MM-DD format",
}

_SEPARATOR = " // "


def _broken(rule: FieldRule, kind: ConstraintKind) -> BrokenConstraint:
    return BrokenConstraint(
        kind=kind,
        default_message=_DEFAULT_MESSAGES[kind].format(field=rule.field, max_length=rule.max_length),
    )


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False, allow_quoted_local=True)
    except EmailNotValidError:
        return False
    return True


def _first_broken_constraint(rule: FieldRule, value: Any) -> Optional[ConstraintKind]:
    """Runs the type, length, format and domain checks in that order."""
    if rule.kind is FieldKind.INT:
        if isinstance(value, bool) or not isinstance(value, int):
            return ConstraintKind.IS_INT
        return None

    if not isinstance(value, str):
        return ConstraintKind.IS_STRING
    if rule.max_length is not None and len(value) > rule.max_length:
        return ConstraintKind.MAX_LENGTH
    if rule.format is FieldFormat.EMAIL and not _is_email(value):
        return ConstraintKind.IS_EMAIL
    if rule.kind is FieldKind.DATE and not is_valid_date(value):
        return ConstraintKind.IS_VALID_DATE
    return None


def validate_payload(
    payload: Mapping[str, Any],
    rules: Sequence[FieldRule],
    partial: bool = False,
) -> list[FieldFailure]:
    """Checks an inbound payload against a rule table.

    Fields are visited in rule declaration order and evaluation for a field
    stops at its first broken constraint. In ``partial`` mode (PATCH) absent
    and null fields are skipped; a null on a required column is left for the
    storage NOT NULL constraint to reject.

    Args:
        payload (Mapping[str, Any]): Raw decoded JSON body.
        rules (Sequence[FieldRule]): The record's constraint schema.
        partial (bool): Whether omitted fields keep their stored value.

    Returns:
        list[FieldFailure]: One entry per failing field, empty if valid.
    """
    failures = []
    for rule in rules:
        value = payload.get(rule.field)

        if value is None:
            if rule.required and not partial:
                failures.append(FieldFailure(
                    field=rule.field,
                    broken_constraints=(_broken(rule, ConstraintKind.IS_DEFINED),),
                ))
            continue

        if rule.required and value == "":
            failures.append(FieldFailure(
                field=rule.field,
                broken_constraints=(_broken(rule, ConstraintKind.IS_NOT_EMPTY),),
            ))
            continue

        kind = _first_broken_constraint(rule, value)
        if kind is not None:
            failures.append(FieldFailure(field=rule.field, broken_constraints=(_broken(rule, kind),)))

    return failures


def build_messages(failures: Sequence[FieldFailure]) -> list[str]:
    """Turns field failures into the client-facing message list.

    Known constraint kinds get a fixed, field-interpolated phrasing; any
    other kind falls back to the constraint's own default message.
    """
    messages = []
    for failure in failures:
        parts = []
        for broken in failure.broken_constraints:
            template = _MESSAGE_TEMPLATES.get(broken.kind)
            if template is None:
                parts.append(broken.default_message)
            else:
                parts.append(template.format(field=failure.field))
        messages.append(_SEPARATOR.join(parts))
    return messages
