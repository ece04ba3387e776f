"""Validation and normalization of raw client input."""
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from src.app.core.domain.models import NewClient
from src.app.core.services.clock import Clock
from src.app.core.services.projection import whole_years_between
from src.shared.exceptions import ClientValidationError
from src.app.logging import get_logger

logger = get_logger(__name__)

FIRST_NAME_FIELD = "nombre"
LAST_NAME_FIELD = "apellido"
AGE_FIELD = "edad"
BIRTH_DATE_FIELD = "fecha_nacimiento"

AGE_MISMATCH_MESSAGE = "La edad no coincide con la fecha de nacimiento."

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_FORMAT_LABELS = {"%Y": "YYYY", "%m": "MM", "%d": "DD"}


class InvalidValue(ValueError):
    """Raised by a field parser when the raw value cannot be converted."""


@dataclass(frozen=True)
class Check:
    """A predicate over a parsed field value and the message reported when it fails."""
    predicate: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRules:
    """
    Ordered rules for one input field.

    The field is first checked for presence, then converted by `parse`. Every
    check runs against the parsed value and all failures are reported. A missing
    or unparseable value skips the checks, since there is nothing to check.
    """
    name: str
    required_message: str
    parse: Callable[[Any], Any]
    parse_message: str
    checks: tuple[Check, ...] = field(default_factory=tuple)


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_name(value: Any) -> str:
    # Every character must be a Unicode letter or whitespace
    if not isinstance(value, str) or not all(ch.isalpha() or ch.isspace() for ch in value):
        raise InvalidValue(value)
    return value


def parse_integer(value: Any) -> int:
    """Accept ints, integral floats and digit strings; reject booleans."""
    if isinstance(value, bool):
        raise InvalidValue(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    raise InvalidValue(value)


def date_parser(date_format: str) -> Callable[[Any], date]:
    """Build a strict parser: the value must render back to exactly the same text."""

    def parse(value: Any) -> date:
        if not isinstance(value, str):
            raise InvalidValue(value)
        try:
            parsed = datetime.strptime(value, date_format).date()
        except ValueError as e:
            raise InvalidValue(value) from e
        if parsed.strftime(date_format) != value:
            raise InvalidValue(value)
        return parsed

    return parse


def format_label(date_format: str) -> str:
    """Human-readable form of a strftime format, e.g. %Y-%m-%d -> YYYY-MM-DD."""
    label = date_format
    for directive, text in _FORMAT_LABELS.items():
        label = label.replace(directive, text)
    return label


def normalize_name(value: str) -> str:
    """Lowercase everything, then title-case the first character."""
    lowered = value.lower()
    # title(), not upper(): "ß" -> "Ss", "ﬁ" -> "Fi"
    return lowered[:1].title() + lowered[1:]


class ClientValidator:
    """
    Checks raw client input and produces a normalized NewClient.

    Validation is all-or-nothing: every field rule is evaluated, failures are
    accumulated per field and reported together through ClientValidationError.
    "Today" comes from the injected clock so results are reproducible.
    """

    def __init__(self, clock: Clock, date_format: str = "%Y-%m-%d"):
        self.clock = clock
        self.date_format = date_format

    def _field_rules(self, today: date) -> tuple[FieldRules, ...]:
        return (
            FieldRules(
                name=FIRST_NAME_FIELD,
                required_message="El campo nombre es requerido.",
                parse=parse_name,
                parse_message="El campo nombre solo debe contener letras y espacios.",
            ),
            FieldRules(
                name=LAST_NAME_FIELD,
                required_message="El campo apellido es requerido.",
                parse=parse_name,
                parse_message="El campo apellido solo debe contener letras y espacios.",
            ),
            FieldRules(
                name=AGE_FIELD,
                required_message="El campo edad es requerido.",
                parse=parse_integer,
                parse_message="El campo edad tiene que ser de tipo integer.",
                checks=(Check(lambda age: age >= 0, "La edad mínima es de 0."),),
            ),
            FieldRules(
                name=BIRTH_DATE_FIELD,
                required_message="El campo fecha_nacimiento es requerido.",
                parse=date_parser(self.date_format),
                parse_message=(
                    "El campo fecha_nacimiento tiene que ser de tipo date "
                    f"({format_label(self.date_format)})."
                ),
                checks=(
                    Check(
                        lambda birth_date: birth_date <= today,
                        "El campo fecha_nacimiento debe ser una fecha anterior o igual a la de hoy.",
                    ),
                ),
            ),
        )

    def validate(self, raw: Mapping[str, Any]) -> NewClient:
        """
        Validate raw input and return the normalized client.

        Args:
            raw: Field values as decoded from the request body

        Returns:
            NewClient with normalized names, stamped with the clock's current time

        Raises:
            ClientValidationError: If any rule fails; carries every failure per field
        """
        now = self.clock.now()
        today = now.date()
        errors: dict[str, list[str]] = {}
        parsed: dict[str, Any] = {}

        for rules in self._field_rules(today):
            value = raw.get(rules.name)
            if is_missing(value):
                errors.setdefault(rules.name, []).append(rules.required_message)
                continue
            try:
                parsed[rules.name] = rules.parse(value)
            except InvalidValue:
                errors.setdefault(rules.name, []).append(rules.parse_message)
                continue
            for check in rules.checks:
                if not check.predicate(parsed[rules.name]):
                    errors.setdefault(rules.name, []).append(check.message)

        if AGE_FIELD in parsed and BIRTH_DATE_FIELD in parsed:
            if whole_years_between(parsed[BIRTH_DATE_FIELD], today) != parsed[AGE_FIELD]:
                errors.setdefault(AGE_FIELD, []).append(AGE_MISMATCH_MESSAGE)

        if errors:
            logger.info("Rejected client input, failing fields: %s", sorted(errors))
            raise ClientValidationError(errors)

        return NewClient(
            first_name=normalize_name(parsed[FIRST_NAME_FIELD]),
            last_name=normalize_name(parsed[LAST_NAME_FIELD]),
            age=parsed[AGE_FIELD],
            birth_date=parsed[BIRTH_DATE_FIELD],
            created_at=now,
        )
