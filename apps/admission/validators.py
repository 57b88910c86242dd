"""
Format checks for a student admission candidate.

``validate`` applies the rules in a fixed order and returns the first
failure, or None when the candidate may be transmitted. It never raises and
never touches the database, so the API, the HTML form and the client
pipeline all share it.
"""
from collections.abc import Mapping

from apps.core.exceptions import SubmissionValidationError

from .constants import MIN_ADDRESS_LENGTH, Messages, Patterns


class AdmissionValidationError(SubmissionValidationError):
    pass


def _value(candidate, name):
    if isinstance(candidate, Mapping):
        value = candidate.get(name)
    else:
        value = getattr(candidate, name, None)
    return '' if value is None else value


def _matches(pattern, value):
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def _is_true(value):
    return value is True


# (field, pattern, message), checked in this order
PATTERN_RULES = (
    ('district', Patterns.TEXT, Messages.DISTRICT),
    ('school_name', Patterns.TEXT, Messages.SCHOOL_NAME),
    ('student_name', Patterns.TEXT, Messages.STUDENT_NAME),
    ('father_name', Patterns.TEXT, Messages.FATHER_NAME),
    ('class_name', Patterns.ALPHANUMERIC, Messages.CLASS_NAME),
    ('aadhar_no', Patterns.AADHAR, Messages.AADHAR),
    ('phone_no', Patterns.PHONE, Messages.PHONE),
)

CONSENT_RULES = (
    ('student_consent', Messages.STUDENT_CONSENT),
    ('principal_consent', Messages.PRINCIPAL_CONSENT),
)


def validate(candidate):
    """
    Check an admission candidate (a mapping or an object with the snake_case
    field names). Returns ``AdmissionValidationError`` or None.
    """
    for field, pattern, message in PATTERN_RULES:
        if not _matches(pattern, _value(candidate, field)):
            return AdmissionValidationError(str(message), field=field)

    address = _value(candidate, 'address')
    if not isinstance(address, str) or len(address) < MIN_ADDRESS_LENGTH:
        return AdmissionValidationError(str(Messages.ADDRESS), field='address')

    for field, message in CONSENT_RULES:
        if not _is_true(_value(candidate, field)):
            return AdmissionValidationError(str(message), field=field)

    return None


def is_transmittable(candidate):
    return validate(candidate) is None
