from django.utils.translation import gettext_lazy as _

from apps.admission.constants import Patterns
from apps.core.exceptions import SubmissionValidationError


class Messages:
    FULL_NAME = _("Full Name should contain only letters.")
    PHONE = _("Phone Number must be a valid 10-digit Indian number.")
    EMAIL = _("Please enter a valid email address.")
    DISTRICT = _("District should contain only letters.")
    PASSWORD = _("Password is required.")


RULES = (
    ('fullName', Patterns.TEXT, Messages.FULL_NAME),
    ('phoneNo', Patterns.PHONE, Messages.PHONE),
    ('email', Patterns.EMAIL, Messages.EMAIL),
    ('district', Patterns.TEXT, Messages.DISTRICT),
)


def validate_trainer(candidate):
    """
    First failing rule of a trainer registration (camelCase keys), or None
    """
    for field, pattern, message in RULES:
        value = candidate.get(field) or ''
        if not isinstance(value, str) or not pattern.fullmatch(value):
            return SubmissionValidationError(str(message), field=field)
    if not candidate.get('password'):
        return SubmissionValidationError(str(Messages.PASSWORD), field='password')
    return None
