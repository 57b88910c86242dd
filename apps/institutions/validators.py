from django.utils.translation import gettext_lazy as _

from apps.admission.constants import Patterns
from apps.core.exceptions import SubmissionValidationError

from .models import InstitutionType


class Messages:
    INSTI_NAME = _("Institution name is required.")
    INSTI_TYPE = _("Please select the institution category.")
    HEAD_NAME = _("Head of institution is required.")
    PHONE = _("Phone Number must be a valid 10-digit Indian number.")
    EMAIL = _("Please enter a valid email address.")
    DISTRICT = _("District should contain only letters.")
    PASSWORD = _("Password is required.")


def _text(candidate, field):
    value = candidate.get(field)
    return value if isinstance(value, str) else ''


def validate_institution(candidate):
    """
    First failing rule of an institution registration (camelCase keys), or None
    """
    if not _text(candidate, 'instiName').strip():
        return SubmissionValidationError(str(Messages.INSTI_NAME), field='instiName')
    if _text(candidate, 'instiType') not in InstitutionType.ALL:
        return SubmissionValidationError(str(Messages.INSTI_TYPE), field='instiType')
    if not _text(candidate, 'headName').strip():
        return SubmissionValidationError(str(Messages.HEAD_NAME), field='headName')
    if not Patterns.PHONE.fullmatch(_text(candidate, 'phoneNo')):
        return SubmissionValidationError(str(Messages.PHONE), field='phoneNo')
    if not Patterns.EMAIL.fullmatch(_text(candidate, 'email')):
        return SubmissionValidationError(str(Messages.EMAIL), field='email')
    if not Patterns.TEXT.fullmatch(_text(candidate, 'district')):
        return SubmissionValidationError(str(Messages.DISTRICT), field='district')
    if not _text(candidate, 'password'):
        return SubmissionValidationError(str(Messages.PASSWORD), field='password')
    return None
