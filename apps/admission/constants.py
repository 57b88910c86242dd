"""
Constants for the Student Admission form
Field patterns, messages and attachment limits shared by the API, the HTML
form and the Python client pipeline.
"""

import re

from django.utils.translation import gettext_lazy as _

# ============================================================================
# FIELD PATTERNS
# ============================================================================

class Patterns:
    TEXT = re.compile(r'^[A-Za-z\s.]+$', re.ASCII)            # letters, spaces, dots
    ALPHANUMERIC = re.compile(r'^[A-Za-z0-9\s\-/]+$', re.ASCII)  # class names like "10-A" or "IX/B"
    AADHAR = re.compile(r'^\d{12}$', re.ASCII)
    PHONE = re.compile(r'^[6-9]\d{9}$', re.ASCII)             # Indian mobile numbers
    EMAIL = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$', re.ASCII)
    DIGITS = re.compile(r'^\d*$', re.ASCII)


MIN_ADDRESS_LENGTH = 10

# 1 MiB, inclusive
MAX_ATTACHMENT_BYTES = 1024 * 1024

# Fields that refuse non-digit input at the keyboard
NUMERIC_FIELDS = ('phone_no', 'aadhar_no')

ATTACHMENT_FIELDS = ('student_signature', 'principal_signature', 'seal')


# ============================================================================
# MESSAGES
# ============================================================================

class Messages:
    DISTRICT = _("District Name should contain only letters.")
    SCHOOL_NAME = _("School Name should contain only letters/dots.")
    STUDENT_NAME = _("Student Name should contain only letters.")
    FATHER_NAME = _("Father Name should contain only letters.")
    CLASS_NAME = _("Class Name contains invalid characters.")
    AADHAR = _("Aadhar Number must be exactly 12 digits.")
    PHONE = _("Phone Number must be a valid 10-digit Indian number.")
    ADDRESS = _("Address is too short.")
    STUDENT_CONSENT = _("Student must agree to the declaration.")
    PRINCIPAL_CONSENT = _("Principal/Coordinator must agree to the declaration.")
    FILE_TOO_LARGE = _("File size must be less than 1MB")
    FILE_NOT_IMAGE = _("Only image files can be attached.")
    ATTACHMENT_REQUIRED = _("Please attach all signatures and the seal.")
    SUCCESS = _("Your admission form has been submitted successfully to the administration.")
