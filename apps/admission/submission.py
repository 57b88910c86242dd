"""
Admission form state and the builder that shapes user input into it.

The builder applies the input-boundary policies of the form: numeric fields
drop non-digit keystrokes, and image attachments over 1 MiB are refused
before anything is encoded or sent. Accepted images are stored as data URLs
(``data:<mime>;base64,<payload>``) so the payload is plain JSON.
"""
import base64
import binascii
import io
import logging
import mimetypes
import re
from dataclasses import asdict, dataclass, fields, replace
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from apps.core.exceptions import FileConstraintError

from .constants import (
    ATTACHMENT_FIELDS, MAX_ATTACHMENT_BYTES, NUMERIC_FIELDS, Messages, Patterns,
)

logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(r'^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$', re.DOTALL)

# python attribute -> JSON key used by the admission endpoint
WIRE_FIELDS = {
    'district': 'district',
    'school_name': 'schoolName',
    'student_name': 'studentName',
    'father_name': 'fatherName',
    'date_of_birth': 'dob',
    'class_name': 'className',
    'aadhar_no': 'aadharNo',
    'address': 'address',
    'phone_no': 'phoneNo',
    'student_signature': 'studentSignature',
    'principal_signature': 'principalSignature',
    'seal': 'seal',
    'student_consent': 'studentConsent',
    'principal_consent': 'principalConsent',
}


@dataclass
class AdmissionSubmission:
    district: str = ''
    school_name: str = ''
    student_name: str = ''
    father_name: str = ''
    date_of_birth: str = ''
    class_name: str = ''
    aadhar_no: str = ''
    address: str = ''
    phone_no: str = ''
    student_signature: str = ''
    principal_signature: str = ''
    seal: str = ''
    student_consent: bool = False
    principal_consent: bool = False

    def to_payload(self):
        return {WIRE_FIELDS[name]: value for name, value in asdict(self).items()}

    @classmethod
    def from_payload(cls, data):
        known = {f.name for f in fields(cls)}
        values = {}
        for name, key in WIRE_FIELDS.items():
            if name in known and key in data:
                values[name] = data[key]
        return cls(**values)


# ============================================================================
# ATTACHMENTS
# ============================================================================

def sniff_image_mime(data: bytes) -> Optional[str]:
    """MIME type of an image according to Pillow, None if it is not one"""
    try:
        with Image.open(io.BytesIO(data)) as image:
            return Image.MIME.get(image.format)
    except (UnidentifiedImageError, OSError):
        return None


def check_attachment_size(size: int, field: Optional[str] = None):
    if size > MAX_ATTACHMENT_BYTES:
        raise FileConstraintError(str(Messages.FILE_TOO_LARGE), field=field, size=size)


def encode_attachment(data: bytes, content_type: Optional[str] = None,
                      filename: Optional[str] = None, field: Optional[str] = None) -> str:
    """
    Encode an image as a data URL. Raises ``FileConstraintError`` when the
    file is larger than 1 MiB or is not an image.
    """
    check_attachment_size(len(data), field=field)

    mime = content_type or sniff_image_mime(data)
    if not mime and filename:
        mime, _encoding = mimetypes.guess_type(filename)
    if not mime or not mime.startswith('image/'):
        raise FileConstraintError(str(Messages.FILE_NOT_IMAGE), field=field, size=len(data))

    payload = base64.b64encode(data).decode('ascii')
    return f"data:{mime};base64,{payload}"


def decode_data_url(value: str) -> Tuple[str, bytes]:
    """
    Split a data URL into (mime, raw bytes). Raises ValueError when the text
    is not a base64 data URL.
    """
    match = DATA_URL_RE.match(value or '')
    if not match:
        raise ValueError('Not a base64 data URL')
    try:
        data = base64.b64decode(match.group('payload'), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError('Invalid base64 payload') from exc
    return match.group('mime'), data


# ============================================================================
# BUILDER
# ============================================================================

class SubmissionBuilder:
    """
    Collects field values, consents and attachments into an
    ``AdmissionSubmission``.
    """

    def __init__(self, submission: Optional[AdmissionSubmission] = None):
        self._submission = replace(submission) if submission else AdmissionSubmission()

    @property
    def submission(self) -> AdmissionSubmission:
        return self._submission

    def set_field(self, name: str, value: str) -> bool:
        """
        Store a text field. Returns False (and keeps the previous value) when
        a numeric-only field receives a non-digit value.
        """
        if name not in WIRE_FIELDS or name in ATTACHMENT_FIELDS:
            raise KeyError(name)
        if name in NUMERIC_FIELDS and not Patterns.DIGITS.fullmatch(value or ''):
            return False
        setattr(self._submission, name, value)
        return True

    def update(self, **values) -> 'SubmissionBuilder':
        for name, value in values.items():
            self.set_field(name, value)
        return self

    def set_consent(self, student: Optional[bool] = None, principal: Optional[bool] = None):
        if student is not None:
            self._submission.student_consent = bool(student)
        if principal is not None:
            self._submission.principal_consent = bool(principal)

    def attach(self, field: str, data: bytes, content_type: Optional[str] = None,
               filename: Optional[str] = None) -> str:
        """
        Encode and store one attachment. On ``FileConstraintError`` the slot
        keeps whatever it held before.
        """
        if field not in ATTACHMENT_FIELDS:
            raise KeyError(field)
        try:
            encoded = encode_attachment(data, content_type=content_type, filename=filename, field=field)
        except FileConstraintError:
            logger.info("Attachment %s refused (%d bytes)", field, len(data))
            raise
        setattr(self._submission, field, encoded)
        return encoded

    def attach_file(self, field: str, fileobj, content_type: Optional[str] = None) -> str:
        """
        Attach from a file object or an uploaded file. The size is checked
        before the content is read when the object reports one.
        """
        size = getattr(fileobj, 'size', None)
        if size is not None:
            check_attachment_size(size, field=field)
        filename = getattr(fileobj, 'name', None)
        content_type = content_type or getattr(fileobj, 'content_type', None)
        return self.attach(field, fileobj.read(), content_type=content_type, filename=filename)

    def build(self) -> AdmissionSubmission:
        return replace(self._submission)
