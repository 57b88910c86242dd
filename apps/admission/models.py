from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from encrypted_model_fields.fields import EncryptedCharField

from apps.core.models import BaseModel

from .constants import MIN_ADDRESS_LENGTH, Messages, Patterns

text_regex = RegexValidator(regex=Patterns.TEXT, message=Messages.STUDENT_NAME)
class_regex = RegexValidator(regex=Patterns.ALPHANUMERIC, message=Messages.CLASS_NAME)
aadhar_regex = RegexValidator(regex=Patterns.AADHAR, message=Messages.AADHAR)
phone_regex = RegexValidator(regex=Patterns.PHONE, message=Messages.PHONE)


class StudentAdmission(BaseModel):
    """
    Student admission form received from a school or college.

    Signatures and the seal are kept as data URLs, exactly as submitted.
    """
    district = models.CharField(
        max_length=100,
        validators=[RegexValidator(regex=Patterns.TEXT, message=Messages.DISTRICT)],
        verbose_name=_("District")
    )
    school_name = models.CharField(
        max_length=255,
        validators=[RegexValidator(regex=Patterns.TEXT, message=Messages.SCHOOL_NAME)],
        verbose_name=_("Name of School/College")
    )
    student_name = models.CharField(
        max_length=200,
        validators=[text_regex],
        verbose_name=_("Name of Student")
    )
    father_name = models.CharField(
        max_length=200,
        validators=[RegexValidator(regex=Patterns.TEXT, message=Messages.FATHER_NAME)],
        verbose_name=_("Father Name")
    )
    date_of_birth = models.DateField(verbose_name=_("Date of Birth"))
    class_name = models.CharField(
        max_length=50,
        validators=[class_regex],
        verbose_name=_("Class")
    )
    aadhar_no = EncryptedCharField(
        max_length=12,
        validators=[aadhar_regex],
        verbose_name=_("Student Aadhar No.")
    )
    phone_no = models.CharField(
        max_length=10,
        validators=[phone_regex],
        verbose_name=_("Phone No.")
    )
    address = models.TextField(
        validators=[MinLengthValidator(MIN_ADDRESS_LENGTH, message=Messages.ADDRESS)],
        verbose_name=_("Address")
    )

    # Attachments
    student_signature = models.TextField(blank=True, verbose_name=_("Student Signature"))
    principal_signature = models.TextField(blank=True, verbose_name=_("Principal/Coordinator Signature"))
    seal = models.TextField(blank=True, verbose_name=_("School Seal"))

    # Declarations
    student_consent = models.BooleanField(default=False, verbose_name=_("Student Declaration"))
    principal_consent = models.BooleanField(default=False, verbose_name=_("Principal Declaration"))

    class Meta:
        db_table = "student_admissions"
        verbose_name = _("Student Admission")
        verbose_name_plural = _("Student Admissions")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=['district', 'created_at']),
        ]

    def __str__(self):
        return f"{self.student_name} - {self.school_name}"

    @property
    def masked_aadhar(self):
        if not self.aadhar_no:
            return ''
        return f"XXXX-XXXX-{self.aadhar_no[-4:]}"

    @property
    def attachments(self):
        return [
            (_('Student Signature'), self.student_signature),
            (_('Principal Signature'), self.principal_signature),
            (_('School Seal'), self.seal),
        ]
