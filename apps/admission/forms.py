from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.exceptions import FileConstraintError
from apps.core.utils.form_helpers import DateInput, DigitsInput, ImageInput, PhoneInput

from .constants import ATTACHMENT_FIELDS
from .models import StudentAdmission
from .submission import SubmissionBuilder
from .validators import validate


class StudentAdmissionForm(forms.Form):
    """
    Server-rendered admission form. Uploaded images are turned into data
    URLs so the stored record matches what the JSON endpoint receives.
    """
    district = forms.CharField(max_length=100, label=_("District"))
    school_name = forms.CharField(max_length=255, label=_("Name of School/College"))
    student_name = forms.CharField(max_length=200, label=_("Name of Student"))
    father_name = forms.CharField(max_length=200, label=_("Father Name"))
    date_of_birth = forms.DateField(widget=DateInput(), label=_("Date of Birth"))
    class_name = forms.CharField(max_length=50, label=_("Class"))
    aadhar_no = forms.CharField(
        max_length=12, widget=DigitsInput(max_length=12), label=_("Student Aadhar No.")
    )
    phone_no = forms.CharField(max_length=10, widget=PhoneInput(), label=_("Phone No."))
    address = forms.CharField(widget=forms.Textarea(attrs={'rows': 3}), label=_("Address"))

    student_consent = forms.BooleanField(required=False, label=_("Student Declaration"))
    student_signature = forms.FileField(
        widget=ImageInput(), label=_("Student Signature (Image < 1MB)")
    )
    principal_consent = forms.BooleanField(required=False, label=_("Principal Declaration"))
    principal_signature = forms.FileField(
        widget=ImageInput(), label=_("Principal/Coordinator Signature (Image < 1MB)")
    )
    seal = forms.FileField(widget=ImageInput(), label=_("School Seal (Image < 1MB)"))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.builder = SubmissionBuilder()

    def _clean_attachment(self, field):
        upload = self.cleaned_data.get(field)
        if upload is None:
            return upload
        try:
            self.builder.attach_file(field, upload)
        except FileConstraintError as exc:
            raise forms.ValidationError(exc.message)
        return upload

    def clean_student_signature(self):
        return self._clean_attachment('student_signature')

    def clean_principal_signature(self):
        return self._clean_attachment('principal_signature')

    def clean_seal(self):
        return self._clean_attachment('seal')

    def clean(self):
        cleaned_data = super().clean()
        if self.errors:
            return cleaned_data

        self.builder.update(
            district=cleaned_data['district'],
            school_name=cleaned_data['school_name'],
            student_name=cleaned_data['student_name'],
            father_name=cleaned_data['father_name'],
            date_of_birth=cleaned_data['date_of_birth'].isoformat(),
            class_name=cleaned_data['class_name'],
            address=cleaned_data['address'],
        )
        # digits-only fields keep their raw value so the rule reports it
        self.builder.submission.aadhar_no = cleaned_data['aadhar_no']
        self.builder.submission.phone_no = cleaned_data['phone_no']
        self.builder.set_consent(
            student=cleaned_data.get('student_consent'),
            principal=cleaned_data.get('principal_consent'),
        )

        failure = validate(self.builder.submission)
        if failure is not None:
            raise forms.ValidationError(failure.message, code=failure.field)
        return cleaned_data

    def save(self):
        submission = self.builder.build()
        admission = StudentAdmission(
            district=submission.district,
            school_name=submission.school_name,
            student_name=submission.student_name,
            father_name=submission.father_name,
            date_of_birth=self.cleaned_data['date_of_birth'],
            class_name=submission.class_name,
            aadhar_no=submission.aadhar_no,
            phone_no=submission.phone_no,
            address=submission.address,
            student_consent=submission.student_consent,
            principal_consent=submission.principal_consent,
        )
        for field in ATTACHMENT_FIELDS:
            setattr(admission, field, getattr(submission, field))
        admission.save()
        return admission
