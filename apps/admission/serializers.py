# apps/admission/serializers.py
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .constants import ATTACHMENT_FIELDS, Messages
from .models import StudentAdmission
from .submission import check_attachment_size, decode_data_url
from .validators import validate


def _text(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=False, **kwargs)


class StudentAdmissionSerializer(serializers.ModelSerializer):
    """
    Admission form as sent by the public page (camelCase keys).

    Field checks run in ``validate`` so the first failing rule decides the
    message, the same way the page validates before sending.
    """
    schoolName = _text(source='school_name')
    studentName = _text(source='student_name')
    fatherName = _text(source='father_name')
    dob = serializers.DateField(source='date_of_birth')
    className = _text(source='class_name')
    aadharNo = _text(source='aadhar_no')
    phoneNo = _text(source='phone_no')
    studentSignature = _text(source='student_signature')
    principalSignature = _text(source='principal_signature')
    studentConsent = serializers.BooleanField(source='student_consent', default=False)
    principalConsent = serializers.BooleanField(source='principal_consent', default=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    district = _text()
    address = _text()
    seal = _text()

    class Meta:
        model = StudentAdmission
        fields = [
            'id', 'district', 'schoolName', 'studentName', 'fatherName', 'dob',
            'className', 'aadharNo', 'phoneNo', 'address', 'studentSignature',
            'principalSignature', 'seal', 'studentConsent', 'principalConsent',
            'createdAt',
        ]
        read_only_fields = ['id', 'createdAt']

    def validate(self, attrs):
        failure = validate(attrs)
        if failure is not None:
            raise serializers.ValidationError({'non_field_errors': [failure.message]})

        for field in ATTACHMENT_FIELDS:
            value = attrs.get(field)
            if not value:
                continue
            try:
                mime, data = decode_data_url(value)
            except ValueError:
                raise serializers.ValidationError({
                    'non_field_errors': [_("Attachments must be uploaded as images.")]
                })
            # raises FileConstraintError -> 413
            check_attachment_size(len(data), field=field)
            if not mime.startswith('image/'):
                raise serializers.ValidationError({'non_field_errors': [Messages.FILE_NOT_IMAGE]})

        return attrs

