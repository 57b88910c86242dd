from rest_framework import serializers

from apps.core.serializers import RegistrationSerializer

from .models import Institution
from .validators import validate_institution


def _text(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, default='', **kwargs)


class InstitutionRegistrationSerializer(RegistrationSerializer):
    rules = validate_institution

    instiName = _text(source='insti_name')
    instiType = _text(source='insti_type')
    headName = _text(source='head_name')
    phoneNo = _text(source='phone_no')
    email = _text()
    district = _text()

    class Meta:
        model = Institution
        fields = [
            'uniqueId', 'instiName', 'instiType', 'headName',
            'phoneNo', 'email', 'district', 'password',
        ]


class InstitutionSerializer(serializers.ModelSerializer):
    """
    Admin view of an institution. ``trainerId`` is the assigned trainer's
    unique id, or null.
    """
    uniqueId = serializers.CharField(source='unique_id', read_only=True)
    instiName = serializers.CharField(source='insti_name', read_only=True)
    instiType = serializers.CharField(source='insti_type', read_only=True)
    headName = serializers.CharField(source='head_name', read_only=True)
    phoneNo = serializers.CharField(source='phone_no', read_only=True)
    trainerId = serializers.CharField(source='trainer.unique_id', read_only=True, default=None)
    trainerName = serializers.CharField(source='trainer.full_name', read_only=True, default=None)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Institution
        fields = [
            'id', 'uniqueId', 'instiName', 'instiType', 'headName', 'phoneNo',
            'email', 'district', 'status', 'trainerId', 'trainerName', 'createdAt',
        ]
        read_only_fields = fields


class TrainerAssignmentSerializer(serializers.Serializer):
    trainerId = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
