from rest_framework import serializers

from apps.core.serializers import RegistrationSerializer

from .models import Trainer
from .validators import validate_trainer


def _text(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, default='', **kwargs)


class TrainerRegistrationSerializer(RegistrationSerializer):
    rules = validate_trainer

    fullName = _text(source='full_name')
    phoneNo = _text(source='phone_no')
    email = _text()
    district = _text()

    class Meta:
        model = Trainer
        fields = ['uniqueId', 'fullName', 'phoneNo', 'email', 'district', 'password']


class TrainerSerializer(serializers.ModelSerializer):
    """Admin view of a trainer"""
    uniqueId = serializers.CharField(source='unique_id', read_only=True)
    fullName = serializers.CharField(source='full_name', read_only=True)
    phoneNo = serializers.CharField(source='phone_no', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Trainer
        fields = ['id', 'uniqueId', 'fullName', 'phoneNo', 'email', 'district', 'status', 'createdAt']
        read_only_fields = fields


class TrainerReferenceSerializer(serializers.ModelSerializer):
    """Approved trainer as offered for assignment"""
    uniqueId = serializers.CharField(source='unique_id', read_only=True)
    fullName = serializers.CharField(source='full_name', read_only=True)

    class Meta:
        model = Trainer
        fields = ['uniqueId', 'fullName', 'district']
        read_only_fields = fields
