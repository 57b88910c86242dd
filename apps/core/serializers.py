from rest_framework import serializers

from apps.core.models import ReviewStatus


class RegistrationSerializer(serializers.ModelSerializer):
    """
    Public registration: stores the password hashed and answers with the
    generated ``uniqueId``.

    ``rules`` is a function taking the camelCase payload and returning the
    first ``SubmissionValidationError`` or None.
    """
    rules = None

    uniqueId = serializers.CharField(source='unique_id', read_only=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        payload = {key: self.initial_data.get(key) for key in self.fields if key in self.initial_data}
        failure = type(self).rules(payload)
        if failure is not None:
            raise serializers.ValidationError({'non_field_errors': [failure.message]})
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        instance = self.Meta.model(**validated_data)
        instance.set_password(password)
        instance.save()
        return instance


class StatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=ReviewStatus.ALL,
        error_messages={'invalid_choice': 'Invalid status'},
    )
