from django.contrib.auth import authenticate
from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    """
    Admin login; only staff accounts may open the dashboard
    """
    username = serializers.CharField(error_messages={'required': 'Username and password are required'})
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={'required': 'Username and password are required'},
    )

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            username=attrs['username'].strip(),
            password=attrs['password'],
        )
        if user is None:
            raise serializers.ValidationError({'non_field_errors': ['Invalid username or password']})
        if not (user.is_staff or user.is_superuser):
            raise serializers.ValidationError({'non_field_errors': ['This account cannot access the dashboard']})

        attrs['user'] = user
        return attrs
