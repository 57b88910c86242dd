from rest_framework import serializers

from .models import CalendarEvent

REQUIRED_MESSAGE = 'Title and date are required'


class CalendarEventSerializer(serializers.ModelSerializer):
    title = serializers.CharField(
        max_length=200,
        error_messages={'required': REQUIRED_MESSAGE, 'blank': REQUIRED_MESSAGE, 'null': REQUIRED_MESSAGE},
    )
    date = serializers.DateField(
        error_messages={
            'required': REQUIRED_MESSAGE,
            'null': REQUIRED_MESSAGE,
            'invalid': 'Date must be in YYYY-MM-DD format',
        },
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = CalendarEvent
        fields = ['id', 'title', 'date', 'description']
        read_only_fields = ['id']
