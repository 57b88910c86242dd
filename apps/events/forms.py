from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.utils.form_helpers import DateInput

from .models import CalendarEvent


class CalendarEventForm(forms.ModelForm):
    class Meta:
        model = CalendarEvent
        fields = ['title', 'date', 'description']
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('Event title')}),
            'date': DateInput(),
            'description': forms.Textarea(attrs={'rows': 2, 'class': 'form-control'}),
        }
