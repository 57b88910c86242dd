import django_filters

from apps.core.filters import ReviewStatusFilter

from .models import Institution, InstitutionType


class InstitutionFilter(ReviewStatusFilter):
    insti_type = django_filters.ChoiceFilter(choices=InstitutionType.CHOICES, label='Type')

    class Meta:
        model = Institution
        fields = ['status', 'district', 'insti_type']
