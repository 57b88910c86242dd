import django_filters
from django.db.models import Q

from .models import StudentAdmission


class StudentAdmissionFilter(django_filters.FilterSet):
    district = django_filters.CharFilter(
        field_name='district',
        lookup_expr='iexact',
        label='District'
    )
    search = django_filters.CharFilter(
        method='filter_search',
        label='Search'
    )

    class Meta:
        model = StudentAdmission
        fields = ['district', 'search']

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(student_name__icontains=value) |
            Q(school_name__icontains=value) |
            Q(father_name__icontains=value)
        )
