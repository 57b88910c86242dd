import django_filters

from apps.core.models import ReviewStatus


class ReviewStatusFilter(django_filters.FilterSet):
    """
    ``?status=`` and ``?district=`` for the admin review lists; status is
    case-insensitive
    """
    status = django_filters.CharFilter(method='filter_status', label='Status')
    district = django_filters.CharFilter(field_name='district', lookup_expr='iexact', label='District')

    def filter_status(self, queryset, name, value):
        value = value.upper()
        if value not in ReviewStatus.ALL:
            return queryset.none()
        return queryset.filter(status=value)
