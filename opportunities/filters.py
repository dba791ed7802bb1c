"""
Opportunities Filters - Django Filter classes for listing endpoints.

Supports:
- Opportunity type and work type ("all" disables the filter)
- Category slug and location city
- Keyword search over title, description and requirements
"""

import django_filters

from policy.choices import OpportunityType, WorkType

from .models import Opportunity

ALL = 'all'


class OpportunityFilter(django_filters.FilterSet):

    type = django_filters.CharFilter(method='filter_choice')
    work_type = django_filters.CharFilter(method='filter_choice')
    category = django_filters.CharFilter(field_name='category__slug')
    city = django_filters.CharFilter(field_name='location__city', lookup_expr='iexact')
    search = django_filters.CharFilter(method='filter_search')

    CHOICES = {
        'type': OpportunityType.values,
        'work_type': WorkType.values,
    }

    class Meta:
        model = Opportunity
        fields = ['type', 'work_type', 'category', 'city']

    def filter_choice(self, queryset, name, value):
        """Exact match on a choice field; "all" or an unknown value is ignored."""
        value = (value or '').strip().upper()
        if not value or value == ALL.upper() or value not in self.CHOICES[name]:
            return queryset
        return queryset.filter(**{name: value})

    def filter_search(self, queryset, name, value):
        return queryset.search(value)
