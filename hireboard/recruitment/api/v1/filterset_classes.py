import django_filters.rest_framework as filters
from django.db.models import Q

from hireboard.recruitment.constants import ARCHIVED
from hireboard.recruitment.models import Candidate, Template


class CharInFilter(filters.BaseInFilter, filters.CharFilter):
    pass


class CandidateFilter(filters.FilterSet):
    stage = CharInFilter(
        label='Stages',
        field_name='stage__slug',
        lookup_expr='in'
    )
    source = filters.CharFilter(lookup_expr='iexact')
    position = filters.CharFilter(lookup_expr='iexact')
    interviewer = filters.NumberFilter(field_name='interviewer_id')
    archived = filters.BooleanFilter(
        label='Archived',
        method='filter_archived'
    )
    search = filters.CharFilter(
        label='Search by name, email or phone',
        method='filter_search'
    )

    class Meta:
        model = Candidate
        fields = ('stage', 'source', 'position', 'interviewer', 'archived', 'search')

    @staticmethod
    def filter_archived(queryset, name, value):
        if value:
            return queryset.filter(stage_id=ARCHIVED)
        return queryset.exclude(stage_id=ARCHIVED)

    @staticmethod
    def filter_search(queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) |
            Q(email__icontains=value) |
            Q(phone__icontains=value)
        )


class TemplateFilter(filters.FilterSet):
    stage = filters.CharFilter(field_name='stage__slug')
    type = filters.CharFilter()

    class Meta:
        model = Template
        fields = ('stage', 'type')
