from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters
from rest_framework.decorators import action
from rest_framework.response import Response

from hireboard.core.mixins.viewset_mixins import HireBoardModelViewSet, DisallowPatchMixin
from hireboard.recruitment.api.v1.filterset_classes import TemplateFilter
from hireboard.recruitment.api.v1.serializers.template import TemplateSerializer
from hireboard.recruitment.constants import TEMPLATE_PARAMS
from hireboard.recruitment.models import Template
from hireboard.users.api.v1.permissions import AdminWritePermission


class TemplateViewSet(DisallowPatchMixin, HireBoardModelViewSet):
    queryset = Template.objects.select_related('stage')
    serializer_class = TemplateSerializer
    permission_classes = [AdminWritePermission]
    filter_backends = (
        filters.SearchFilter, filters.OrderingFilter, DjangoFilterBackend
    )
    filterset_class = TemplateFilter
    search_fields = ('name',)
    ordering_fields = ('id', 'name', 'modified_at', 'type')
    ordering = ('id',)

    @action(detail=False)
    def hints(self, request, **kwargs):
        return Response(TEMPLATE_PARAMS)
