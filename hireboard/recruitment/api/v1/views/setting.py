import logging

from rest_framework import mixins, status
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from hireboard.recruitment.api.v1.permissions import RecruitmentSettingPermission
from hireboard.recruitment.api.v1.serializers.setting import (
    RecruitmentSettingSerializer, SettingItemCreateSerializer
)
from hireboard.recruitment.models import RecruitmentSetting

logger = logging.getLogger(__name__)


class RecruitmentSettingViewSet(mixins.RetrieveModelMixin,
                                mixins.UpdateModelMixin,
                                GenericViewSet):
    """
    retrieve:
    Sources, company profile and test library of the board.

    update:
    Admin only, replaces the settings. Stages are managed on their own
    endpoint.
    """
    serializer_class = RecruitmentSettingSerializer
    permission_classes = [RecruitmentSettingPermission]
    queryset = RecruitmentSetting.objects.all()

    def get_object(self):
        setting = RecruitmentSetting.get_solo()
        self.check_object_permissions(self.request, setting)
        return setting

    def perform_update(self, serializer):
        super().perform_update(serializer)
        logger.info(f"Recruitment settings updated by {self.request.user.username}")


class RecruitmentSettingItemViewSet(GenericViewSet):
    """
    create:
    Admin only, appends a single source, job position or test. `kind` comes
    from the url.
    """
    serializer_class = SettingItemCreateSerializer
    permission_classes = [RecruitmentSettingPermission]
    queryset = RecruitmentSetting.objects.all()
    kind = None

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context.update({
            'kind': self.kind,
            'setting': RecruitmentSetting.get_solo()
        })
        return context

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = serializer.save()
        logger.info(f"{self.kind} item added by {request.user.username}")
        return Response(item, status=status.HTTP_201_CREATED)
