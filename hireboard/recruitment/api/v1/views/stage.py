from django.db.models import Count
from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from hireboard.recruitment.api.v1.serializers.stage import StageSerializer, StageReorderSerializer
from hireboard.recruitment.models import Stage
from hireboard.recruitment.utils.stages import StageRegistry
from hireboard.users.api.v1.permissions import AdminWritePermission


class StageViewSet(mixins.ListModelMixin,
                   mixins.RetrieveModelMixin,
                   GenericViewSet):
    """
    list:
    Board columns in order, the archive is not listed.

    create:
    Admin only, new stages are added after the last column.

    update:
    Admin only, only the title can be changed.

    destroy:
    Admin only, core stages and stages with candidates can not be deleted.

    reorder:
    Admin only, `order` lists the slugs of every non core stage.
    """
    queryset = Stage.objects.all()
    serializer_class = StageSerializer
    permission_classes = [AdminWritePermission]
    lookup_field = 'slug'
    pagination_class = None

    def get_queryset(self):
        return super().get_queryset().live().annotate(
            candidate_count=Count('candidates')
        ).order_by('order', 'id')

    @property
    def registry(self):
        return StageRegistry()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        stage = self.registry.add(serializer.validated_data['title'])
        return Response(self.get_serializer(stage).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        stage = self.registry.update(
            self.get_object().slug, serializer.validated_data['title']
        )
        return Response(self.get_serializer(stage).data)

    def destroy(self, request, *args, **kwargs):
        self.registry.delete(self.get_object().slug)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['post'], serializer_class=StageReorderSerializer)
    def reorder(self, request, *args, **kwargs):
        serializer = StageReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        stages = self.registry.reorder(serializer.validated_data['order'])
        return Response(StageSerializer(stages, many=True).data)
