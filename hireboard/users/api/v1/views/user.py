import logging

from django.contrib.auth import get_user_model
from rest_framework import filters
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from hireboard.core.mixins.viewset_mixins import HireBoardModelViewSet, DisallowPatchMixin
from hireboard.users.api.v1.permissions import UserPermission
from hireboard.users.api.v1.serializers.user import UserSerializer, MeSerializer

User = get_user_model()

logger = logging.getLogger(__name__)


class UserViewSet(DisallowPatchMixin, HireBoardModelViewSet):
    """
    list:
    Users of the board. Non admin users only see active users.

    create:
    Admin only. `password` is required.

    update:
    Admin only. `password` is optional and is only changed when sent.

    me:
    GET/PUT the logged in user's own profile.
    """
    queryset = User.objects.all().order_by('-created_at')
    serializer_class = UserSerializer
    permission_classes = [UserPermission]
    filter_backends = (filters.SearchFilter, filters.OrderingFilter)
    search_fields = ('username', 'name', 'email')
    ordering_fields = ('name', 'username', 'created_at')

    def get_permissions(self):
        if self.action == 'me':
            return [IsAuthenticated()]
        return super().get_permissions()

    def perform_destroy(self, instance):
        if instance == self.request.user:
            raise ValidationError({
                'detail': 'You cannot delete your own account.'
            })
        logger.info(f"User {instance.username} deleted by {self.request.user.username}")
        super().perform_destroy(instance)

    @action(detail=False, methods=['get', 'put'], serializer_class=MeSerializer)
    def me(self, request, **kwargs):
        if request.method == 'GET':
            return Response(MeSerializer(request.user).data)
        serializer = MeSerializer(
            instance=request.user, data=request.data, partial=True,
            context=self.get_serializer_context()
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)
