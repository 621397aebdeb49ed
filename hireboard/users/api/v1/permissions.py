from rest_framework.permissions import BasePermission, SAFE_METHODS


class AdminPermission(BasePermission):
    """Only admin users are allowed."""
    message = 'Admin access required'

    def has_permission(self, request, view):
        return bool(
            request.user and request.user.is_authenticated and request.user.is_admin
        )


class AdminWritePermission(AdminPermission):
    """Everyone authenticated reads, only admins write."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return super().has_permission(request, view)


class UserPermission(AdminWritePermission):
    """
    Non admin users may only list active users, e.g. when picking an
    interviewer.
    """

    def filter_queryset(self, request, view, queryset):
        if request.user.is_admin:
            return queryset
        return queryset.current()
