from rest_framework.permissions import BasePermission

from hireboard.users.api.v1.permissions import AdminWritePermission


class CandidatePermission(BasePermission):
    """Recruiters manage candidates, only admins delete them."""
    message = 'Only admins can delete candidates.'

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        if view.action == 'destroy':
            return request.user.is_admin
        return True


class RecruitmentSettingPermission(AdminWritePermission):
    pass
