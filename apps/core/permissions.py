from rest_framework import permissions


class IsPortalAdmin(permissions.BasePermission):
    """
    Staff session required for dashboard endpoints
    """
    message = 'Admin login required'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and (user.is_staff or user.is_superuser))
