from rest_framework.permissions import BasePermission


class IsStaffOrSuperuser(BasePermission):
    """Admin gate for every /api/admin/ endpoint."""

    message = "Access denied. Admin privileges required."

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        return bool(
            user and user.is_authenticated and user.is_active
            and (user.is_staff or user.is_superuser)
        )
