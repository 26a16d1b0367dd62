from rest_framework.permissions import BasePermission


class IsCatalogAdmin(BasePermission):
    """Only staff users may reach the catalog admin API."""

    message = "Admin privileges required."

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)
