from .resolver import PermissionResolver, calculate_member_permissions, has_all

__all__ = ["PermissionResolver", "calculate_member_permissions", "has_all"]
