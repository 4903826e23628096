"""
Admin access policy.

Which authenticated users may open the management panel is decided by
``settings.ADMIN_ACCESS_POLICY``:

- ``authenticated``: any signed-in user (single-tenant deployment)
- ``staff``: users flagged ``is_staff`` or superusers
- ``admin_role``: members of ``settings.ADMIN_ROLE_GROUP`` or superusers
"""
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

POLICY_AUTHENTICATED = "authenticated"
POLICY_STAFF = "staff"
POLICY_ADMIN_ROLE = "admin_role"


def _authenticated(user):
    return user.is_authenticated


def _staff(user):
    return user.is_authenticated and (user.is_staff or user.is_superuser)


def _admin_role(user):
    if not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return user.groups.filter(name=settings.ADMIN_ROLE_GROUP).exists()


POLICIES = {
    POLICY_AUTHENTICATED: _authenticated,
    POLICY_STAFF: _staff,
    POLICY_ADMIN_ROLE: _admin_role,
}


def get_policy_name():
    name = getattr(settings, "ADMIN_ACCESS_POLICY", POLICY_AUTHENTICATED)
    if name not in POLICIES:
        raise ImproperlyConfigured(
            f"ADMIN_ACCESS_POLICY must be one of {', '.join(sorted(POLICIES))}, got {name!r}"
        )
    return name


def can_access_admin(user):
    """Return True when ``user`` may open the management panel"""
    return POLICIES[get_policy_name()](user)


def get_user_role(user):
    """Role label used by navigation: 'public', 'member' or 'admin'"""
    if not user.is_authenticated:
        return "public"
    if can_access_admin(user):
        return "admin"
    return "member"
