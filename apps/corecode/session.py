"""
Per-request session context.

The signed-in user is never held in module state: middleware builds a
``SessionContext`` for each request and templates receive it through a
context processor.
"""
from dataclasses import dataclass
from typing import Any

from .policy import can_access_admin, get_user_role


@dataclass(frozen=True)
class SessionContext:
    user: Any
    is_authenticated: bool
    can_access_admin: bool
    role: str

    @property
    def email(self):
        return getattr(self.user, "email", "") if self.is_authenticated else ""


def build_session_context(user):
    return SessionContext(
        user=user,
        is_authenticated=user.is_authenticated,
        can_access_admin=can_access_admin(user),
        role=get_user_role(user),
    )
