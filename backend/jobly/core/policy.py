"""Who may do what.

Every route asks :func:`is_allowed` through :func:`jobly.core.security.authorize`;
no handler checks roles on its own. A denial is always reported as 401, whether
the caller is anonymous or just lacks the privilege.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Caller:
    username: str | None = None
    is_admin: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.username is None


ANONYMOUS = Caller()


class Action(str, Enum):
    COMPANY_CREATE = "company:create"
    COMPANY_READ = "company:read"
    COMPANY_UPDATE = "company:update"
    COMPANY_DELETE = "company:delete"
    USER_CREATE = "user:create"
    USER_LIST = "user:list"
    USER_READ = "user:read"
    USER_UPDATE = "user:update"
    USER_DELETE = "user:delete"


PUBLIC_ACTIONS = frozenset({Action.COMPANY_READ})

ADMIN_ACTIONS = frozenset({
    Action.COMPANY_CREATE,
    Action.COMPANY_UPDATE,
    Action.COMPANY_DELETE,
    Action.USER_CREATE,
    Action.USER_LIST,
})

# admin, or the user the request is about
ADMIN_OR_SELF_ACTIONS = frozenset({Action.USER_READ, Action.USER_UPDATE, Action.USER_DELETE})


def is_allowed(caller: Caller, action: Action, target: str | None = None) -> bool:
    if action in PUBLIC_ACTIONS:
        return True
    if caller.is_anonymous:
        return False
    if caller.is_admin:
        return True
    if action in ADMIN_OR_SELF_ACTIONS:
        return target is not None and caller.username == target
    return False
