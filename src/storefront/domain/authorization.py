"""Authorization policy consulted by every use case.

A single function decides whether a subject may perform an action on a
resource, instead of each handler checking roles on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ForbiddenError
from storefront.domain.model.user import Role


@dataclass(frozen=True)
class Subject:
    """The resolved identity behind a request."""

    user_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class Action(Enum):
    VIEW_ORDER = "view_order"
    LIST_ALL_ORDERS = "list_all_orders"
    SET_ORDER_STATUS = "set_order_status"
    MANAGE_CATALOG = "manage_catalog"


_ADMIN_ONLY = {
    Action.LIST_ALL_ORDERS,
    Action.SET_ORDER_STATUS,
    Action.MANAGE_CATALOG,
}


def is_allowed(subject: Subject, action: Action, owner_id: str | None = None) -> bool:
    if subject.is_admin:
        return True
    if action in _ADMIN_ONLY:
        return False
    return owner_id is not None and owner_id == subject.user_id


def authorize(subject: Subject, action: Action, owner_id: str | None = None) -> None:
    """Raise ForbiddenError unless *subject* may perform *action*."""
    if not is_allowed(subject, action, owner_id):
        raise ForbiddenError("Access denied")
