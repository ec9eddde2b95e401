"""Unit tests for the authorization policy."""

import pytest

from storefront.domain.authorization import Action, Subject, authorize, is_allowed
from storefront.domain.exceptions import ForbiddenError
from storefront.domain.model.user import Role

ALICE = Subject(user_id="1", role=Role.USER)
ADMIN = Subject(user_id="9", role=Role.ADMIN)


class TestAuthorize:

    def test_owner_may_view_order(self):
        authorize(ALICE, Action.VIEW_ORDER, owner_id="1")

    def test_non_owner_may_not_view_order(self):
        with pytest.raises(ForbiddenError):
            authorize(ALICE, Action.VIEW_ORDER, owner_id="2")

    def test_admin_may_view_any_order(self):
        authorize(ADMIN, Action.VIEW_ORDER, owner_id="2")

    @pytest.mark.parametrize(
        "action",
        [Action.SET_ORDER_STATUS, Action.LIST_ALL_ORDERS, Action.MANAGE_CATALOG],
    )
    def test_admin_only_actions(self, action):
        assert not is_allowed(ALICE, action, owner_id="1")
        assert is_allowed(ADMIN, action)

    def test_missing_owner_denied_for_user(self):
        assert not is_allowed(ALICE, Action.VIEW_ORDER)
