"""
Unit tests for the mutation access check
"""

from unittest.mock import MagicMock

import pytest

from clientdesk.auth.context import AuthUser
from clientdesk.errors import ForbiddenError, UnauthorizedError
from clientdesk.graphql.access_control import ensure_can_mutate


@pytest.fixture
def collections():
    """Collections are never touched by the access check."""
    return MagicMock()


class TestEnsureCanMutate:
    def test_admin_passes(self, make_context, collections, admin_user):
        context = make_context(collections)

        assert ensure_can_mutate(context) is admin_user

    def test_anonymous_is_unauthorized(self, make_context, collections):
        context = make_context(collections, user=None)

        with pytest.raises(UnauthorizedError):
            ensure_can_mutate(context)

    def test_other_role_is_forbidden(self, make_context, collections):
        context = make_context(collections, user=AuthUser(subject="u2", role="viewer"))

        with pytest.raises(ForbiddenError):
            ensure_can_mutate(context)

    def test_custom_required_role(self, make_context, collections):
        editor = AuthUser(subject="u3", role="editor")
        context = make_context(collections, user=editor, required_role="editor")

        assert ensure_can_mutate(context) is editor

    def test_no_required_role_allows_anonymous(self, make_context, collections):
        context = make_context(collections, user=None, required_role=None)

        assert ensure_can_mutate(context) is None
