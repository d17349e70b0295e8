"""
Tests for the admin session gate.
"""
import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import PermissionDenied
from django.http import HttpResponse
from django.views import View

from blog_cms.gate import AdminRequiredMixin, AdminSession, SessionState


class TestAdminSession:
    """Tests for AdminSession state transitions."""

    def test_starts_pending(self):
        session = AdminSession()

        assert session.state == SessionState.PENDING
        assert session.is_loading
        assert not session.should_redirect

    def test_resolves_authenticated(self, user):
        session = AdminSession()

        assert session.resolve(user) == SessionState.AUTHENTICATED
        assert session.user == user
        assert not session.is_loading

    def test_resolves_unauthenticated(self):
        session = AdminSession()

        assert session.resolve(AnonymousUser()) == SessionState.UNAUTHENTICATED
        assert session.should_redirect

    def test_none_user_is_unauthenticated(self):
        session = AdminSession()

        assert session.resolve(None) == SessionState.UNAUTHENTICATED

    def test_resolves_only_once(self, user):
        session = AdminSession()
        session.resolve(AnonymousUser())

        assert session.resolve(user) == SessionState.UNAUTHENTICATED
        assert session.user is None

    def test_sign_out_drops_user(self, user):
        calls = []
        session = AdminSession()
        session.resolve(user)

        state = session.sign_out(lambda: calls.append("signed out"))

        assert state == SessionState.UNAUTHENTICATED
        assert calls == ["signed out"]
        assert session.user is None
        assert session.should_redirect

    def test_sign_out_when_not_authenticated_is_noop(self):
        calls = []
        session = AdminSession()

        assert session.sign_out(lambda: calls.append("signed out")) == SessionState.PENDING
        assert calls == []


class GatedView(AdminRequiredMixin, View):
    def get(self, request):
        return HttpResponse("ok")


class TestAdminRequiredMixin:
    """Tests for the view mixin built on the session gate."""

    def test_authenticated_passes(self, rf, user):
        request = rf.get("/admin/")
        request.user = user

        response = GatedView.as_view()(request)

        assert response.status_code == 200

    def test_anonymous_redirects_with_next(self, rf, db):
        request = rf.get("/admin/?page=2")
        request.user = AnonymousUser()

        response = GatedView.as_view()(request)

        assert response.status_code == 302
        assert response.url == "/accounts/login/?next=/admin/%3Fpage%3D2"

    def test_honours_redirect_field_name(self, rf, db):
        request = rf.get("/admin/")
        request.user = AnonymousUser()

        response = GatedView.as_view(redirect_field_name="return_to")(request)

        assert response.url == "/accounts/login/?return_to=/admin/"

    def test_honours_raise_exception(self, rf, db):
        request = rf.get("/admin/")
        request.user = AnonymousUser()

        with pytest.raises(PermissionDenied):
            GatedView.as_view(raise_exception=True)(request)
