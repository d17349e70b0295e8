"""
Admin session gate.

An AdminSession is built per request and passed explicitly to the views
and templates that need it. It starts pending, resolves exactly once from
the auth provider, and drops to unauthenticated on sign-out.
"""
import logging
from enum import Enum

from django.contrib.auth.mixins import AccessMixin

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    PENDING = "pending"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class AdminSession:
    """Session state for one admin page load."""

    def __init__(self):
        self.state = SessionState.PENDING
        self.user = None

    @property
    def is_loading(self):
        return self.state == SessionState.PENDING

    @property
    def is_authenticated(self):
        return self.state == SessionState.AUTHENTICATED

    @property
    def should_redirect(self):
        return self.state == SessionState.UNAUTHENTICATED

    def resolve(self, user):
        """
        Apply the auth provider's answer.

        Only the first call after construction changes state; later calls
        are ignored.
        """
        if self.state != SessionState.PENDING:
            logger.warning("Admin session already resolved as %s; ignoring", self.state.value)
            return self.state

        if user is not None and getattr(user, "is_authenticated", False):
            self.user = user
            self.state = SessionState.AUTHENTICATED
        else:
            self.state = SessionState.UNAUTHENTICATED
        return self.state

    def sign_out(self, sign_out_fn):
        """
        Sign the user out through the provider and drop the resolved user.

        Cached session data lives in the provider session, so sign_out_fn is
        expected to flush it (auth.logout does).

        Args:
            sign_out_fn: zero-argument callable performing the provider sign-out
        """
        if self.state != SessionState.AUTHENTICATED:
            return self.state

        sign_out_fn()
        logger.info("Admin %s signed out", self.user)
        self.user = None
        self.state = SessionState.UNAUTHENTICATED
        return self.state


class AdminRequiredMixin(AccessMixin):
    """
    Gate a class-based view behind an authenticated admin session.

    Unauthenticated requests go through AccessMixin.handle_no_permission(),
    so login_url, redirect_field_name and raise_exception apply. The resolved
    session is available as self.admin_session and in the template
    context as admin_session.
    """

    def dispatch(self, request, *args, **kwargs):
        self.admin_session = AdminSession()
        self.admin_session.resolve(request.user)
        if self.admin_session.should_redirect:
            return self.handle_no_permission()
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["admin_session"] = self.admin_session
        return context
