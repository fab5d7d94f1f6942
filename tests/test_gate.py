"""Tests for the access gate checks and their ordering.

Run with: pytest tests/test_gate.py -v
"""

import pytest

from hammer.errors import Forbidden, Unauthenticated
from hammer.gate import GateContext, admin_only, authenticated, guarded, owns_visitor, run_checks
from hammer.tokens import TokenService


def bearer(token):
    return f"Bearer {token}"


class TestGuardedDeclaration:
    def test_authorization_without_authentication_is_refused(self):
        with pytest.raises(ValueError):
            guarded(admin_only)

    def test_authentication_must_come_first(self):
        with pytest.raises(ValueError):
            guarded(owns_visitor, authenticated)

    def test_no_checks_is_allowed(self):
        assert callable(guarded())


class TestAuthenticated:
    def test_missing_header_is_unauthenticated(self, app):
        with app.app_context():
            with pytest.raises(Unauthenticated):
                authenticated(GateContext(authorization=None, args={}))

    @pytest.mark.parametrize("header", ["Bearer", "Token abc", "Bearer a b", ""])
    def test_malformed_header_is_unauthenticated(self, app, header):
        with app.app_context():
            with pytest.raises(Unauthenticated):
                authenticated(GateContext(authorization=header, args={}))

    def test_invalid_token_is_forbidden(self, app):
        with app.app_context():
            with pytest.raises(Forbidden):
                authenticated(GateContext(authorization=bearer("junk"), args={}))

    def test_expired_token_is_forbidden(self, app):
        stale = TokenService(app.config["ACCESS_TOKEN"], clock=lambda: 1_000_000).issue("a@x.com")
        with app.app_context():
            with pytest.raises(Forbidden):
                authenticated(GateContext(authorization=bearer(stale), args={}))

    def test_valid_token_attaches_email(self, app, services):
        token = services.tokens.issue("a@x.com")
        with app.app_context():
            ctx = authenticated(GateContext(authorization=bearer(token), args={}))
        assert ctx.email == "a@x.com"


class TestAdminOnly:
    def test_non_admin_is_forbidden(self, app, services):
        services.identities.upsert("a@x.com", {})
        with app.app_context():
            with pytest.raises(Forbidden):
                admin_only(GateContext(authorization=None, args={}, email="a@x.com"))

    def test_unknown_identity_is_forbidden(self, app):
        with app.app_context():
            with pytest.raises(Forbidden):
                admin_only(GateContext(authorization=None, args={}, email="ghost@x.com"))

    def test_admin_proceeds(self, app, services):
        services.identities.upsert("boss@x.com", {"role": "admin"})
        ctx = GateContext(authorization=None, args={}, email="boss@x.com")
        with app.app_context():
            assert admin_only(ctx) is ctx

    def test_without_email_is_unauthenticated(self, app):
        with app.app_context():
            with pytest.raises(Unauthenticated):
                admin_only(GateContext(authorization=None, args={}))


class TestOwnsVisitor:
    def test_other_visitor_is_forbidden(self):
        ctx = GateContext(authorization=None, args={"visitor": "b@x.com"}, email="a@x.com")
        with pytest.raises(Forbidden):
            owns_visitor(ctx)

    def test_missing_visitor_is_forbidden(self):
        with pytest.raises(Forbidden):
            owns_visitor(GateContext(authorization=None, args={}, email="a@x.com"))

    def test_own_visitor_proceeds(self):
        ctx = GateContext(authorization=None, args={"visitor": "a@x.com"}, email="a@x.com")
        assert owns_visitor(ctx) is ctx


class TestRunChecks:
    def test_authorization_never_runs_after_failed_authentication(self, app, services):
        services.identities.upsert("boss@x.com", {"role": "admin"})
        calls = []

        def spy(ctx):
            calls.append(ctx)
            return ctx

        with app.app_context():
            with pytest.raises(Unauthenticated):
                run_checks((authenticated, spy), GateContext(authorization=None, args={}))
        assert calls == []
