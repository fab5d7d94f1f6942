"""Access gate.

A route lists the checks it needs, in order, with ``guarded``::

    @guarded(authenticated, admin_only)
    def make_admin(email): ...

Each check takes a ``GateContext`` and returns it (possibly enriched) or
raises an ``AuthError``. ``authenticated`` must come first whenever any
check is listed.
"""

import logging
from dataclasses import dataclass, replace
from functools import wraps

from flask import g, request

from hammer.errors import AuthError, Forbidden, Unauthenticated
from hammer.extensions import get_services

logger = logging.getLogger(__name__)

BEARER = "bearer"


@dataclass(frozen=True)
class GateContext:
    authorization: str | None
    args: dict
    email: str | None = None


def authenticated(ctx: GateContext) -> GateContext:
    header = ctx.authorization
    if not header:
        raise Unauthenticated()

    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER:
        raise Unauthenticated()

    try:
        decoded = get_services().tokens.verify(parts[1])
    except AuthError:
        raise Forbidden()
    return replace(ctx, email=decoded["email"])


def admin_only(ctx: GateContext) -> GateContext:
    if ctx.email is None:
        raise Unauthenticated()
    if not get_services().identities.is_admin(ctx.email):
        logger.warning(f"Admin access denied for {ctx.email}")
        raise Forbidden()
    return ctx


def owns_visitor(ctx: GateContext) -> GateContext:
    if ctx.email is None:
        raise Unauthenticated()
    if ctx.args.get("visitor") != ctx.email:
        logger.warning(f"{ctx.email} asked for bookings of {ctx.args.get('visitor')}")
        raise Forbidden()
    return ctx


def run_checks(checks, ctx: GateContext) -> GateContext:
    for check in checks:
        ctx = check(ctx)
    return ctx


def guarded(*checks):
    """Decorate a view so ``checks`` run, in order, before it."""
    if checks and checks[0] is not authenticated:
        raise ValueError("authenticated must be the first check")

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            ctx = GateContext(
                authorization=request.headers.get("Authorization"),
                args=request.args.to_dict(),
            )
            ctx = run_checks(checks, ctx)
            if ctx.email is not None:
                g.decoded = {"email": ctx.email}
            return f(*args, **kwargs)
        return decorated_function
    return decorator
