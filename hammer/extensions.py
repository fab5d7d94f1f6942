from dataclasses import dataclass

from flask import current_app

from hammer.bookings import BookingLedger
from hammer.database import Database
from hammer.identities import IdentityStore
from hammer.payments import PaymentService
from hammer.tokens import TokenService

EXTENSION_KEY = "hammer"


@dataclass
class Services:
    """Collaborators built once per app and shared by every request."""

    database: Database
    tokens: TokenService
    identities: IdentityStore
    ledger: BookingLedger
    payments: PaymentService


def init_services(app, database, payment_client):
    services = Services(
        database=database,
        tokens=TokenService(app.config["ACCESS_TOKEN"], ttl_seconds=app.config["TOKEN_TTL_SECONDS"]),
        identities=IdentityStore(database),
        ledger=BookingLedger(database),
        payments=PaymentService(payment_client, currency=app.config["PAYMENT_CURRENCY"]),
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services(app=None) -> Services:
    return (app or current_app).extensions[EXTENSION_KEY]
