"""Booking ledger.

A booking is unique on ``(product, date, visitor)``, but only by convention:
``create`` reads before it inserts, and two concurrent identical requests
can both pass the read. ``mark_paid`` writes the payment record and then
updates the booking as two separate operations; a failure in between leaves
a payment without a paid booking.
"""

import logging
from dataclasses import dataclass

from hammer.utils import insert_summary, to_object_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingOutcome:
    created: bool
    booking: dict
    result: dict | None = None


def booking_key(booking: dict) -> dict:
    return {
        "product": booking.get("product"),
        "date": booking.get("date"),
        "visitor": booking.get("visitor"),
    }


class BookingLedger:
    def __init__(self, database):
        self._db = database

    def create(self, booking: dict) -> BookingOutcome:
        query = booking_key(booking)
        exists = self._db.bookings.find_one(query)
        if exists:
            logger.info(f"Duplicate booking ignored for {query}")
            return BookingOutcome(created=False, booking=exists)

        document = {"paid": False, **booking}
        result = self._db.bookings.insert_one(document)
        logger.info(f"Booking {result.inserted_id} created for {query['visitor']}")
        return BookingOutcome(created=True, booking=document, result=insert_summary(result))

    def list_for(self, visitor: str) -> list[dict]:
        return list(self._db.bookings.find({"visitor": visitor}))

    def get(self, booking_id: str) -> dict | None:
        return self._db.bookings.find_one({"_id": to_object_id(booking_id)})

    def mark_paid(self, booking_id: str, payment: dict) -> dict:
        """Record ``payment`` and flag the booking as paid.

        Returns the update document applied to the booking. The booking is
        not required to exist or to be unpaid beforehand.
        """
        query = {"_id": to_object_id(booking_id)}
        updated_doc = {
            "$set": {
                "paid": True,
                "transactionId": payment.get("transactionId"),
            }
        }
        self._db.payments.insert_one(dict(payment))
        logger.info(f"Payment recorded for booking {booking_id}")
        result = self._db.bookings.update_one(query, updated_doc)
        if result.matched_count == 0:
            logger.warning(f"Payment recorded but no booking {booking_id} to mark paid")
        return updated_doc
