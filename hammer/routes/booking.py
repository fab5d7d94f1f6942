from flask import Blueprint, request, jsonify, g
from hammer.extensions import get_services
from hammer.utils import json_body
from hammer.gate import guarded, authenticated, owns_visitor
import logging


booking_bp = Blueprint('booking', __name__)
logger = logging.getLogger(__name__)


@booking_bp.route("/booking", methods=["GET"])
@guarded(authenticated, owns_visitor)
def list_bookings():
    return jsonify(get_services().ledger.list_for(g.decoded["email"]))


@booking_bp.route("/booking/<booking_id>", methods=["GET"])
@guarded(authenticated)
def get_booking(booking_id):
    return jsonify(get_services().ledger.get(booking_id))


@booking_bp.route("/booking", methods=["POST"])
def create_booking():
    booking = json_body(request)
    outcome = get_services().ledger.create(booking)
    if not outcome.created:
        return jsonify({"success": False, "booking": outcome.booking})
    return jsonify({"success": True, "booking": outcome.booking, "result": outcome.result})


@booking_bp.route("/booking/<booking_id>", methods=["PATCH"])
@guarded(authenticated)
def pay_booking(booking_id):
    payment = json_body(request)
    updated_doc = get_services().ledger.mark_paid(booking_id, payment)
    logger.info(f"Booking {booking_id} marked as paid by {g.decoded['email']}")
    return jsonify(updated_doc)


@booking_bp.route("/create-payment-intent", methods=["POST"])
@guarded(authenticated)
def create_payment_intent():
    body = json_body(request)
    intent = get_services().payments.create_intent(body.get("price"))
    return jsonify({"clientSecret": intent["clientSecret"]})
