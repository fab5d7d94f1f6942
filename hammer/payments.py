import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

import razorpay
import razorpay.errors
import requests
from requests.exceptions import ConnectionError, RequestException

from hammer.errors import UpstreamFailure

logger = logging.getLogger(__name__)


class DummyRazorpayClient:
    class DummyOrder:
        def create(self, data):
            logger.warning("Using dummy Razorpay client - payment functionality disabled")
            return {"id": "dummy_order_id", "amount": data["amount"], "currency": data["currency"]}

    def __init__(self):
        self.order = self.DummyOrder()


def get_razorpay_client(key_id, key_secret):
    if not key_id or not key_secret:
        logger.error("Razorpay credentials not found in configuration")
        return DummyRazorpayClient()

    return razorpay.Client(session=requests.Session(), auth=(key_id, key_secret))


def to_minor_units(price):
    """Convert a price in major units (e.g. dollars) to whole cents."""
    try:
        amount = Decimal(str(price)) * 100
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Invalid price: {price!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid price: {price!r}")
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentService:
    def __init__(self, client, currency="USD"):
        self._client = client
        self.currency = currency

    def create_intent(self, price):
        """Create a provider order for ``price`` and return its client secret."""
        amount = to_minor_units(price)
        try:
            logger.info(f"Creating payment order for {amount} {self.currency}")
            order = self._client.order.create({
                "amount": amount,
                "currency": self.currency,
                "payment_capture": 1,
            })
        except (ConnectionError, RequestException) as e:
            logger.error(f"Connection error creating payment order: {e}")
            raise UpstreamFailure("Payment gateway is temporarily unavailable") from e
        except razorpay.errors.BadRequestError as e:
            logger.error(f"Razorpay BadRequestError: {e}")
            raise UpstreamFailure("Invalid request to payment gateway") from e
        except (razorpay.errors.ServerError, razorpay.errors.GatewayError) as e:
            logger.error(f"Razorpay gateway error: {e}")
            raise UpstreamFailure("Payment gateway error") from e

        logger.info("Payment order created successfully")
        return {"clientSecret": order["id"], "amount": amount, "currency": self.currency}
