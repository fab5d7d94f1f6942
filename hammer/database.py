"""MongoDB handle.

The handle is built once by the application factory and handed to every
store, instead of living in a module-level global. ``connect()`` and
``close()`` bound its lifetime; it is also a context manager.
"""

import logging

from pymongo import MongoClient
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)

PRODUCTS = "products"
USERS = "users"
BOOKINGS = "bookings"
PAYMENTS = "payments"
REVIEWS = "reviews"
PROFILES = "profiles"
ADDED_PRODUCTS = "addedProducts"


class Database:
    def __init__(self, uri=None, name="HAMMER", client=None):
        self.uri = uri
        self.name = name
        self._client = client
        self._db = None

    @property
    def connected(self):
        return self._db is not None

    def connect(self):
        if self.connected:
            return self
        if self._client is None:
            self._client = MongoClient(self.uri, server_api=ServerApi("1"))
        self._db = self._client[self.name]
        logger.info(f"Connected to database {self.name}")
        return self

    def close(self):
        if self._client is not None:
            self._client.close()
            logger.info(f"Closed connection to database {self.name}")
        self._client = None
        self._db = None

    def __enter__(self):
        return self.connect()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def collection(self, name):
        if not self.connected:
            raise RuntimeError("Database is not connected")
        return self._db[name]

    def ping(self):
        if not self.connected:
            raise RuntimeError("Database is not connected")
        self._client.admin.command("ping")

    @property
    def products(self):
        return self.collection(PRODUCTS)

    @property
    def users(self):
        return self.collection(USERS)

    @property
    def bookings(self):
        return self.collection(BOOKINGS)

    @property
    def payments(self):
        return self.collection(PAYMENTS)

    @property
    def reviews(self):
        return self.collection(REVIEWS)

    @property
    def profiles(self):
        return self.collection(PROFILES)

    @property
    def added_products(self):
        return self.collection(ADDED_PRODUCTS)
