"""Identity store: one user document per email."""

import logging

from hammer.utils import update_summary

logger = logging.getLogger(__name__)

USER = "user"
ADMIN = "admin"


class IdentityStore:
    def __init__(self, database):
        self._db = database

    def upsert(self, email: str, fields: dict) -> dict:
        """Insert or overwrite the identity keyed by ``email``.

        The path email always wins over an ``email`` in ``fields``. New
        identities get ``role="user"`` unless ``fields`` names a role.
        """
        update = {"$set": {**fields, "email": email}}
        if "role" not in fields:
            update["$setOnInsert"] = {"role": USER}
        result = self._db.users.update_one({"email": email}, update, upsert=True)
        if result.upserted_id is not None:
            logger.info(f"Identity created for {email}")
        return update_summary(result)

    def find(self, email: str) -> dict | None:
        return self._db.users.find_one({"email": email})

    def list_all(self) -> list[dict]:
        return list(self._db.users.find({}))

    def make_admin(self, email: str) -> dict:
        result = self._db.users.update_one({"email": email}, {"$set": {"role": ADMIN}})
        logger.info(f"Role admin set for {email} (matched {result.matched_count})")
        return update_summary(result)

    def is_admin(self, email: str) -> bool:
        identity = self.find(email)
        if identity is None:
            return False
        return identity.get("role") == ADMIN
