import os
from urllib.parse import quote_plus
from dotenv import load_dotenv

load_dotenv()


def build_mongo_uri():
    db_user = os.environ.get("DB_USER")
    db_pass = os.environ.get("DB_PASS")
    if db_user and db_pass:
        return (
            f"mongodb+srv://{quote_plus(db_user)}:{quote_plus(db_pass)}"
            "@cluster0.hecqq.mongodb.net/?retryWrites=true&w=majority"
        )
    return os.environ.get("MONGO_URI") or "mongodb://localhost:27017"


class Config:
    ACCESS_TOKEN = os.environ.get("ACCESS_TOKEN") or "fallback_secret"
    TOKEN_TTL_SECONDS = int(os.environ.get("TOKEN_TTL_SECONDS", 3600))

    MONGO_URI = build_mongo_uri()
    DATABASE_NAME = os.environ.get("DATABASE_NAME") or "HAMMER"

    # Payment provider credentials
    KEY_ID = os.environ.get("KEY_ID")
    KEY_SECRET = os.environ.get("KEY_SECRET")
    PAYMENT_CURRENCY = "USD"

    PORT = int(os.environ.get("PORT", 5000))
