import logging
from bson import ObjectId
from bson.errors import InvalidId
from flask.json.provider import DefaultJSONProvider

from hammer.errors import NotFound

# Configure logging for the app (adjust level as needed)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class MongoJSONProvider(DefaultJSONProvider):
    """JSON provider that renders ObjectId values as hex strings."""

    @staticmethod
    def default(o):
        if isinstance(o, ObjectId):
            return str(o)
        return DefaultJSONProvider.default(o)


def json_body(request):
    """Return the request's JSON object, or {} for a missing or non-object body."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def to_object_id(value):
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise NotFound(f"Invalid id: {value}")


# Driver result summaries, shaped like the ones the Mongo shell prints
def update_summary(result):
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": result.upserted_id,
    }


def insert_summary(result):
    return {"acknowledged": result.acknowledged, "insertedId": result.inserted_id}


def delete_summary(result):
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
