from flask import Blueprint, request, jsonify
from hammer.extensions import get_services
from hammer.gate import guarded, authenticated, admin_only
from hammer.utils import json_body, logger


auth_bp = Blueprint('auth', __name__)


@auth_bp.route("/user/<email>", methods=["PUT"])
def upsert_user(email):
    services = get_services()
    user = json_body(request)
    result = services.identities.upsert(email, user)
    token = services.tokens.issue(email)
    logger.info(f"Token issued for {email}")
    return jsonify({"result": result, "token": token})


@auth_bp.route("/user/admin/<email>", methods=["PUT"])
@guarded(authenticated, admin_only)
def make_admin(email):
    result = get_services().identities.make_admin(email)
    return jsonify(result)


@auth_bp.route("/user", methods=["GET"])
@guarded(authenticated)
def list_users():
    return jsonify(get_services().identities.list_all())


@auth_bp.route("/admin/<email>", methods=["GET"])
def is_admin(email):
    return jsonify({"admin": get_services().identities.is_admin(email)})
