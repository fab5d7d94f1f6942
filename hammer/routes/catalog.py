from flask import Blueprint, request, jsonify
from hammer.extensions import get_services
from hammer.gate import guarded, authenticated, admin_only
from hammer.utils import json_body, to_object_id, insert_summary, delete_summary

catalog_bp = Blueprint('catalog', __name__)


def _db():
    return get_services().database


@catalog_bp.route("/product", methods=["GET"])
def list_products():
    return jsonify(list(_db().products.find({})))


@catalog_bp.route("/product/<product_id>", methods=["GET"])
def get_product(product_id):
    product = _db().products.find_one({"_id": to_object_id(product_id)})
    return jsonify(product)


@catalog_bp.route("/addProduct", methods=["GET"])
@guarded(authenticated, admin_only)
def list_added_products():
    return jsonify(list(_db().added_products.find({})))


@catalog_bp.route("/addProduct", methods=["POST"])
@guarded(authenticated, admin_only)
def add_product():
    product = json_body(request)
    result = _db().added_products.insert_one(product)
    return jsonify(insert_summary(result))


# Entries are keyed by their "email" field, not by _id
@catalog_bp.route("/addProduct/<email>", methods=["DELETE"])
@guarded(authenticated, admin_only)
def delete_added_product(email):
    result = _db().added_products.delete_one({"email": email})
    return jsonify(delete_summary(result))


@catalog_bp.route("/addReview", methods=["GET"])
def list_reviews():
    return jsonify(list(_db().reviews.find({})))


@catalog_bp.route("/addReview", methods=["POST"])
def add_review():
    review = json_body(request)
    result = _db().reviews.insert_one(review)
    return jsonify(insert_summary(result))


@catalog_bp.route("/updateProfile", methods=["POST"])
def update_profile():
    profile = json_body(request)
    result = _db().profiles.insert_one(profile)
    return jsonify(insert_summary(result))
