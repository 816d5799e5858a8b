# app/api/v1/blog_categories.py
from flask import request, jsonify
from app.models.blog_category import BlogCategory
from app.application.blog_categories.lookup import load_category
from app.application.blog_categories.create_category import create_category
from app.application.blog_categories.update_category import update_category
from app.application.blog_categories.delete_category import delete_category
from app.normalizers.blog_category import normalize_category
from app.utils.decorators import json_body
from . import v1_bp # import the versioned blueprint


# ------------------------
# Blog categories
# ------------------------

@v1_bp.route("/blog-categories", methods=["GET"])
def list_blog_categories():
    query = BlogCategory.query
    if request.args.get("active") == "true":
        query = query.filter_by(is_active=True)

    return jsonify([normalize_category(c) for c in query.order_by(BlogCategory.name.asc())])


@v1_bp.route("/blog-categories", methods=["POST"])
@json_body()
def create_blog_category():
    data = request.get_json()

    category = create_category(
        name=data.get("name"),
        description=data.get("description"),
        is_active=data.get("is_active", True),
    )

    return jsonify(normalize_category(category)), 201


@v1_bp.route("/blog-categories/<category_id>", methods=["GET"])
def get_blog_category(category_id):
    return jsonify(normalize_category(load_category(category_id), include_post_count=True))


@v1_bp.route("/blog-categories/<category_id>", methods=["PUT"])
@json_body()
def update_blog_category(category_id):
    category = update_category(category_id=category_id, data=request.get_json())

    return jsonify(normalize_category(category)), 200


@v1_bp.route("/blog-categories/<category_id>", methods=["DELETE"])
def delete_blog_category(category_id):
    delete_category(category_id=category_id)

    return jsonify({"message": "Blog category deleted"}), 200
