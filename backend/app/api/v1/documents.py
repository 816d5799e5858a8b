# app/api/v1/documents.py
from flask import current_app, request, jsonify
from app.application.documents.lookup import document_model, load_document
from app.application.documents.create_document import create_document
from app.application.documents.update_document import update_document
from app.application.documents.change_status import change_status
from app.application.documents.delete_document import delete_document
from app.domain.invariants.document import assert_status
from app.normalizers.document import normalize_document
from app.normalizers.pagination import normalize_pagination
from app.utils.decorators import json_body
from . import v1_bp # import the versioned blueprint

NEWSLETTER = {"kind": "newsletter"}
BLOG_POST = {"kind": "blog_post"}

# ------------------------
# Newsletters & blog posts
# ------------------------

@v1_bp.route("/newsletters", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts", methods=["GET"], defaults=BLOG_POST)
def list_documents(kind):
    model = document_model(kind)

    status = request.args.get("status") # draft | published | archived | None
    page_num = request.args.get("page", 1, type=int)
    per_page = request.args.get("per_page", current_app.config["DEFAULT_PER_PAGE"], type=int)

    query = model.query
    if status:
        assert_status(status)
        query = query.filter_by(status=status)

    if kind == "blog_post" and request.args.get("category_id"):
        query = query.filter_by(category_id=request.args["category_id"])

    pagination = query.order_by(model.created_at.desc()).paginate(
        page=page_num, per_page=per_page, error_out=False
    )

    return jsonify(
        normalize_pagination(
            pagination,
            lambda d: normalize_document(d, admin=True)
        )
    )


@v1_bp.route("/newsletters", methods=["POST"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts", methods=["POST"], defaults=BLOG_POST)
@json_body()
def create_document_route(kind):
    document = create_document(kind=kind, data=request.get_json())

    return jsonify(normalize_document(document, admin=True)), 201


@v1_bp.route("/newsletters/<document_id>", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>", methods=["GET"], defaults=BLOG_POST)
def get_document(kind, document_id):
    document = load_document(kind, document_id)

    return jsonify(normalize_document(document, admin=True, include_blocks=True))


@v1_bp.route("/newsletters/<document_id>", methods=["PUT"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>", methods=["PUT"], defaults=BLOG_POST)
@json_body()
def update_document_route(kind, document_id):
    document = update_document(
        kind=kind,
        document_id=document_id,
        data=request.get_json(),
    )

    return jsonify(normalize_document(document, admin=True)), 200


@v1_bp.route("/newsletters/<document_id>", methods=["DELETE"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>", methods=["DELETE"], defaults=BLOG_POST)
def delete_document_route(kind, document_id):
    delete_document(kind=kind, document_id=document_id)

    return jsonify({"message": "Deleted successfully"}), 200


@v1_bp.route("/newsletters/<document_id>/preview", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/preview", methods=["GET"], defaults=BLOG_POST)
def preview_document(kind, document_id):
    document = load_document(kind, document_id)

    return jsonify(normalize_document(document, admin=True, include_blocks=True, render=True))


# ------------------------
# Lifecycle
# ------------------------

STATUS_ACTIONS = {
    "publish": "published",
    "unpublish": "draft",
    "archive": "archived",
}

@v1_bp.route("/newsletters/<document_id>/<any(publish, unpublish, archive):action>", methods=["POST"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/<any(publish, unpublish, archive):action>", methods=["POST"], defaults=BLOG_POST)
def change_document_status(kind, document_id, action):
    document = change_status(
        kind=kind,
        document_id=document_id,
        to_status=STATUS_ACTIONS[action],
    )

    return jsonify(normalize_document(document, admin=True)), 200
