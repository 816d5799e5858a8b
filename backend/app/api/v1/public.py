# app/api/v1/public.py
from flask import jsonify
from app.application.documents.lookup import document_model, LABELS
from app.domain.exceptions import NotFoundError
from app.normalizers.document import normalize_document
from . import v1_bp # import the versioned blueprint
from .documents import NEWSLETTER, BLOG_POST


# ------------------------
# Public rendering surface
# ------------------------

@v1_bp.route("/public/newsletters", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/public/blog-posts", methods=["GET"], defaults=BLOG_POST)
def list_published(kind):
    model = document_model(kind)
    documents = (
        model.query.filter_by(status="published")
        .order_by(model.created_at.desc())
        .all()
    )

    return jsonify([normalize_document(d) for d in documents])


@v1_bp.route("/public/newsletters/<slug>", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/public/blog-posts/<slug>", methods=["GET"], defaults=BLOG_POST)
def get_published(kind, slug):
    document = document_model(kind).query.filter_by(
        slug=slug,
        status="published"
    ).first()

    if document is None:
        raise NotFoundError(f"{LABELS[kind]} not found")

    return jsonify(normalize_document(document, include_blocks=True, render=True))
