# app/api/v1/blocks.py
from flask import request, jsonify
from app.application.blocks.add_block import add_block
from app.application.blocks.update_block import update_block
from app.application.blocks.delete_block import delete_block
from app.application.blocks.reorder_blocks import reorder_blocks
from app.application.blocks.list_blocks import list_blocks
from app.application.documents.lookup import load_block, load_document
from app.domain.exceptions import ValidationError
from app.normalizers.block import normalize_block
from app.utils.decorators import json_body
from . import v1_bp # import the versioned blueprint
from .documents import NEWSLETTER, BLOG_POST


# ------------------------
# Blocks
# ------------------------

@v1_bp.route("/newsletters/<document_id>/blocks", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/blocks", methods=["GET"], defaults=BLOG_POST)
def list_document_blocks(kind, document_id):
    blocks = list_blocks(kind=kind, document_id=document_id)

    return jsonify([normalize_block(b, admin=True) for b in blocks])


@v1_bp.route("/newsletters/<document_id>/blocks/preview", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/blocks/preview", methods=["GET"], defaults=BLOG_POST)
def preview_document_blocks(kind, document_id):
    blocks = list_blocks(kind=kind, document_id=document_id)

    return jsonify([normalize_block(b, admin=True, editor=True) for b in blocks])


@v1_bp.route("/newsletters/<document_id>/blocks", methods=["POST"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/blocks", methods=["POST"], defaults=BLOG_POST)
@json_body()
def create_block(kind, document_id):
    data = request.get_json()

    block = add_block(
        kind=kind,
        document_id=document_id,
        block_type=data.get("type"),
        position=data.get("position"),
        content=data.get("content"),
        style=data.get("style"),
        parent_id=data.get("parent_id"),
    )

    return jsonify(normalize_block(block, admin=True)), 201


@v1_bp.route("/newsletters/<document_id>/blocks/<block_id>", methods=["GET"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/blocks/<block_id>", methods=["GET"], defaults=BLOG_POST)
def get_block(kind, document_id, block_id):
    block = load_block(block_id, load_document(kind, document_id))

    return jsonify(normalize_block(block, admin=True, editor=True))


@v1_bp.route("/newsletters/<document_id>/blocks/<block_id>", methods=["PUT"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/blocks/<block_id>", methods=["PUT"], defaults=BLOG_POST)
@json_body()
def update_block_route(kind, document_id, block_id):
    block = update_block(
        kind=kind,
        document_id=document_id,
        block_id=block_id,
        data=request.get_json(),
    )

    return jsonify(normalize_block(block, admin=True)), 200


@v1_bp.route("/newsletters/<document_id>/blocks/<block_id>", methods=["DELETE"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/blocks/<block_id>", methods=["DELETE"], defaults=BLOG_POST)
def delete_block_route(kind, document_id, block_id):
    delete_block(kind=kind, document_id=document_id, block_id=block_id)

    return jsonify({"message": "Block deleted"}), 200


@v1_bp.route("/newsletters/<document_id>/blocks/reorder", methods=["PATCH"], defaults=NEWSLETTER)
@v1_bp.route("/blog-posts/<document_id>/blocks/reorder", methods=["PATCH"], defaults=BLOG_POST)
@json_body(list_allowed=True)
def reorder_document_blocks(kind, document_id):
    data = request.get_json()  # ["id", ...] or {"block_ids": ["id", ...]}
    block_ids = data.get("block_ids") if isinstance(data, dict) else data

    if block_ids is None:
        raise ValidationError("block_ids is required")

    blocks = reorder_blocks(kind=kind, document_id=document_id, block_ids=block_ids)

    return jsonify([normalize_block(b, admin=True) for b in blocks]), 200
