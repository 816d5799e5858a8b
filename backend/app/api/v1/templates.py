# app/api/v1/templates.py
from flask import request, jsonify
from app.models.template import Template
from app.application.templates.save_template import create_template, save_template
from app.application.templates.apply_template import apply_template, load_template
from app.application.templates.delete_template import delete_template
from app.application.templates.update_template import update_template
from app.normalizers.block import normalize_block
from app.normalizers.template import normalize_template
from app.utils.decorators import json_body
from . import v1_bp # import the versioned blueprint


# ------------------------
# Newsletter templates
# ------------------------

@v1_bp.route("/templates", methods=["GET"])
def list_templates():
    templates = Template.query.order_by(
        Template.is_default.desc(), Template.created_at.desc()
    ).all()

    return jsonify([normalize_template(t, include_blocks=False) for t in templates])


@v1_bp.route("/templates", methods=["POST"])
@json_body()
def create_template_route():
    data = request.get_json()

    template = create_template(
        name=data.get("name"),
        description=data.get("description"),
        blocks=data.get("blocks", []),
        is_default=data.get("is_default", False),
    )

    return jsonify(normalize_template(template)), 201


@v1_bp.route("/templates/<template_id>", methods=["GET"])
def get_template(template_id):
    return jsonify(normalize_template(load_template(template_id)))


@v1_bp.route("/templates/<template_id>", methods=["PUT"])
@json_body()
def update_template_route(template_id):
    template = update_template(template_id=template_id, data=request.get_json())

    return jsonify(normalize_template(template)), 200


@v1_bp.route("/templates/<template_id>", methods=["DELETE"])
def delete_template_route(template_id):
    delete_template(template_id=template_id)

    return jsonify({"message": "Template deleted"}), 200


@v1_bp.route("/newsletters/<newsletter_id>/save-as-template", methods=["POST"])
@json_body()
def save_newsletter_as_template(newsletter_id):
    data = request.get_json()

    template = save_template(
        newsletter_id=newsletter_id,
        name=data.get("name"),
        description=data.get("description"),
    )

    return jsonify(normalize_template(template)), 201


@v1_bp.route("/newsletters/<newsletter_id>/apply-template/<template_id>", methods=["POST"])
def apply_template_route(newsletter_id, template_id):
    blocks = apply_template(newsletter_id=newsletter_id, template_id=template_id)

    return jsonify([normalize_block(b, admin=True) for b in blocks]), 201
