import logging

import pytest

from app.extensions import db
from app.models.block import Block
from app.application.blocks.add_block import add_block
from app.application.blocks.update_block import update_block
from app.application.blocks.delete_block import delete_block
from app.application.blocks.reorder_blocks import reorder_blocks
from app.application.blocks.list_blocks import list_blocks
from app.domain.blocks.renderer import render_block
from app.domain.exceptions import NotFoundError, ValidationError


def positions(kind, document_id):
    return [(b.id, b.position) for b in list_blocks(kind=kind, document_id=document_id)]


def test_first_block_lands_at_zero(newsletter):
    block = add_block(kind="newsletter", document_id=newsletter.id, block_type="heading")

    assert block.position == 0
    assert block.content == {"text": "New Heading", "level": 2, "alignment": "left"}
    assert block.newsletter_id == newsletter.id
    assert block.blog_post_id is None


def test_append_after_gaps(newsletter):
    for position in (0, 5, 7):
        add_block(kind="newsletter", document_id=newsletter.id, block_type="spacer", position=position)

    block = add_block(kind="newsletter", document_id=newsletter.id, block_type="spacer")

    assert block.position == 8


def test_supplied_content_is_merged_over_defaults(blog_post):
    block = add_block(
        kind="blog_post",
        document_id=blog_post.id,
        block_type="heading",
        content={"text": "Welcome"},
    )

    assert block.content == {"text": "Welcome", "level": 2, "alignment": "left"}
    assert block.blog_post_id == blog_post.id


def test_position_ties_resolve_by_insertion(newsletter):
    first = add_block(kind="newsletter", document_id=newsletter.id, block_type="text", position=1)
    second = add_block(kind="newsletter", document_id=newsletter.id, block_type="text", position=1)

    ids = [b.id for b in list_blocks(kind="newsletter", document_id=newsletter.id)]

    assert ids == [first.id, second.id]
    assert second.sequence > first.sequence


def test_add_to_missing_document(app):
    with pytest.raises(NotFoundError):
        add_block(kind="newsletter", document_id="missing", block_type="text")

    assert Block.query.count() == 0


def test_add_unknown_type(newsletter):
    with pytest.raises(ValidationError):
        add_block(kind="newsletter", document_id=newsletter.id, block_type="carousel")


@pytest.mark.parametrize("position", ["3", 1.5, True])
def test_add_rejects_non_integer_position(newsletter, position):
    with pytest.raises(ValidationError):
        add_block(kind="newsletter", document_id=newsletter.id, block_type="text", position=position)


def test_update_merges_content(newsletter):
    block = add_block(
        kind="newsletter",
        document_id=newsletter.id,
        block_type="heading",
        content={"text": "A", "level": 3},
    )

    updated = update_block(block_id=block.id, data={"content": {"level": 4}})

    assert updated.content == {"text": "A", "level": 4, "alignment": "left"}


def test_update_leaves_siblings_alone(newsletter):
    a = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")
    b = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")

    update_block(block_id=a.id, data={"position": 5})

    assert dict(positions("newsletter", newsletter.id)) == {a.id: 5, b.id: 1}


def test_update_requires_known_fields(newsletter):
    block = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")

    with pytest.raises(ValidationError):
        update_block(block_id=block.id, data={"colour": "red"})


def test_update_missing_block(app):
    with pytest.raises(NotFoundError):
        update_block(block_id="missing", data={"content": {}})


def test_update_block_of_another_document(newsletter, blog_post):
    block = add_block(kind="blog_post", document_id=blog_post.id, block_type="text")

    with pytest.raises(NotFoundError):
        update_block(kind="newsletter", document_id=newsletter.id, block_id=block.id, data={"position": 2})


def test_spacer_update_is_clamped_when_rendered(newsletter):
    block = add_block(kind="newsletter", document_id=newsletter.id, block_type="spacer")

    update_block(block_id=block.id, data={"content": {"height": 9999}})
    assert "height: 200px" in render_block(block)

    update_block(block_id=block.id, data={"content": {"height": -5}})
    assert "height: 8px" in render_block(block)


def test_delete_keeps_gaps(newsletter):
    a = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")
    b = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")
    c = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")

    delete_block(block_id=b.id)

    assert positions("newsletter", newsletter.id) == [(a.id, 0), (c.id, 2)]

    d = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")
    assert d.position == 3


def test_delete_missing_block(app):
    with pytest.raises(NotFoundError):
        delete_block(block_id="missing")


def test_reorder(newsletter):
    a, b, c = (
        add_block(kind="newsletter", document_id=newsletter.id, block_type="text")
        for _ in range(3)
    )

    blocks = reorder_blocks(kind="newsletter", document_id=newsletter.id, block_ids=[c.id, a.id, b.id])

    assert [(x.id, x.position) for x in blocks] == [(c.id, 0), (a.id, 1), (b.id, 2)]


def test_reorder_is_idempotent(newsletter):
    ids = [add_block(kind="newsletter", document_id=newsletter.id, block_type="text").id for _ in range(3)]
    ids.reverse()

    first = reorder_blocks(kind="newsletter", document_id=newsletter.id, block_ids=ids)
    second = reorder_blocks(kind="newsletter", document_id=newsletter.id, block_ids=ids)

    assert [(b.id, b.position) for b in first] == [(b.id, b.position) for b in second]
    assert [b.position for b in second] == [0, 1, 2]


def test_reorder_closes_gaps(newsletter):
    a = add_block(kind="newsletter", document_id=newsletter.id, block_type="text", position=3)
    b = add_block(kind="newsletter", document_id=newsletter.id, block_type="text", position=10)

    reorder_blocks(kind="newsletter", document_id=newsletter.id, block_ids=[a.id, b.id])

    assert positions("newsletter", newsletter.id) == [(a.id, 0), (b.id, 1)]


@pytest.mark.parametrize("mangle", [
    lambda ids: ids[:-1],            # missing one
    lambda ids: ids + ["stranger"],  # unknown id
    lambda ids: ids + ids[:1],       # duplicate
    lambda ids: {"ids": ids},        # not a list
])
def test_reorder_rejects_partial_lists(newsletter, mangle):
    ids = [add_block(kind="newsletter", document_id=newsletter.id, block_type="text").id for _ in range(3)]
    before = positions("newsletter", newsletter.id)

    with pytest.raises(ValidationError):
        reorder_blocks(kind="newsletter", document_id=newsletter.id, block_ids=mangle(list(reversed(ids))))

    db.session.expire_all()
    assert positions("newsletter", newsletter.id) == before


def test_reorder_missing_document(app):
    with pytest.raises(NotFoundError):
        reorder_blocks(kind="blog_post", document_id="missing", block_ids=[])


def test_document_delete_cascades_to_blocks(newsletter):
    from app.application.documents.delete_document import delete_document

    add_block(kind="newsletter", document_id=newsletter.id, block_type="text")
    add_block(kind="newsletter", document_id=newsletter.id, block_type="image")

    delete_document(kind="newsletter", document_id=newsletter.id)

    assert Block.query.count() == 0


def test_update_is_logged_with_other_mutations(newsletter, caplog):
    block = add_block(kind="newsletter", document_id=newsletter.id, block_type="text")

    with caplog.at_level(logging.INFO, logger="app"):
        update_block(block_id=block.id, data={"position": 3})

    assert any(
        record.levelno == logging.INFO and f"Block {block.id} updated" in record.getMessage()
        for record in caplog.records
    )
