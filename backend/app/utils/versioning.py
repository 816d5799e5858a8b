def snapshot_blocks(document):
    """
    Portable copy of a document's blocks, in render order.
    Used as the body of a newsletter template.
    """
    return [
        {
            "type": b.type,
            "content": dict(b.content or {}),
        }
        for b in document.blocks
    ]
