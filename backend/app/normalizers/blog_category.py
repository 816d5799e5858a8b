def normalize_category(category, include_post_count=False):
    data = {
        "id": category.id,
        "name": category.name,
        "description": category.description,
        "is_active": bool(category.is_active),
    }

    if include_post_count:
        data["post_count"] = len(category.posts)

    return data
