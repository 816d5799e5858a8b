from functools import wraps
from flask import request, jsonify


def json_body(*, list_allowed=False):
    """
    Rejects requests whose body is not a JSON object (or array, when allowed)
    before the view runs.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            data = request.get_json(silent=True)
            accepted = (dict, list) if list_allowed else (dict,)

            if not isinstance(data, accepted):
                return jsonify({
                    "error": "ValidationError",
                    "message": "Request body must be a JSON object"
                }), 400

            return fn(*args, **kwargs)
        return wrapper
    return decorator
