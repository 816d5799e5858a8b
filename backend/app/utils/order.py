from sqlalchemy import case, update
from app.extensions import db


def next_value(model, column_name, **scope):
    """
    max(column) + 1 within a scope, or 0 when the scope is empty.

    Gaps left by deletes are kept: the result is never based on the row count.
    """
    column = getattr(model, column_name)
    current = db.session.query(db.func.max(column)).filter_by(**scope).scalar()
    return 0 if current is None else current + 1


def apply_order(model, ordered_ids, order_field="position"):
    """
    Rewrites order_field as 0..n-1 following ordered_ids.

    Issued as a single UPDATE ... CASE statement so readers never observe a
    half-applied order.
    """
    if not ordered_ids:
        return 0

    column = getattr(model, order_field)
    stmt = (
        update(model)
        .where(model.id.in_(ordered_ids))
        .values({
            column: case(
                {row_id: index for index, row_id in enumerate(ordered_ids)},
                value=model.id,
            )
        })
        .execution_options(synchronize_session="fetch")
    )
    result = db.session.execute(stmt)
    return result.rowcount
