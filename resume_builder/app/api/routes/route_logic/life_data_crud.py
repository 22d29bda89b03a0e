"""Owner-gated CRUD shared by every life-data table.

Mutations run two independent ownership checks: a read of the target row's
owner, then a write whose filter includes the owner again. A missing row and a
row owned by someone else produce the same 404.
"""

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from resume_builder.app.models.life_data import OwnedRecordMixin

log = logging.getLogger(__name__)


def _not_found(label: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{label} not found or unauthorized",
    )


def _editable_values(model: type[OwnedRecordMixin], values: dict[str, Any]) -> dict[str, Any]:
    return {name: values.get(name) or None for name in model.editable_fields}


def list_records(
    db: Session,
    model: type[OwnedRecordMixin],
    user_id: str,
) -> list[OwnedRecordMixin]:
    """Return every record of `model` owned by `user_id`, newest first."""
    return (
        db.query(model)
        .filter(model.user_id == user_id)
        .order_by(model.created_at.desc(), model.id.desc())
        .all()
    )


def create_record(
    db: Session,
    model: type[OwnedRecordMixin],
    user_id: str,
    values: dict[str, Any],
) -> OwnedRecordMixin:
    """Create a single record owned by `user_id`.

    Args:
        db (Session): The database session.
        model (type[OwnedRecordMixin]): The life-data model to insert into.
        user_id (str): The owner of the new record.
        values (dict[str, Any]): Field values; keys outside `model.editable_fields` are ignored.

    Returns:
        OwnedRecordMixin: The persisted record.

    Notes:
        1. Build the record with empty values stored as None.
        2. Add, commit and refresh it so the generated id and timestamps are loaded.
        3. This function performs a database write operation.

    """
    record = model(user_id=user_id, **_editable_values(model, values))
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def create_records(
    db: Session,
    model: type[OwnedRecordMixin],
    user_id: str,
    values_list: Iterable[dict[str, Any]],
) -> list[OwnedRecordMixin]:
    """Bulk-insert records owned by `user_id` in a single commit."""
    records = [model(user_id=user_id, **_editable_values(model, values)) for values in values_list]
    if not records:
        return []
    db.add_all(records)
    db.commit()
    for record in records:
        db.refresh(record)
    return records


def ensure_record_owner(
    db: Session,
    model: type[OwnedRecordMixin],
    record_id: int,
    user_id: str,
    label: str,
) -> None:
    """Verify that a record exists and belongs to `user_id`.

    Args:
        db (Session): The database session.
        model (type[OwnedRecordMixin]): The life-data model holding the record.
        record_id (int): The record to check.
        user_id (str): The authenticated caller.
        label (str): Human-readable record name used in the error message.

    Raises:
        HTTPException: 404 "<label> not found or unauthorized" whether the row is
            missing or owned by another user.

    Notes:
        1. Read only the owner column of the target row.
        2. Compare it with the caller's id.
        3. This function performs a database read operation.

    """
    existing = db.query(model.user_id).filter(model.id == record_id).first()
    if existing is None or existing.user_id != user_id:
        _msg = f"{label} {record_id} not found or not owned by {user_id}"
        log.info(_msg)
        raise _not_found(label)


def update_owned_record(
    db: Session,
    model: type[OwnedRecordMixin],
    record_id: int,
    user_id: str,
    values: dict[str, Any],
    label: str,
) -> OwnedRecordMixin:
    """Replace the editable fields of a record after checking ownership.

    Args:
        db (Session): The database session.
        model (type[OwnedRecordMixin]): The life-data model holding the record.
        record_id (int): The record to update.
        user_id (str): The authenticated caller.
        values (dict[str, Any]): New field values; omitted or empty fields become None.
        label (str): Human-readable record name used in error messages.

    Returns:
        OwnedRecordMixin: The updated record.

    Raises:
        HTTPException: 404 if the ownership check fails or the filtered write matches no row.

    Notes:
        1. Run the ownership pre-check.
        2. Update with a filter on both id and owner.
        3. Reload the row through the same filter.
        4. This function performs database read and write operations.

    """
    ensure_record_owner(db, model, record_id, user_id, label)

    updated = (
        db.query(model)
        .filter(model.id == record_id, model.user_id == user_id)
        .update(_editable_values(model, values), synchronize_session=False)
    )
    db.commit()
    if not updated:
        raise _not_found(label)

    record = db.query(model).filter(model.id == record_id, model.user_id == user_id).first()
    if record is None:
        raise _not_found(label)
    return record


def delete_owned_record(
    db: Session,
    model: type[OwnedRecordMixin],
    record_id: int,
    user_id: str,
    label: str,
) -> None:
    """Delete a record after checking ownership; the delete also filters by owner."""
    ensure_record_owner(db, model, record_id, user_id, label)

    db.query(model).filter(model.id == record_id, model.user_id == user_id).delete(
        synchronize_session=False,
    )
    db.commit()


def list_values(
    db: Session,
    model: type[OwnedRecordMixin],
    field: str,
    user_id: str,
) -> list[str]:
    """Return the single-string values (skills, hobbies) owned by `user_id`, newest first."""
    return [getattr(record, field) for record in list_records(db, model, user_id)]


def add_unique_value(
    db: Session,
    model: type[OwnedRecordMixin],
    field: str,
    user_id: str,
    value: str,
    label: str,
) -> OwnedRecordMixin:
    """Insert a single-string value unless the user already has it.

    Args:
        db (Session): The database session.
        model (type[OwnedRecordMixin]): `Skill` or `Hobby`.
        field (str): The value column name.
        user_id (str): The owner.
        value (str): The value to add; surrounding whitespace is removed.
        label (str): Human-readable name used in the error message.

    Returns:
        OwnedRecordMixin: The inserted record.

    Raises:
        HTTPException: 400 "<label> already exists" if the user already has the value.

    Notes:
        1. Uniqueness is checked with a read before the insert; the table has no constraint.
        2. This function performs database read and write operations.

    """
    value = value.strip()
    column = getattr(model, field)
    existing = db.query(model.id).filter(model.user_id == user_id, column == value).first()
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} already exists",
        )
    return create_record(db, model, user_id, {field: value})


def delete_value(
    db: Session,
    model: type[OwnedRecordMixin],
    field: str,
    user_id: str,
    value: str,
) -> None:
    """Delete every row of `model` owned by `user_id` whose `field` equals `value`."""
    column = getattr(model, field)
    db.query(model).filter(model.user_id == user_id, column == value).delete(
        synchronize_session=False,
    )
    db.commit()
