import pytest
from fastapi import HTTPException

from resume_builder.app.api.routes.route_logic.life_data_crud import (
    add_unique_value,
    create_record,
    create_records,
    delete_owned_record,
    delete_value,
    ensure_record_owner,
    list_records,
    list_values,
    update_owned_record,
)
from resume_builder.app.models.life_data import Education, Experience, Hobby, Skill


def test_create_record_stores_empty_fields_as_none(db_session, test_user):
    record = create_record(
        db_session,
        Education,
        test_user.id,
        {"degree": "BSc", "institution": "", "unknown": "x"},
    )
    assert record.id is not None
    assert record.user_id == test_user.id
    assert record.degree == "BSc"
    assert record.institution is None


def test_create_records_bulk(db_session, test_user):
    records = create_records(
        db_session,
        Experience,
        test_user.id,
        [{"title": "Engineer"}, {"title": "Lead"}],
    )
    assert [r.title for r in records] == ["Engineer", "Lead"]
    assert all(r.id is not None for r in records)
    assert create_records(db_session, Experience, test_user.id, []) == []


def test_list_records_only_returns_own_rows(db_session, test_user, other_user):
    create_record(db_session, Experience, test_user.id, {"title": "Mine"})
    create_record(db_session, Experience, other_user.id, {"title": "Theirs"})

    titles = [r.title for r in list_records(db_session, Experience, test_user.id)]
    assert titles == ["Mine"]


def test_list_records_newest_first(db_session, test_user):
    create_record(db_session, Experience, test_user.id, {"title": "First"})
    create_record(db_session, Experience, test_user.id, {"title": "Second"})

    titles = [r.title for r in list_records(db_session, Experience, test_user.id)]
    assert titles == ["Second", "First"]


def test_ensure_record_owner_missing_row(db_session, test_user):
    with pytest.raises(HTTPException) as exc_info:
        ensure_record_owner(db_session, Experience, 999, test_user.id, "Experience")
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Experience not found or unauthorized"


def test_update_owned_record(db_session, test_user):
    record = create_record(db_session, Education, test_user.id, {"degree": "BSc"})
    updated = update_owned_record(
        db_session,
        Education,
        record.id,
        test_user.id,
        {"degree": "MSc", "institution": "MIT"},
        "Education",
    )
    assert updated.degree == "MSc"
    assert updated.institution == "MIT"


def test_update_cross_owner_is_404_without_mutation(db_session, test_user, other_user):
    record = create_record(db_session, Experience, other_user.id, {"title": "Theirs"})

    with pytest.raises(HTTPException) as exc_info:
        update_owned_record(
            db_session,
            Experience,
            record.id,
            test_user.id,
            {"title": "Hijacked"},
            "Experience",
        )
    assert exc_info.value.status_code == 404

    db_session.expire_all()
    assert db_session.get(Experience, record.id).title == "Theirs"


def test_delete_cross_owner_is_404_without_mutation(db_session, test_user, other_user):
    record = create_record(db_session, Experience, other_user.id, {"title": "Theirs"})

    with pytest.raises(HTTPException) as exc_info:
        delete_owned_record(db_session, Experience, record.id, test_user.id, "Experience")
    assert exc_info.value.status_code == 404

    assert db_session.get(Experience, record.id) is not None


def test_delete_owned_record(db_session, test_user):
    record = create_record(db_session, Experience, test_user.id, {"title": "Mine"})
    record_id = record.id
    delete_owned_record(db_session, Experience, record_id, test_user.id, "Experience")

    db_session.expire_all()
    assert db_session.get(Experience, record_id) is None


def test_add_unique_value_rejects_duplicates(db_session, test_user):
    """The second insert of the same skill is a 400 and leaves a single row."""
    add_unique_value(db_session, Skill, "skill", test_user.id, "Python", "Skill")

    with pytest.raises(HTTPException) as exc_info:
        add_unique_value(db_session, Skill, "skill", test_user.id, "  Python ", "Skill")
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Skill already exists"

    assert list_values(db_session, Skill, "skill", test_user.id) == ["Python"]


def test_add_unique_value_is_per_user(db_session, test_user, other_user):
    add_unique_value(db_session, Hobby, "hobby", test_user.id, "Chess", "Hobby")
    add_unique_value(db_session, Hobby, "hobby", other_user.id, "Chess", "Hobby")

    assert list_values(db_session, Hobby, "hobby", test_user.id) == ["Chess"]
    assert list_values(db_session, Hobby, "hobby", other_user.id) == ["Chess"]


def test_delete_value_only_touches_own_rows(db_session, test_user, other_user):
    add_unique_value(db_session, Skill, "skill", test_user.id, "SQL", "Skill")
    add_unique_value(db_session, Skill, "skill", other_user.id, "SQL", "Skill")

    delete_value(db_session, Skill, "skill", test_user.id, "SQL")

    assert list_values(db_session, Skill, "skill", test_user.id) == []
    assert list_values(db_session, Skill, "skill", other_user.id) == ["SQL"]
