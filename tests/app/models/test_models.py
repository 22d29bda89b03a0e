import pytest

from resume_builder.app.models.anonymous_prompt import AnonymousPrompt
from resume_builder.app.models.life_data import Experience, Skill
from resume_builder.app.models.resume_model import Resume
from resume_builder.app.models.user import ANONYMOUS_USER_ID, User


def test_user_generates_uuid_id():
    user = User(email=" someone@example.com ", hashed_password="hash")
    assert len(user.id) == 36
    assert user.id != ANONYMOUS_USER_ID
    assert user.email == "someone@example.com"
    assert user.is_active is True


def test_user_explicit_id():
    user = User(email="anon@example.com", hashed_password="hash", id=ANONYMOUS_USER_ID)
    assert user.id == ANONYMOUS_USER_ID


@pytest.mark.parametrize(
    "email, hashed_password",
    [("", "hash"), ("   ", "hash"), ("a@example.com", "")],
)
def test_user_rejects_empty_values(email, hashed_password):
    with pytest.raises(ValueError):
        User(email=email, hashed_password=hashed_password)


def test_owned_record_normalizes_empty_fields():
    record = Experience(user_id="u1", title="Engineer", company="", extra="ignored")
    assert record.user_id == "u1"
    assert record.title == "Engineer"
    assert record.company is None
    assert record.period is None
    assert not hasattr(record, "extra")


def test_resume_defaults(db_session, test_user):
    resume = Resume(user_id=test_user.id, resume={"name": "Jane"}, prompt="text")
    db_session.add(resume)
    db_session.commit()
    db_session.refresh(resume)

    assert resume.is_public is False
    assert resume.created_at is not None
    assert resume.resume == {"name": "Jane"}


def test_anonymous_prompt_persists(db_session):
    entry = AnonymousPrompt(prompt="Barista for 3 years")
    db_session.add(entry)
    db_session.commit()
    db_session.refresh(entry)
    assert entry.id is not None
    assert entry.created_at is not None


def test_life_data_removed_with_user(db_session, test_user):
    db_session.add(Skill(user_id=test_user.id, skill="Python"))
    db_session.commit()

    db_session.query(User).filter(User.id == test_user.id).delete(synchronize_session=False)
    db_session.commit()

    assert db_session.query(Skill).count() == 0
