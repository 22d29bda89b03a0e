import pytest

from resume_builder.app.models.life_data import Certification, Education, Hobby, Skill


def test_life_data_requires_auth(client):
    for path in (
        "/api/life-data/education",
        "/api/life-data/certifications",
        "/api/life-data/skills",
        "/api/life-data/hobbies",
    ):
        assert client.get(path).status_code == 401


def test_education_crud(authenticated_client, db_session, test_user):
    created = authenticated_client.post(
        "/api/life-data/education",
        json={"education": {"degree": "BSc Biology", "institution": "Université de Lyon"}},
    )
    assert created.status_code == 200
    education = created.json()["education"]
    assert education["degree"] == "BSc Biology"
    assert education["user_id"] == test_user.id

    updated = authenticated_client.put(
        f"/api/life-data/education/{education['id']}",
        json={"degree": "MSc Biology", "institution": "Université de Lyon"},
    )
    assert updated.status_code == 200
    assert updated.json()["education"]["degree"] == "MSc Biology"

    listed = authenticated_client.get("/api/life-data/education")
    assert [e["degree"] for e in listed.json()["education"]] == ["MSc Biology"]

    deleted = authenticated_client.delete(f"/api/life-data/education/{education['id']}")
    assert deleted.json() == {"success": True}
    assert db_session.query(Education).count() == 0


def test_education_requires_body(authenticated_client):
    response = authenticated_client.post("/api/life-data/education", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Education is required"}


def test_education_of_other_user_is_404(authenticated_client, db_session, other_user):
    record = Education(user_id=other_user.id, degree="PhD")
    db_session.add(record)
    db_session.commit()

    update = authenticated_client.put(
        f"/api/life-data/education/{record.id}",
        json={"degree": "Stolen"},
    )
    delete = authenticated_client.delete(f"/api/life-data/education/{record.id}")

    assert update.status_code == 404
    assert update.json() == {"error": "Education not found or unauthorized"}
    assert delete.status_code == 404
    db_session.expire_all()
    assert db_session.get(Education, record.id).degree == "PhD"


def test_certification_crud(authenticated_client, db_session):
    missing = authenticated_client.post("/api/life-data/certifications", json={})
    assert missing.status_code == 400
    assert missing.json() == {"error": "Certification is required"}

    created = authenticated_client.post(
        "/api/life-data/certifications",
        json={"certification": {"name": "PMP", "issuer": "PMI", "date": "2021"}},
    )
    assert created.status_code == 200
    certification = created.json()["certification"]

    updated = authenticated_client.put(
        f"/api/life-data/certifications/{certification['id']}",
        json={"name": "PMP", "issuer": "PMI", "date": "2022"},
    )
    assert updated.json()["certification"]["date"] == "2022"

    listed = authenticated_client.get("/api/life-data/certifications")
    assert len(listed.json()["certifications"]) == 1

    authenticated_client.delete(f"/api/life-data/certifications/{certification['id']}")
    assert db_session.query(Certification).count() == 0


def test_add_skill_trims_and_rejects_duplicates(authenticated_client, db_session, test_user):
    first = authenticated_client.post("/api/life-data/skills", json={"skill": "  Python "})
    assert first.status_code == 200
    assert first.json()["skill"]["skill"] == "Python"

    duplicate = authenticated_client.post("/api/life-data/skills", json={"skill": "Python"})
    assert duplicate.status_code == 400
    assert duplicate.json() == {"error": "Skill already exists"}

    assert db_session.query(Skill).filter(Skill.user_id == test_user.id).count() == 1
    assert authenticated_client.get("/api/life-data/skills").json() == {"skills": ["Python"]}


def test_same_skill_allowed_for_different_users(authenticated_client, db_session, other_user):
    db_session.add(Skill(user_id=other_user.id, skill="Python"))
    db_session.commit()

    response = authenticated_client.post("/api/life-data/skills", json={"skill": "Python"})

    assert response.status_code == 200
    assert db_session.query(Skill).count() == 2


@pytest.mark.parametrize("body", [{}, {"skill": "   "}])
def test_add_skill_requires_value(authenticated_client, body):
    response = authenticated_client.post("/api/life-data/skills", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Skill is required"}


def test_delete_skill(authenticated_client, db_session, test_user, other_user):
    db_session.add_all(
        [Skill(user_id=test_user.id, skill="Python"), Skill(user_id=other_user.id, skill="Python")],
    )
    db_session.commit()

    missing = authenticated_client.delete("/api/life-data/skills")
    assert missing.status_code == 400
    assert missing.json() == {"error": "Skill is required"}

    response = authenticated_client.delete("/api/life-data/skills", params={"skill": "Python"})
    assert response.json() == {"success": True}
    db_session.expire_all()
    assert [s.user_id for s in db_session.query(Skill).all()] == [other_user.id]


def test_hobbies(authenticated_client, db_session):
    assert authenticated_client.post("/api/life-data/hobbies", json={}).json() == {
        "error": "Hobby is required",
    }

    created = authenticated_client.post("/api/life-data/hobbies", json={"hobby": "Climbing"})
    assert created.json()["hobby"]["hobby"] == "Climbing"

    duplicate = authenticated_client.post("/api/life-data/hobbies", json={"hobby": "Climbing"})
    assert duplicate.json() == {"error": "Hobby already exists"}

    assert authenticated_client.get("/api/life-data/hobbies").json() == {"hobbies": ["Climbing"]}

    authenticated_client.delete("/api/life-data/hobbies", params={"hobby": "Climbing"})
    assert db_session.query(Hobby).count() == 0
