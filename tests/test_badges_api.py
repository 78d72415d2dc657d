import pytest

BADGE = {
    "name": "Homework Hero",
    "description": "Homework five days in a row",
    "icon": "book",
    "required_days": 3,
    "activity_type": "Homework",
}


@pytest.fixture
def badge(client, parent_headers):
    res = client.post("/api/badges", json=BADGE, headers=parent_headers)
    assert res.status_code == 201
    return res.json()


def log_days(client, headers, child_id, description, days):
    for day in days:
        res = client.post(
            "/api/activities",
            json={"child_id": child_id, "description": description, "points": 5, "date": f"2024-01-{day:02d}T10:00:00"},
            headers=headers,
        )
        assert res.status_code == 201


def test_badge_crud(client, parent_headers, badge):
    res = client.put(f"/api/badges/{badge['id']}", json={"required_days": 7}, headers=parent_headers)
    assert res.status_code == 200
    assert res.json()["required_days"] == 7
    assert client.delete(f"/api/badges/{badge['id']}", headers=parent_headers).status_code == 204
    assert client.get("/api/badges", headers=parent_headers).json() == []


def test_badge_requires_positive_days(client, parent_headers):
    res = client.post("/api/badges", json=dict(BADGE, required_days=0), headers=parent_headers)
    assert res.status_code == 422


def test_badges_are_private_to_household(client, badge, child_headers, other_parent_headers):
    assert [b["id"] for b in client.get("/api/badges", headers=child_headers).json()] == [badge["id"]]
    assert client.get("/api/badges", headers=other_parent_headers).json() == []
    res = client.put(f"/api/badges/{badge['id']}", json={"required_days": 1}, headers=other_parent_headers)
    assert res.status_code == 404


def test_allot_awards_streak_badge_once(client, parent_headers, child, child_headers, badge):
    log_days(client, parent_headers, child["id"], "homework", [1, 2, 3])

    res = client.post("/api/badges/allot", headers=parent_headers)
    assert res.status_code == 200
    assert res.json()["awarded"] == [{"child_id": child["id"], "badge_id": badge["id"]}]

    again = client.post("/api/badges/allot", headers=parent_headers).json()
    assert again == {"message": "Badges allotted successfully", "awarded": []}

    earned = client.get(f"/api/child-badges/{child['id']}", headers=child_headers).json()
    assert [(e["badge_id"], e["badge"]["name"]) for e in earned] == [(badge["id"], "Homework Hero")]


def test_allot_skips_broken_streak(client, parent_headers, child, badge):
    log_days(client, parent_headers, child["id"], "Homework", [1, 2, 4, 5])
    assert client.post("/api/badges/allot", headers=parent_headers).json()["awarded"] == []


def test_child_cannot_allot(client, child_headers):
    assert client.post("/api/badges/allot", headers=child_headers).status_code == 403


def test_badge_progress(client, parent_headers, child, child_headers, badge):
    log_days(client, parent_headers, child["id"], "Homework", [1, 2])
    progress = client.get(f"/api/child-badges/{child['id']}/progress", headers=child_headers).json()
    assert progress == [{
        "badge_id": badge["id"],
        "name": "Homework Hero",
        "activity_type": "Homework",
        "required_days": 3,
        "streak": 2,
        "earned": False,
    }]


def test_child_badges_access(client, child, other_parent_headers):
    assert client.get(f"/api/child-badges/{child['id']}", headers=other_parent_headers).status_code == 403
    assert client.get(f"/api/child-badges/{child['id']}/progress", headers=other_parent_headers).status_code == 403
