"""
Tests for the profile endpoints.
"""

import pytest

from api.dependencies import get_repo_lookup
from modules.github.models import RepoSummary
from modules.github.exceptions import UpstreamError, UpstreamNotFoundError


@pytest.fixture
def profile(client, auth_headers):
    response = client.post(
        "/api/profile",
        json={"status": "Developer", "skills": "go, js", "twitter": "https://twitter.com/ann"},
        headers=auth_headers,
    )
    assert response.status_code == 200, response.json()
    return response.json()


class TestProfileRoutes:
    def test_upsert_profile(self, profile):
        assert profile["status"] == "Developer"
        assert profile["skills"] == ["go", "js"]
        assert profile["social"]["twitter"] == "https://twitter.com/ann"
        assert profile["user"]["name"] == "Ann"
        assert "user_id" not in profile

    def test_upsert_validation(self, client, auth_headers):
        response = client.post("/api/profile", json={}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {
            "errors": [
                {"msg": "Status is required", "param": "status"},
                {"msg": "Skills is required", "param": "skills"},
            ]
        }

    def test_upsert_requires_auth(self, client):
        response = client.post("/api/profile", json={"status": "Dev", "skills": "go"})
        assert response.status_code == 401

    def test_get_me(self, client, auth_headers, profile):
        response = client.get("/api/profile/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == profile["id"]

    def test_get_me_without_profile(self, client, auth_headers):
        response = client.get("/api/profile/me", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"msg": "There is no profile for this user"}

    def test_list_profiles_is_public(self, client, profile):
        response = client.get("/api/profile")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [profile["id"]]

    def test_get_by_user_id(self, client, profile):
        response = client.get(f"/api/profile/user/{profile['user']['id']}")
        assert response.status_code == 200
        assert response.json()["status"] == "Developer"

    def test_get_by_unknown_user_id(self, client):
        response = client.get("/api/profile/user/not-a-real-id")
        assert response.status_code == 404
        assert response.json() == {"msg": "Profile not found"}

    def test_delete_account(self, client, auth_headers, profile):
        response = client.delete("/api/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"msg": "User deleted"}
        assert client.get("/api/profile").json() == []
        assert client.get(f"/api/profile/user/{profile['user']['id']}").status_code == 404


class TestEntryRoutes:
    def test_add_experience_uses_from_key(self, client, auth_headers, profile):
        response = client.put(
            "/api/profile/experience",
            json={"title": "Developer", "company": "Acme", "from": "2020-01-01", "current": True},
            headers=auth_headers,
        )

        assert response.status_code == 200
        entry = response.json()["experience"][0]
        assert entry["from"] == "2020-01-01"
        assert entry["current"] is True
        assert entry["id"]

    def test_add_experience_validation(self, client, auth_headers, profile):
        response = client.put(
            "/api/profile/experience",
            json={"title": "Developer"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert [e["param"] for e in response.json()["errors"]] == ["company", "from"]

    def test_bad_date_is_a_400(self, client, auth_headers, profile):
        response = client.put(
            "/api/profile/education",
            json={"school": "U", "degree": "BSc", "fieldofstudy": "CS", "from": "not-a-date"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["param"] == "from"

    def test_add_and_remove_education(self, client, auth_headers, profile):
        added = client.put(
            "/api/profile/education",
            json={"school": "U", "degree": "BSc", "fieldofstudy": "CS", "from": "2014-09-01"},
            headers=auth_headers,
        ).json()
        edu_id = added["education"][0]["id"]

        response = client.delete(f"/api/profile/education/{edu_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["education"] == []

    def test_remove_experience_without_profile(self, client, auth_headers):
        response = client.delete("/api/profile/experience/abc", headers=auth_headers)
        assert response.status_code == 404


class FakeRepoLookup:
    def __init__(self, repos=None, error=None):
        self.repos = repos or []
        self.error = error
        self.calls = []

    async def repos_for(self, username):
        self.calls.append(username)
        if self.error:
            raise self.error
        return self.repos


class TestGithubRoute:
    def test_lists_repos(self, app, client):
        lookup = FakeRepoLookup(repos=[RepoSummary(name="demo", html_url="https://github.com/ann/demo")])
        app.dependency_overrides[get_repo_lookup] = lambda: lookup

        response = client.get("/api/profile/github/ann")

        assert response.status_code == 200
        assert response.json()[0]["name"] == "demo"
        assert lookup.calls == ["ann"]

    def test_unknown_github_user(self, app, client):
        lookup = FakeRepoLookup(error=UpstreamNotFoundError("ghost", 404))
        app.dependency_overrides[get_repo_lookup] = lambda: lookup

        response = client.get("/api/profile/github/ghost")

        assert response.status_code == 404
        assert response.json() == {"msg": "No Github profile found"}

    def test_github_unreachable(self, app, client):
        lookup = FakeRepoLookup(error=UpstreamError("timed out"))
        app.dependency_overrides[get_repo_lookup] = lambda: lookup

        response = client.get("/api/profile/github/ann")

        assert response.status_code == 502
