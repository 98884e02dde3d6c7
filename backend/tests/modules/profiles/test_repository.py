from datetime import date

from modules.profiles.repository import ProfileRepository
from modules.profiles.models import ExperienceEntry


class TestProfileRepository:
    def test_upsert_and_get(self, store):
        repo = ProfileRepository(store)

        created = repo.upsert("u1", {"status": "Dev", "skills": ["go"]})

        assert created.user_id == "u1"
        assert repo.get_by_user_id("u1") == created
        assert repo.get_by_user_id("u2") is None

    def test_entries_stored_with_from_key(self, store):
        """Entry dates are stored as ISO strings under 'from'."""
        repo = ProfileRepository(store)
        repo.upsert("u1", {"status": "Dev"})
        entry = ExperienceEntry(id="e1", title="Dev", company="Acme", from_=date(2020, 1, 1))

        record = repo.save_entries("u1", "experience", [entry])

        stored = store.find_one("profiles", {"user_id": "u1"})
        assert stored["experience"][0]["from"] == "2020-01-01"
        assert record.experience[0].from_ == date(2020, 1, 1)

    def test_save_entries_missing_profile(self, store):
        repo = ProfileRepository(store)
        assert repo.save_entries("u1", "education", []) is None

    def test_list_and_delete(self, store):
        repo = ProfileRepository(store)
        repo.upsert("u1", {"status": "Dev"})
        repo.upsert("u2", {"status": "Student"})

        assert len(repo.list_all()) == 2
        assert repo.delete_by_user_id("u1") is True
        assert repo.delete_by_user_id("u1") is False
        assert [p.user_id for p in repo.list_all()] == ["u2"]
