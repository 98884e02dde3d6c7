from modules.auth.passwords import BcryptPasswordHasher


class TestBcryptPasswordHasher:
    def test_hash_verifies(self, password_hasher):
        digest = password_hasher.hash("secret1")
        assert digest != "secret1"
        assert password_hasher.verify("secret1", digest) is True

    def test_wrong_password(self, password_hasher):
        digest = password_hasher.hash("secret1")
        assert password_hasher.verify("secret2", digest) is False

    def test_salted(self, password_hasher):
        """Hashing the same password twice should give different digests."""
        first = password_hasher.hash("secret1")
        second = password_hasher.hash("secret1")
        assert first != second
        assert password_hasher.verify("secret1", first)
        assert password_hasher.verify("secret1", second)

    def test_rounds_in_digest(self):
        hasher = BcryptPasswordHasher(rounds=5)
        assert hasher.rounds == 5
        assert hasher.hash("secret1").startswith("$2b$05$")

    def test_malformed_digest(self, password_hasher):
        assert password_hasher.verify("secret1", "not-a-bcrypt-digest") is False

    def test_long_password(self, password_hasher):
        """Passwords beyond bcrypt's 72 byte limit still hash and verify."""
        password = "x" * 100
        digest = password_hasher.hash(password)
        assert password_hasher.verify(password, digest)
