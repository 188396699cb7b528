"""Unit tests for the User record."""

from pennywise.domain.user import User


class TestUser:
    def test_password_hash_hidden_from_repr(self):
        user = User(email="a@example.com", password_hash="$argon2id$secret")

        assert "argon2id" not in repr(user)

    def test_public_view_excludes_hash(self):
        user = User(email="a@example.com", password_hash="$argon2id$secret", id=5)

        view = user.public_view()

        assert view["id"] == 5
        assert view["email"] == "a@example.com"
        assert set(view) == {"id", "email", "created_at", "updated_at"}

    def test_touch_moves_updated_at(self):
        user = User(email="a@example.com", password_hash="x")
        before = user.updated_at

        user.touch()

        assert user.updated_at >= before
