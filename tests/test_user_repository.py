"""Tests for the in-memory user store."""

from cadastro_usuarios.entities.user import User, UserStatus
from cadastro_usuarios.repositories.user_repository import InMemoryUserRepository


def _user(user_id: str, **kwargs) -> User:
    data = {"name": f"User {user_id}", "email": f"{user_id}@example.com", "age": 30}
    data.update(kwargs)
    return User(id=user_id, **data)


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    def test_add_and_get(self, repository):
        """Stored users are returned by id."""
        user = repository.add(_user("a"))
        assert repository.get_by_id("a") is user
        assert repository.exists("a")

    def test_get_empty_or_unknown(self, repository):
        """Empty and unknown ids return None."""
        repository.add(_user("a"))
        assert repository.get_by_id("") is None
        assert repository.get_by_id("b") is None
        assert repository.get_by_id(["a"]) is None
        assert repository.get_by_id(None) is None

    def test_list_keeps_insertion_order(self, repository):
        """list_all follows insertion order."""
        for user_id in ("c", "a", "b"):
            repository.add(_user(user_id))
        assert [u.id for u in repository.list_all()] == ["c", "a", "b"]
        assert [u.id for u in repository.list_all(limit=1, offset=1)] == ["a"]

    def test_set_status(self, repository):
        """set_status changes only known users."""
        user = repository.add(_user("a"))
        assert repository.set_status(user_id="a", status=UserStatus.INACTIVE) is True
        assert user.status is UserStatus.INACTIVE
        assert repository.set_status(user_id="x", status=UserStatus.INACTIVE) is False

    def test_count_and_clear(self, repository):
        """count_all filters by status and clear empties the store."""
        repository.add(_user("a"))
        repository.add(_user("b", status=UserStatus.INACTIVE))
        assert repository.count_all() == 2
        assert repository.count_all(status=UserStatus.INACTIVE) == 1
        assert repository.count_all(status="inativo") == 1

        repository.clear()
        assert repository.count_all() == 0

    def test_injected_store_is_used(self):
        """A store passed to the constructor is the one mutated."""
        store: dict[str, User] = {}
        repository = InMemoryUserRepository(store)
        repository.add(_user("a"))
        assert list(store) == ["a"]


class TestUser:
    """Tests for the User entity."""

    def test_defaults(self):
        """New users are active non-admins."""
        user = _user("a")
        assert user.is_admin is False
        assert user.status is UserStatus.ACTIVE
        assert user.is_active
        assert user.created_at.tzinfo is not None

    def test_status_renders_as_value(self):
        """UserStatus prints its Portuguese value."""
        assert str(UserStatus.ACTIVE) == "ativo"
        assert str(UserStatus.INACTIVE) == "inativo"
