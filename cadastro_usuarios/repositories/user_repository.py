# cadastro_usuarios/repositories/user_repository.py

from cadastro_usuarios.core.base_repository import BaseRepository
from cadastro_usuarios.entities.user import User, UserStatus


class InMemoryUserRepository(BaseRepository[User]):
    def __init__(self, store: dict[str, User] | None = None) -> None:
        super().__init__(store)

    def exists(self, user_id: str) -> bool:
        return user_id in self._store

    def get_by_id(self, user_id: str) -> User | None:
        if not isinstance(user_id, str) or not user_id:
            return None
        return self._store.get(user_id)

    def list_all(self, *, limit: int | None = None, offset: int = 0) -> list[User]:
        users = list(self._store.values())
        if limit is None:
            return users[offset:]
        return users[offset:offset + limit]

    def count_all(self, *, status: UserStatus | None = None) -> int:
        if status is None:
            return len(self._store)
        return sum(1 for u in self._store.values() if u.status == status)

    def add(self, user: User) -> User:
        self._store[user.id] = user
        return user

    def set_status(self, *, user_id: str, status: UserStatus) -> bool:
        user = self.get_by_id(user_id)
        if user is None:
            return False
        user.status = status
        return True

    def clear(self) -> None:
        self._store.clear()
