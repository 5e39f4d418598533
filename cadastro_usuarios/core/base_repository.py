from typing import Generic, TypeVar

TEntity = TypeVar("TEntity")


class BaseRepository(Generic[TEntity]):
    def __init__(self, store: dict[str, TEntity] | None = None) -> None:
        # dict preserva a ordem de inserção
        self._store: dict[str, TEntity] = store if store is not None else {}
