# cadastro_usuarios/services/user_service.py

from __future__ import annotations

import logging
from uuid import uuid4

from cadastro_usuarios.config.settings import Settings, settings as default_settings
from cadastro_usuarios.core.exceptions import NotFoundError, ValidationError
from cadastro_usuarios.entities.user import User, UserStatus
from cadastro_usuarios.repositories.user_repository import InMemoryUserRepository
from cadastro_usuarios.schemas.user_schema import UserResponse, UsersListResponse

logger = logging.getLogger(__name__)

MIN_AGE = 18

MISSING_FIELDS_MESSAGE = "Nome, email e idade são obrigatórios."
INVALID_TEXT_MESSAGE = "Nome e email devem ser textos."
INVALID_AGE_MESSAGE = "A idade deve ser um número inteiro."
UNDERAGE_MESSAGE = "O usuário deve ser maior de idade."
INVALID_PAGINATION_MESSAGE = "Paginação inválida."

REPORT_HEADER = "--- Relatório de Usuários ---"
REPORT_EMPTY = "Nenhum usuário cadastrado."


class UserService:
    def __init__(
        self,
        user_repository: InMemoryUserRepository | None = None,
        *,
        config: Settings | None = None,
    ) -> None:
        self._user_repository = user_repository if user_repository is not None else InMemoryUserRepository()
        self._settings = config or default_settings

    def _new_id(self) -> str:
        # uuid4 praticamente não colide, mas o id precisa ser único no store
        while True:
            user_id = uuid4().hex
            if not self._user_repository.exists(user_id):
                return user_id

    def create_user(self, name: str, email: str, age: int, is_admin: bool = False) -> User:
        if not name or not email or not age:
            logger.debug("Cadastro rejeitado: campos obrigatórios ausentes.")
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        if not isinstance(name, str) or not isinstance(email, str):
            logger.debug("Cadastro rejeitado: nome ou email não textual.")
            raise ValidationError(INVALID_TEXT_MESSAGE)

        # bool é subclasse de int
        if isinstance(age, bool) or not isinstance(age, int):
            logger.debug("Cadastro rejeitado: idade não numérica.")
            raise ValidationError(INVALID_AGE_MESSAGE)

        if age < MIN_AGE:
            logger.debug("Cadastro rejeitado: usuário menor de idade.")
            raise ValidationError(UNDERAGE_MESSAGE)

        user = User(
            id=self._new_id(),
            name=name,
            email=email,
            age=age,
            is_admin=bool(is_admin),
            status=UserStatus.ACTIVE,
        )
        self._user_repository.add(user)

        logger.info("Usuário criado: id=%s admin=%s", user.id, user.is_admin)
        return user

    def get_user_by_id(self, user_id: str) -> User | None:
        user = self._user_repository.get_by_id(user_id)
        if user is None:
            logger.debug("Usuário não encontrado: id=%r", user_id)
        return user

    def get_user_or_raise(self, user_id: str) -> User:
        user = self.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("Usuário não encontrado.")
        return user

    def deactivate_user(self, user_id: str) -> bool:
        """
        Desativa um usuário não-admin.

        Retorna False (sem alterar nada) quando o id não existe ou o
        usuário é admin. Repetir a chamada num usuário já inativo
        retorna True.
        """
        user = self.get_user_by_id(user_id)
        if user is None:
            return False

        if user.is_admin:
            logger.warning("Desativação recusada para admin: id=%s", user.id)
            return False

        self._user_repository.set_status(user_id=user.id, status=UserStatus.INACTIVE)
        logger.info("Usuário desativado: id=%s", user.id)
        return True

    def list_users(self, *, limit: int | None = None, offset: int = 0) -> list[User]:
        if limit is None:
            limit = self._settings.default_page_size
        if limit < 0 or offset < 0:
            raise ValidationError(INVALID_PAGINATION_MESSAGE)
        return self._user_repository.list_all(limit=limit, offset=offset)

    def count_users(self, *, status: UserStatus | None = None) -> int:
        return self._user_repository.count_all(status=status)

    def export_users(self) -> UsersListResponse:
        users = self._user_repository.list_all()
        return UsersListResponse(
            items=[UserResponse.model_validate(u) for u in users],
            total=len(users),
        )

    def generate_user_report(self) -> str:
        lines = [REPORT_HEADER]

        users = self._user_repository.list_all()
        if not users:
            lines.append(REPORT_EMPTY)
            return "\n".join(lines)

        for i, user in enumerate(users):
            if i:
                lines.append("")
            lines.extend(
                [
                    f"ID: {user.id}",
                    f"Nome: {user.name}",
                    f"Email: {user.email}",
                    f"Idade: {user.age}",
                    f"Admin: {'sim' if user.is_admin else 'não'}",
                    f"Status: {user.status.value}",
                ]
            )

        return "\n".join(lines)

    def clear_users(self) -> None:
        self._user_repository.clear()
        logger.info("Cadastro de usuários limpo.")
