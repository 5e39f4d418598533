# cadastro_usuarios/schemas/user_schema.py

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from cadastro_usuarios.entities.user import UserStatus


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: str
    name: str
    email: str
    age: int
    is_admin: bool
    status: UserStatus
    created_at: datetime | None = None


class UsersListResponse(BaseModel):
    items: list[UserResponse]
    total: int
