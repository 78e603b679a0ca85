# app/domain/schemas.py
from pydantic import BaseModel, ConfigDict


class UserIn(BaseModel):
    """Schema dla tworzenia/edycji użytkownika.

    Pola są opcjonalne, brak/puste pola odrzuca serwis (400, nie 422).
    """

    name: str | None = None
    email: str | None = None


class UserRead(BaseModel):
    """Schema dla użytkownika (response)."""

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserUpdated(UserRead):
    message: str = "User updated successfully"


class UserDeleted(BaseModel):
    id: int
    message: str = "User deleted successfully"


class ErrorOut(BaseModel):
    message: str
    error: str | None = None
