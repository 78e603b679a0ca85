# app/domain/errors.py
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError


class UserServiceError(Exception):
    """Bazowy błąd domeny users, niesie status HTTP."""

    status_code = 500

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationError(UserServiceError):
    status_code = 400


class NotFoundError(UserServiceError):
    status_code = 404

    def __init__(self, user_id: int):
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class ServiceError(UserServiceError):
    status_code = 500

    def __init__(self, error: str | None = None):
        super().__init__("Database operation failed", error=error)


class StorageUnavailableError(ServiceError):
    """Błąd operacyjny bazy: brak połączenia, zerwane połączenie.

    Mapowanie jest szerokie: każdy OperationalError tu trafia, także błędy
    schematu typu sqlite "no such table", których sterownik nie odróżnia.
    """


class StorageConstraintError(ServiceError):
    """Naruszenie ograniczeń (NOT NULL itp.)."""


def from_storage_error(exc: SQLAlchemyError) -> ServiceError:
    """OperationalError/InterfaceError -> StorageUnavailableError (szeroko, patrz wyżej),
    IntegrityError -> StorageConstraintError, reszta -> ServiceError."""
    text = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, (OperationalError, InterfaceError)):
        return StorageUnavailableError(text)
    if isinstance(exc, IntegrityError):
        return StorageConstraintError(text)
    return ServiceError(text)
