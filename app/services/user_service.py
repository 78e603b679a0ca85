from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.repos.user_repo import UserRepo
from app.domain.errors import NotFoundError, ValidationError, from_storage_error
from app.domain.schemas import UserIn, UserRead, UserUpdated, UserDeleted
from app.utils.logging import get_logger

logger = get_logger(__name__)

# zakres users.id (INTEGER), id spoza niego nie może istnieć
MAX_USER_ID = 2**31 - 1


class UserService:
    """
    Use case'y dla domeny user: list, create, update, delete.
    Błędy bazy zamieniane na ServiceError, brak retry.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    @staticmethod
    def _validate(payload: UserIn) -> tuple[str, str]:
        if not payload.name or not payload.email:
            raise ValidationError("Name and email are required")
        return payload.name, payload.email

    @staticmethod
    def _check_id(user_id: int):
        if not 1 <= user_id <= MAX_USER_ID:
            logger.warning(f"User id {user_id} out of range, treated as missing")
            raise NotFoundError(user_id)

    def _storage_failure(self, op: str, exc: SQLAlchemyError):
        logger.error(f"Storage failure during {op}: {exc}")
        try:
            self.repo.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.warning(f"Rollback after failed {op} also failed: {rollback_exc}")
        return from_storage_error(exc)

    #query
    def list_users(self) -> list[UserRead]:
        try:
            rows = self.repo.list_users()
        except SQLAlchemyError as e:
            raise self._storage_failure("list", e) from e
        return [UserRead(**row) for row in rows]

    #commands
    def create_user(self, payload: UserIn) -> UserRead:
        name, email = self._validate(payload)
        try:
            user_id = self.repo.create_user(name, email)
        except SQLAlchemyError as e:
            raise self._storage_failure("create", e) from e

        logger.info(f"Created user {user_id}")
        return UserRead(id=user_id, name=name, email=email)

    def update_user(self, user_id: int, payload: UserIn) -> UserUpdated:
        name, email = self._validate(payload)
        self._check_id(user_id)
        try:
            rowcount = self.repo.update_user(user_id, name, email)
        except SQLAlchemyError as e:
            raise self._storage_failure("update", e) from e

        if rowcount == 0:
            logger.warning(f"Update skipped, user {user_id} does not exist")
            raise NotFoundError(user_id)

        logger.info(f"Updated user {user_id}")
        return UserUpdated(id=user_id, name=name, email=email)

    def delete_user(self, user_id: int) -> UserDeleted:
        self._check_id(user_id)
        try:
            rowcount = self.repo.delete_user(user_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("delete", e) from e

        if rowcount == 0:
            logger.warning(f"Delete skipped, user {user_id} does not exist")
            raise NotFoundError(user_id)

        logger.info(f"Deleted user {user_id}")
        return UserDeleted(id=user_id)
