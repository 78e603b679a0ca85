from sqlalchemy import select, insert, update, delete
from sqlalchemy.orm import Session
from app.data.models.user import UserModel

class UserRepo:
    """Parametryzowany SQL na tabeli users, jedno zapytanie = jedna operacja."""

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> list[dict]:
        # bez ORDER BY, kolejność domyślna bazy
        stmt = select(UserModel.id, UserModel.name, UserModel.email)
        return [dict(row) for row in self.db.execute(stmt).mappings()]

    def create_user(self, name: str, email: str) -> int:
        result = self.db.execute(insert(UserModel).values(name=name, email=email))
        self.db.commit()
        return result.inserted_primary_key[0]

    def update_user(self, user_id: int, name: str, email: str) -> int:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(name=name, email=email)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount

    def delete_user(self, user_id: int) -> int:
        stmt = (
            delete(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount

    def rollback(self):
        self.db.rollback()
