#import modeli żeby SQLAlchemy je zarejestrował w base metadata

from app.data.models.user import UserModel

__all__ = ["UserModel"]
