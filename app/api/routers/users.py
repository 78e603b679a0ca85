from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.data.database import get_db
from app.services.user_service import UserService
from app.domain.schemas import UserIn, UserRead, UserUpdated, UserDeleted, ErrorOut

router = APIRouter(prefix="/users", tags=["users"])

# błędy domeny (400/404/500) renderuje app.api.errors
_errors = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    500: {"model": ErrorOut},
}


@router.get("", response_model=list[UserRead], responses={500: {"model": ErrorOut}})
@router.get("/", response_model=list[UserRead], include_in_schema=False)
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list_users()


@router.post("", response_model=UserRead, status_code=201, responses=_errors)
@router.post("/", response_model=UserRead, status_code=201, include_in_schema=False)
def create_user(payload: UserIn, db: Session = Depends(get_db)):
    return UserService(db).create_user(payload)


@router.put("/{user_id}", response_model=UserUpdated, responses=_errors)
def update_user(user_id: int, payload: UserIn, db: Session = Depends(get_db)):
    return UserService(db).update_user(user_id, payload)


@router.delete("/{user_id}", response_model=UserDeleted, responses=_errors)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    return UserService(db).delete_user(user_id)
