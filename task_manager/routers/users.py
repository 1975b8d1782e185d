from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..core.exceptions import ForbiddenError
from ..models import User
from ..schemas.user import UserCreate, UserOut, UserUpdate
from ..services.users import UserService

router = APIRouter()


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def ensure_owner(user_id: int, current_user: User) -> None:
    if current_user.id != user_id:
        raise ForbiddenError("Users may only modify their own account")


@router.get("", response_model=List[UserOut], dependencies=[Depends(get_current_user)])
def get_users(response: Response, service: UserService = Depends(get_user_service)):
    users = service.list()
    response.headers["X-Total-Count"] = str(len(users))
    return users


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, service: UserService = Depends(get_user_service)):
    return service.create(user_in)


@router.get("/{user_id}", response_model=UserOut, dependencies=[Depends(get_current_user)])
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.get(user_id)


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: int,
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    ensure_owner(user_id, current_user)
    return service.update(user_id, data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    ensure_owner(user_id, current_user)
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
