"""User API routes — register, read, replace, patch and delete an account."""

import uuid

from fastapi import APIRouter, Depends, Response, status

from accounts.interfaces.api.deps import get_current_user_id
from accounts.interfaces.deps import get_user_repository
from accounts.domain.repositories.user_repository import UserRepository
from accounts.domain.schemas.user import UserCreate, UserPatch, UserRead, UserUpdate
from accounts.application.services.user_service import (
    create_user,
    delete_user,
    get_user,
    partially_update_user,
    update_user,
)

router = APIRouter(prefix="/user", tags=["Users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    body: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
):
    return create_user(repo, body)


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: uuid.UUID,
    repo: UserRepository = Depends(get_user_repository),
    caller_id: uuid.UUID = Depends(get_current_user_id),
):
    return get_user(repo, user_id, caller_id)


@router.put("/{user_id}", response_model=UserRead)
def replace_user(
    user_id: uuid.UUID,
    body: UserUpdate,
    repo: UserRepository = Depends(get_user_repository),
    caller_id: uuid.UUID = Depends(get_current_user_id),
):
    return update_user(repo, user_id, body, caller_id)


@router.patch("/{user_id}", response_model=UserRead)
def patch_user(
    user_id: uuid.UUID,
    body: UserPatch,
    repo: UserRepository = Depends(get_user_repository),
    caller_id: uuid.UUID = Depends(get_current_user_id),
):
    return partially_update_user(repo, user_id, body, caller_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_user(
    user_id: uuid.UUID,
    repo: UserRepository = Depends(get_user_repository),
    caller_id: uuid.UUID = Depends(get_current_user_id),
):
    delete_user(repo, user_id, caller_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
