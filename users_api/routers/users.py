"""用户路由：仅协调层，业务实现在 features/users/crud.py"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from ..core.database import get_db
from ..features.users import crud
from ..features.users.schemas import MAX_ID, UserCreate, UserRead

router = APIRouter(
    tags=["用户"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "参数错误"},
        status.HTTP_404_NOT_FOUND: {"description": "用户不存在"},
    },
)

DEFAULT_PAGE_SIZE = 10


@router.get("/users", response_model=list[UserRead], summary="查询用户列表")
def list_users(
    start: int = Query(0, le=MAX_ID, description="起始偏移量"),
    count: int = Query(DEFAULT_PAGE_SIZE, description="返回记录数（1-10）"),
    db: Session = Depends(get_db),
):
    """分页查询，越界参数回落到默认值而不是报错"""
    if count > DEFAULT_PAGE_SIZE or count < 1:
        count = DEFAULT_PAGE_SIZE
    if start < 0:
        start = 0
    return crud.get_users(db, start, count)


@router.get("/user/{user_id}", response_model=UserRead, summary="用户详情")
def get_user(user_id: int, db: Session = Depends(get_db)):
    return crud.get_user(db, user_id)


@router.post(
    "/user",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="创建用户",
)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return crud.create_user(db, payload)


@router.put("/user/{user_id}", response_model=UserRead, summary="替换更新用户")
def update_user(user_id: int, payload: UserCreate, db: Session = Depends(get_db)):
    return crud.update_user(db, user_id, payload)


@router.delete("/user/{user_id}", summary="删除用户")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    crud.delete_user(db, user_id)
    return {"result": "success"}
