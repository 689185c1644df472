"""用户 CRUD（同步版本）"""
from loguru import logger
from sqlmodel import Session, select

from ...core.errors import UserNotFoundError
from .models import User
from .schemas import MAX_ID, UserCreate


def get_users(db: Session, start: int = 0, count: int = 10) -> list[User]:
    """分页查询用户列表（LIMIT count OFFSET start）"""
    query = select(User).order_by(User.id).offset(start).limit(count)
    return list(db.exec(query).all())


def get_user(db: Session, user_id: int) -> User:
    # 超出存储整数范围的 id 不可能存在，不交给驱动
    if not 0 < user_id <= MAX_ID:
        raise UserNotFoundError()
    user = db.get(User, user_id)
    if user is None:
        raise UserNotFoundError()
    return user


def create_user(db: Session, payload: UserCreate) -> User:
    user = User.model_validate(payload, update={})
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Created user id={user.id}")
    return user


def update_user(db: Session, user_id: int, payload: UserCreate) -> User:
    """PUT 全量替换 name / age，id 保持不变"""
    user = get_user(db, user_id)
    for k, v in payload.model_dump().items():
        setattr(user, k, v)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Updated user id={user.id}")
    return user


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user id={user_id}")
