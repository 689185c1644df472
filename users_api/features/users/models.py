"""用户模型：users 数据表"""
from sqlmodel import Field

from .schemas import UserBase


class User(UserBase, table=True):
    """用户表，id 由数据库自增分配，且不复用"""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
