"""用户 schemas：请求 / 响应 Pydantic 模型"""
from sqlmodel import SQLModel, Field

# 存储层整数上限：id / 偏移量为 64 位，age 列为 32 位 INT
MAX_ID = 2**63 - 1
MAX_AGE = 2**31 - 1


class UserBase(SQLModel):
    name: str = Field(max_length=50, description="用户名")
    age: int = Field(ge=0, le=MAX_AGE, description="年龄")


class UserCreate(UserBase):
    pass


class UserRead(UserBase):
    id: int
