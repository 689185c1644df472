"""数据库模块（同步版本 - FastAPI 专用）

- 使用 SQLModel + SQLAlchemy 连接池
- 连接池参数、日志等从 `settings.database` 读取
- 提供：
    engine              ：全局同步引擎
    SessionFactory      ：`sessionmaker` 工厂
    get_db              ：FastAPI `Depends`（同步）
    init_db             ：启动时确保数据表存在

- 不做迁移管理，只在表不存在时建表
"""

from __future__ import annotations

from typing import Any, Iterator, Iterable

from loguru import logger
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, SQLModel, create_engine

from .config import settings

# ---------------------------------------------------------------------------
# 配置读取（带默认值）
# ---------------------------------------------------------------------------
_db_conf = settings.database

POOL_SIZE: int = getattr(_db_conf, "pool_size", 10)
MAX_OVERFLOW: int = getattr(_db_conf, "max_overflow", 20)
POOL_RECYCLE: int = getattr(_db_conf, "pool_recycle", 180)  # 秒
ECHO_LOG: bool = getattr(_db_conf, "echo_log", getattr(settings, "debug", False))


def _engine_options() -> dict[str, Any]:
    """根据方言拼装 create_engine 参数"""
    options: dict[str, Any] = {"pool_pre_ping": True, "echo": ECHO_LOG}
    if _db_conf.is_sqlite:
        # 同步路由跑在线程池里，SQLite 连接需要允许跨线程
        options["connect_args"] = {"check_same_thread": False}
        return options
    options.update(
        pool_size=POOL_SIZE,
        max_overflow=MAX_OVERFLOW,
        pool_recycle=POOL_RECYCLE,
    )
    return options


if _db_conf.is_sqlite:
    logger.info("[DB] Init sync engine (sqlite)")
else:
    logger.info(
        "[DB] Init sync engine pool_size={} max_overflow={} recycle={}s",
        POOL_SIZE,
        MAX_OVERFLOW,
        POOL_RECYCLE,
    )

engine = create_engine(_db_conf.sync_url, **_engine_options())

SessionFactory: sessionmaker[Session] = sessionmaker(
    bind=engine,
    class_=Session,
    autoflush=False,
    expire_on_commit=False,
)

# ----------------------------------------------------------------------------
#                              定义数据库会话依赖注入
# ----------------------------------------------------------------------------


def get_db() -> Iterator[Session]:
    """同步 Session 依赖，用于 `Depends(get_db)`"""
    with SessionFactory() as session:
        yield session


def init_db() -> None:
    """创建所有已注册的数据表（已存在则跳过）"""
    # 导入模型，确保注册到 metadata
    from ..features.users.models import User  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("✅ Database tables are ready.")


# ----------------------------------------------------------------------------
#                             定义模块的“公开API”
# ----------------------------------------------------------------------------

__all__: Iterable[str] = (
    "engine",
    "SessionFactory",
    "get_db",
    "init_db",
)
