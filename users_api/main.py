from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .core.config import settings
from .core.database import engine, init_db
from .core.errors import register_exception_handlers

# 导入路由模块
from .routers import users

__version__ = "1.0.0"


# --- 1. 定义 Lifespan (生命周期) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # [Startup] 启动时执行
    logger.info("🚀 Users API is starting up...")
    init_db()

    yield  # 应用程序在此处运行

    # [Shutdown] 关闭时执行
    engine.dispose()
    logger.info("👋 Users API is shutting down...")


# --- 2. 实例化 App (注入 lifespan) ---
app = FastAPI(
    title="Users API",
    description="用户 CRUD REST API (FastAPI + SQLModel)",
    version=__version__,
    lifespan=lifespan,
)

# --- 3. 核心配置：CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- 4. 异常处理：统一 {"error": ...} 响应体 ---
register_exception_handlers(app)

# --- 5. 注册路由 ---
app.include_router(users.router)


# --- 6. 健康检查 ---
@app.get("/", tags=["Health"])
def root():
    return {
        "status": "online",
        "project": "Users API",
        "version": __version__,
        "docs_url": "/docs",
    }


def run() -> None:
    """命令行入口：用 uvicorn 启动服务"""
    import uvicorn

    logger.info(f"Listening on {settings.server.host}:{settings.server.port}")
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)
