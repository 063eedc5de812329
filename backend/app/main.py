"""
Drivent 主应用入口
活动票务系统 - 酒店模块
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.database import init_db, close_db
from app.errors import ApplicationError, ERROR_STATUS_CODES
from app.routers import auth, hotels

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理：启动时初始化数据库，关闭时释放连接"""
    init_db()
    logger.info("%s started", settings.APP_NAME)

    yield

    close_db()


# 创建应用
app = FastAPI(
    title="Drivent",
    description="活动票务系统 - 酒店查询",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 生产环境应限制具体域名
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError):
    """应用错误 → HTTP 状态码"""
    status_code = ERROR_STATUS_CODES[exc.name]
    logger.debug("%s %s -> %s (%s)", request.method, request.url.path, status_code, exc.name.value)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# 注册路由
app.include_router(auth.router)
app.include_router(hotels.router)


@app.get("/health")
def health_check():
    """健康检查"""
    return {"status": "healthy"}
