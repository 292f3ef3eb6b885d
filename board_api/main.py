import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from board_api.config.config import settings
from board_api.dependencies import services
from board_api.exception_handler import (
    custom_exception_handler,
    database_exception_handler,
    validation_exception_handler,
)
from board_api.routers import board, post

# logger 전역 설정
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup: 저장소와 서비스 객체는 앱 인스턴스가 소유
    app.state.services = await services.startup(settings)

    yield

    # shutdown
    await services.shutdown(app.state.services)
    logger.info("서버 종료")


app = FastAPI(title="Board API", lifespan=lifespan)

app.add_exception_handler(StarletteHTTPException, custom_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(SQLAlchemyError, database_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(board.router)
app.include_router(post.router)


@app.get(
    "/health",
    tags=["Health Check"],
    summary="Health Check용 API",
)
async def health_check() -> str:
    return "ok"
