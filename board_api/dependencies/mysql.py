import logging
import sys

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from board_api.config.config import MySQLConfig

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_engine(config: MySQLConfig) -> AsyncEngine:
    return create_async_engine(
        "mysql+asyncmy://{user}:{passwd}@{host}:{port}/{db}?charset=utf8mb4".format(
            user=config.user,
            passwd=config.passwd,
            host=config.host,
            port=config.port,
            db=config.db,
        ),
        pool_size=10,
        max_overflow=0,
        echo=config.echo,
        pool_pre_ping=True,
        pool_timeout=600,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    서비스 객체가 연산마다 `async with sessionmaker() as session`으로 사용
    """
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


def _validate_schema(sync_conn) -> list[str]:
    """
    모델 메타데이터와 실제 DB 스키마를 비교하여 불일치 항목을 반환합니다.
    """
    errors = []
    inspector = sa_inspect(sync_conn)
    existing_tables = inspector.get_table_names()

    for table_name, table in Base.metadata.tables.items():
        if table_name not in existing_tables:
            continue

        db_columns = {col["name"]: col for col in inspector.get_columns(table_name)}
        model_columns = {col.name: col for col in table.columns}

        missing = sorted(set(model_columns) - set(db_columns))
        unknown = sorted(set(db_columns) - set(model_columns))
        errors.extend(
            f"[{table_name}] 컬럼 '{name}'이 모델에는 있지만 DB에는 없습니다."
            for name in missing
        )
        errors.extend(
            f"[{table_name}] 컬럼 '{name}'이 DB에는 있지만 모델에는 없습니다."
            for name in unknown
        )

        for col_name in model_columns.keys() & db_columns.keys():
            model_nullable = model_columns[col_name].nullable
            db_nullable = db_columns[col_name]["nullable"]
            if model_nullable != db_nullable:
                errors.append(
                    f"[{table_name}.{col_name}] nullable 불일치: "
                    f"모델={model_nullable}, DB={db_nullable}"
                )

    return errors


async def startup(engine: AsyncEngine, config: MySQLConfig) -> None:
    """서버 시작 시 MySQL 스키마 검증 및 테이블 초기화를 수행합니다."""
    # 모든 모델을 import하여 Base.metadata에 등록
    import board_api.models.board  # noqa: F401
    import board_api.models.post  # noqa: F401

    async with engine.begin() as conn:
        errors = await conn.run_sync(_validate_schema)
        if errors:
            logger.error("DB 스키마와 모델 정의가 일치하지 않습니다:")
            for error in errors:
                logger.error("  - %s", error)
            logger.error("서버를 종료합니다. DB 스키마를 확인해주세요.")
            sys.exit(1)

        if config.create_tables:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("MySQL 테이블 초기화 완료")


async def shutdown(engine: AsyncEngine) -> None:
    """서버 종료 시 MySQL 연결 풀을 반환합니다."""
    await engine.dispose()
