from enum import StrEnum, auto
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(StrEnum):
    memory = auto()
    mysql = auto()


class MySQLConfig(BaseModel):
    host: str
    user: str
    passwd: str
    port: int = 3306
    db: str
    # SQL 로그 출력 여부
    echo: bool = False
    # 서버 시작 시 없는 테이블 생성 여부
    create_tables: bool = True


class Settings(BaseSettings):
    """
    기본 Configuration

    `STORAGE=mysql`이면 `MYSQL__HOST`, `MYSQL__USER` 등 MySQL 설정이 필요합니다.
    """

    storage: StorageBackend = StorageBackend.memory
    mysql: Optional[MySQLConfig] = None
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file="board_api/config/.env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings():
    return Settings()


settings: Settings = get_settings()
