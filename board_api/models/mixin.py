from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.dialects.mysql import DATETIME

# MySQL DATETIME 기본 정밀도는 초 단위이므로 마이크로초까지 저장
_Timestamp = DateTime().with_variant(DATETIME(fsp=6), "mysql")


def utcnow() -> datetime:
    """MySQL DATETIME 컬럼과 맞추기 위해 tzinfo 없는 UTC 시각을 반환"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseMixin:
    """
    모든 모델(테이블)의 공통 컬럼을 정의

    deleted_at이 NULL이면 활성 레코드, 값이 있으면 soft delete된 레코드입니다.
    """

    id = Column(Integer, primary_key=True, autoincrement=True, nullable=False)
    created_at = Column(_Timestamp, nullable=False, default=utcnow, index=True)
    updated_at = Column(_Timestamp, nullable=False, default=utcnow, index=True)
    deleted_at = Column(_Timestamp, nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def touch(self) -> None:
        self.updated_at = utcnow()

    def update_fields(self, **fields) -> None:
        """
        부분 수정. 값이 None인 필드는 건너뛰고, 변경 여부와 관계없이 updated_at을 갱신
        """
        for name, value in fields.items():
            if value is not None:
                setattr(self, name, value)
        self.touch()

    def soft_delete(self) -> None:
        """
        hard delete 대신 soft delete를 수행. DB 저장소에서는 session.commit()까지 호출이 필요함
        """
        self.deleted_at = utcnow()
