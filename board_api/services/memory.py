import itertools
from typing import Callable, Generic, Optional, TypeVar

from board_api.models.mixin import BaseMixin

RecordT = TypeVar("RecordT", bound=BaseMixin)


class RecordSet(Generic[RecordT]):
    """
    메모리 저장소의 레코드 목록과 ID 시퀀스

    ID는 1부터 순차 발급하며 soft delete 후에도 재사용하지 않습니다.
    서비스 객체가 소유하므로 앱 lifespan이 끝나면 함께 사라집니다.
    """

    def __init__(self) -> None:
        self._records: list[RecordT] = []
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def append(self, record: RecordT) -> RecordT:
        self._records.append(record)
        return record

    def active(
        self, predicate: Optional[Callable[[RecordT], bool]] = None
    ) -> list[RecordT]:
        """삭제되지 않은 레코드를 생성 순서대로 반환"""
        return [
            record
            for record in self._records
            if not record.is_deleted and (predicate is None or predicate(record))
        ]

    def get(self, record_id: int) -> Optional[RecordT]:
        for record in self._records:
            if record.id == record_id and not record.is_deleted:
                return record
        return None
