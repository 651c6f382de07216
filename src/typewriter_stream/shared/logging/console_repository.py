"""
목적: 콘솔 로그 저장소를 제공한다.
설명: LogRecord를 표준 logging 모듈로 전달하고, 최근 레코드를 제한된 개수만큼 보관한다.
디자인 패턴: 저장소 패턴, 어댑터 패턴
참조: src/typewriter_stream/shared/logging/logger.py
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from .logger import InMemoryLogger, InMemoryLogRepository, LogRepository
from .models import LogRecord


class ConsoleLogRepository(LogRepository):
    """표준 logging 기반 로그 저장소 구현체.

    Args:
        max_records: 보관할 최근 레코드 수. None이면 무제한.
    """

    def __init__(self, max_records: Optional[int] = 1000) -> None:
        self._recent = InMemoryLogRepository(max_records=max_records)

    def add(self, record: LogRecord) -> None:
        self._recent.add(record)
        logger = logging.getLogger(record.logger_name)
        logger.log(record.level.to_stdlib(), self._format(record))

    def list(self) -> List[LogRecord]:
        return self._recent.list()

    def _format(self, record: LogRecord) -> str:
        extras: dict = {}
        if record.context is not None:
            extras.update(record.context.model_dump(exclude_none=True, exclude_defaults=True))
        if record.metadata:
            extras.update(record.metadata)
        if not extras:
            return record.message
        return f"{record.message} {json.dumps(extras, ensure_ascii=False, default=str)}"


def create_console_logger(name: str, max_records: Optional[int] = 1000) -> InMemoryLogger:
    """표준 logging으로 흘려보내는 콘솔 로거를 생성한다."""

    return InMemoryLogger(name=name, repository=ConsoleLogRepository(max_records=max_records))


def configure_console_logging(level: str = "INFO") -> None:
    """루트 로거에 콘솔 핸들러가 없으면 기본 포맷으로 설정한다."""

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
