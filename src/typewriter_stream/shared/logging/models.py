"""
목적: 로깅에 필요한 공통 모델을 정의한다.
설명: 로그 레벨, 컨텍스트, 레코드 구조를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/typewriter_stream/shared/logging/logger.py
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """로그 레벨 열거형."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib(self) -> int:
        """표준 logging 모듈의 숫자 레벨로 변환한다."""

        return logging.getLevelName(self.value)


class LogContext(BaseModel):
    """요청/세션 단위로 로그에 붙는 식별 정보.

    Args:
        request_id: HTTP 요청 식별자.
        session_id: 스트림 세션 식별자.
        client: 원격 클라이언트 주소(host:port).
    """

    model_config = ConfigDict(frozen=True)

    request_id: Optional[str] = None
    session_id: Optional[str] = None
    client: Optional[str] = None

    def merged_with(self, override: Optional["LogContext"]) -> "LogContext":
        """override에 값이 있는 필드만 덮어쓴 컨텍스트를 반환한다."""

        if override is None:
            return self
        return self.model_copy(update=override.model_dump(exclude_none=True))


def _utc_now() -> datetime:
    """UTC 기준의 timezone-aware 시간을 반환한다."""

    return datetime.now(timezone.utc)


class LogRecord(BaseModel):
    """로그 레코드 모델이다.

    Args:
        level: 로그 레벨.
        message: 로그 메시지.
        timestamp: 기록 시각.
        logger_name: 로거 이름.
        context: 로그 컨텍스트.
        metadata: 추가 메타데이터.
    """

    level: LogLevel
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
    logger_name: str
    context: Optional[LogContext] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
