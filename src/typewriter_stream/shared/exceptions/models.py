"""
목적: 공통 예외 모델과 에러 코드를 정의한다.
설명: 에러 코드/원인/힌트/메타데이터를 포함하는 Pydantic 모델과 스트림 도메인 코드 목록을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/typewriter_stream/shared/exceptions/base.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """스트림 도메인 에러 코드."""

    PROMPT_EMPTY = "STREAM_PROMPT_EMPTY"
    OPEN_FAILED = "STREAM_OPEN_FAILED"
    SESSION_ALREADY_STARTED = "STREAM_SESSION_ALREADY_STARTED"
    TRANSPORT_NOT_OPEN = "STREAM_TRANSPORT_NOT_OPEN"
    TRANSPORT_ALREADY_OPEN = "STREAM_TRANSPORT_ALREADY_OPEN"
    TRANSPORT_CLOSED = "STREAM_TRANSPORT_CLOSED"
    TRANSPORT_BACKPRESSURE = "STREAM_TRANSPORT_BACKPRESSURE"
    TRANSPORT_IDLE_TIMEOUT = "STREAM_TRANSPORT_IDLE_TIMEOUT"
    TRANSPORT_WRITE_FAILED = "STREAM_TRANSPORT_WRITE_FAILED"
    CONFIG_INVALID = "STREAM_CONFIG_INVALID"


class ExceptionDetail(BaseModel):
    """예외 상세 정보를 담는 모델이다.

    Args:
        code: 시스템 전반에서 일관되게 사용하는 에러 코드.
        cause: 에러의 직접 원인 설명.
        hint: 해결을 위한 힌트.
        metadata: 추가적인 구조화 메타데이터.
    """

    code: str = Field(..., min_length=1, description="에러 코드")
    cause: Optional[str] = Field(default=None, description="에러 원인")
    hint: Optional[str] = Field(default=None, description="해결 힌트")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="추가 메타데이터")
