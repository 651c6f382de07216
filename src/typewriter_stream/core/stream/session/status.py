"""
목적: 스트림 세션 상태를 정의한다.
설명: ACTIVE에서 세 종료 상태 중 하나로만 전이하는 단일 상태 값을 제공한다.
디자인 패턴: 상태 열거형
참조: src/typewriter_stream/core/stream/session/stream_session.py
"""

from __future__ import annotations

from enum import Enum


class StreamStatus(str, Enum):
    """스트림 세션 상태."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self is not StreamStatus.ACTIVE
