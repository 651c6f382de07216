"""
목적: 반복 케이던스 트리거 인터페이스를 정의한다.
설명: 취소 가능한 반복 트리거 핸들과, 현재 무장된 트리거 수를 노출하는 스케줄러 계약을 제공한다.
디자인 패턴: 전략 패턴
참조: src/typewriter_stream/shared/runtime/cadence/asyncio_scheduler.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable


class CadenceHandle(ABC):
    """무장된 반복 트리거 1개에 대한 핸들."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """트리거가 아직 무장 상태인지 반환한다."""

    @abstractmethod
    def cancel(self) -> None:
        """트리거를 해제한다. 여러 번 호출해도 안전해야 한다."""


class CadenceScheduler(ABC):
    """반복 트리거 스케줄러 인터페이스."""

    @abstractmethod
    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> CadenceHandle:
        """interval_seconds 마다 callback을 호출하는 트리거를 무장한다."""

    @property
    @abstractmethod
    def active_count(self) -> int:
        """현재 무장된 트리거 수를 반환한다."""
