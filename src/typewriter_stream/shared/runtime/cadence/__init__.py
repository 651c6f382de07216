"""
목적: 케이던스 스케줄러 공개 API를 제공한다.
설명: 반복 트리거 인터페이스와 asyncio 구현체를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/shared/runtime/cadence/model.py
"""

from typewriter_stream.shared.runtime.cadence.asyncio_scheduler import AsyncioCadenceScheduler
from typewriter_stream.shared.runtime.cadence.model import CadenceHandle, CadenceScheduler

__all__ = ["CadenceHandle", "CadenceScheduler", "AsyncioCadenceScheduler"]
