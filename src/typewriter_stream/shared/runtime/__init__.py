"""
목적: 런타임 모듈 공개 API를 제공한다.
설명: 케이던스 스케줄러와 스트림 전송 계층 구현을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/shared/runtime/cadence/__init__.py, src/typewriter_stream/shared/runtime/transport/__init__.py
"""

from typewriter_stream.shared.runtime.cadence import (
    AsyncioCadenceScheduler,
    CadenceHandle,
    CadenceScheduler,
)
from typewriter_stream.shared.runtime.transport import (
    ChunkEvent,
    DoneEvent,
    SSEQueueTransport,
    StreamEvent,
    StreamTransport,
    StreamTransportError,
    StreamingMetadata,
)

__all__ = [
    "CadenceHandle",
    "CadenceScheduler",
    "AsyncioCadenceScheduler",
    "StreamEvent",
    "ChunkEvent",
    "DoneEvent",
    "StreamingMetadata",
    "StreamTransport",
    "StreamTransportError",
    "SSEQueueTransport",
]
