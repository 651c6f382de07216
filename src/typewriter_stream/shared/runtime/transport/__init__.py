"""
목적: 스트림 전송 계층 공개 API를 제공한다.
설명: 전송 인터페이스, 이벤트/메타데이터 모델, SSE 어댑터를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/shared/runtime/transport/model.py, src/typewriter_stream/shared/runtime/transport/sse_transport.py
"""

from typewriter_stream.shared.runtime.transport.model import (
    ChunkEvent,
    DoneEvent,
    StreamEvent,
    StreamTransport,
    StreamTransportError,
    StreamingMetadata,
)
from typewriter_stream.shared.runtime.transport.sse_transport import SSEQueueTransport

__all__ = [
    "StreamEvent",
    "ChunkEvent",
    "DoneEvent",
    "StreamingMetadata",
    "StreamTransport",
    "StreamTransportError",
    "SSEQueueTransport",
]
