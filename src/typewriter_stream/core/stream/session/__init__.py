"""
목적: 스트림 세션 공개 API를 제공한다.
설명: 세션 상태 열거형, 세션 상태 머신, 활성 세션 레지스트리를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/core/stream/session/stream_session.py
"""

from typewriter_stream.core.stream.session.registry import StreamSessionRegistry
from typewriter_stream.core.stream.session.status import StreamStatus
from typewriter_stream.core.stream.session.stream_session import StreamSession

__all__ = ["StreamSession", "StreamSessionRegistry", "StreamStatus"]
