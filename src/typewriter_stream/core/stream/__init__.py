"""
목적: 스트림 코어 공개 API를 제공한다.
설명: 응답 테이블/설정 모델, 응답 선택기, 세션 상태 머신과 레지스트리를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/core/stream/session/stream_session.py
"""

from typewriter_stream.core.stream.models import ResponseEntry, ResponseTable, StreamSettings
from typewriter_stream.core.stream.selector import ResponseSelector
from typewriter_stream.core.stream.session import StreamSession, StreamSessionRegistry, StreamStatus

__all__ = [
    "ResponseEntry",
    "ResponseTable",
    "StreamSettings",
    "ResponseSelector",
    "StreamSession",
    "StreamSessionRegistry",
    "StreamStatus",
]
