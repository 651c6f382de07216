"""
목적: 스트림 전송 계층의 계약과 모델을 정의한다.
설명: 세션이 의존하는 전송 인터페이스(open/push/close/콜백 등록)와 이벤트, 스트리밍 메타데이터 모델을 제공한다.
디자인 패턴: 포트(인터페이스) + 데이터 전송 객체(DTO)
참조: src/typewriter_stream/shared/runtime/transport/sse_transport.py, src/typewriter_stream/core/stream/session/stream_session.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from typewriter_stream.shared.exceptions import BaseAppException


class StreamTransportError(BaseAppException):
    """전송 계층 쓰기/상태 오류."""


class StreamEvent(BaseModel):
    """클라이언트로 내보내는 스트림 이벤트의 베이스 모델."""

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """직렬화용 사전을 반환한다."""

        return self.model_dump(by_alias=True)


class ChunkEvent(StreamEvent):
    """문자 1개를 담는 청크 이벤트."""

    chunk: str = Field(..., min_length=1, max_length=1)
    done: Literal[False] = False


class DoneEvent(StreamEvent):
    """정상 완료 시 1회만 보내는 종료 이벤트."""

    done: Literal[True] = True
    total_chars: int = Field(..., ge=0, serialization_alias="totalChars")


def _default_stream_headers() -> dict[str, str]:
    # 프록시/압축 버퍼링을 막아 문자 단위 케이던스를 유지한다.
    return {
        "Cache-Control": "no-cache, no-transform",
        "Connection": "keep-alive",
        "X-Accel-Buffering": "no",
    }


class StreamingMetadata(BaseModel):
    """스트림 응답 확정 시 전송 계층에 넘기는 메타데이터.

    Args:
        media_type: 응답 미디어 타입.
        headers: 캐싱/버퍼링 비활성화 헤더.
        connection_marker: 연결 직후 보내는 비데이터 마커. None이면 생략.
        idle_timeout_seconds: 프레임 대기 최대 시간(초). None이면 무제한.
    """

    model_config = ConfigDict(frozen=True)

    media_type: str = "text/event-stream"
    headers: dict[str, str] = Field(default_factory=_default_stream_headers)
    connection_marker: str | None = "connected"
    idle_timeout_seconds: float | None = Field(default=None, gt=0)


class StreamTransport(ABC):
    """세션이 이벤트를 밀어 넣는 영속 연결 추상화.

    close 이후의 push는 StreamTransportError로 깔끔하게 실패해야 한다.
    """

    @property
    @abstractmethod
    def closed(self) -> bool:
        """전송이 닫혔는지 반환한다."""

    @abstractmethod
    def open(self, metadata: StreamingMetadata) -> None:
        """버퍼링 없는 영속 푸시 응답으로 확정한다."""

    @abstractmethod
    def push(self, event: StreamEvent) -> None:
        """이벤트 1건을 즉시 전송한다."""

    @abstractmethod
    def close(self) -> None:
        """스트림을 종료한다. 멱등이어야 한다."""

    @abstractmethod
    def on_client_closed(self, callback: Callable[[], Any]) -> None:
        """원격 피어가 연결을 끊었을 때 호출될 콜백을 등록한다."""

    @abstractmethod
    def on_error(self, callback: Callable[[BaseException], Any]) -> None:
        """전송 계층 오류 시 호출될 콜백을 등록한다."""
