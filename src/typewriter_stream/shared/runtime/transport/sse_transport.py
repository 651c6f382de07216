"""
목적: asyncio.Queue 기반 SSE 전송 어댑터를 제공한다.
설명: 세션의 push를 SSE 프레임으로 큐에 적재하고, FastAPI StreamingResponse가 이를 소비한다.
    소비 측 종료(태스크 취소, aclose, ASGI 연결 끊김)는 client_closed 콜백으로,
    그 밖의 소비 측 예외와 유휴 타임아웃은 error 콜백으로 1회만 통지한다.
디자인 패턴: 어댑터 패턴
참조: src/typewriter_stream/shared/runtime/transport/model.py, src/typewriter_stream/api/stream/services/stream_service.py
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Callable
from typing import Any
from uuid import uuid4

from fastapi.responses import StreamingResponse
from starlette.requests import ClientDisconnect
from starlette.types import Receive, Scope, Send

from typewriter_stream.shared.exceptions import ErrorCode
from typewriter_stream.shared.logging import Logger, create_default_logger
from typewriter_stream.shared.runtime.transport.model import (
    StreamEvent,
    StreamTransport,
    StreamTransportError,
    StreamingMetadata,
)

_END_OF_STREAM = object()


class SSEQueueTransport(StreamTransport):
    """SSE 프레임 큐 전송 구현체.

    Args:
        max_buffered_events: 미전송 프레임 최대 개수. 0이면 무제한.
        logger: 주입 가능한 로거.
        transport_id: 로그용 식별자.
    """

    def __init__(
        self,
        max_buffered_events: int = 0,
        logger: Logger | None = None,
        transport_id: str | None = None,
    ) -> None:
        self._max_buffered_events = max(0, int(max_buffered_events))
        self._logger = logger or create_default_logger("SSEQueueTransport")
        self._transport_id = transport_id or uuid4().hex
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._metadata: StreamingMetadata | None = None
        self._closed = False
        self._frames_sent = 0
        self._client_closed_callbacks: list[Callable[[], Any]] = []
        self._error_callbacks: list[Callable[[BaseException], Any]] = []

    @property
    def transport_id(self) -> str:
        return self._transport_id

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def metadata(self) -> StreamingMetadata | None:
        return self._metadata

    @property
    def buffered(self) -> int:
        """소비되지 않은 프레임 수를 반환한다."""

        return self._queue.qsize()

    @property
    def frames_sent(self) -> int:
        return self._frames_sent

    def open(self, metadata: StreamingMetadata) -> None:
        if self._metadata is not None:
            raise StreamTransportError.from_code(
                "전송이 이미 열려 있습니다.", ErrorCode.TRANSPORT_ALREADY_OPEN
            )
        if self._closed:
            raise StreamTransportError.from_code("닫힌 전송은 열 수 없습니다.", ErrorCode.TRANSPORT_CLOSED)
        self._metadata = metadata
        if metadata.connection_marker:
            self._queue.put_nowait(f": {metadata.connection_marker}\n\n")

    def push(self, event: StreamEvent) -> None:
        if self._closed:
            raise StreamTransportError.from_code(
                "닫힌 전송에는 쓸 수 없습니다.",
                ErrorCode.TRANSPORT_CLOSED,
                transport_id=self._transport_id,
            )
        if self._metadata is None:
            raise StreamTransportError.from_code("전송이 아직 열리지 않았습니다.", ErrorCode.TRANSPORT_NOT_OPEN)
        if self._max_buffered_events and self._queue.qsize() >= self._max_buffered_events:
            raise StreamTransportError.from_code(
                "전송 버퍼가 가득 찼습니다.",
                ErrorCode.TRANSPORT_BACKPRESSURE,
                cause=f"buffered={self._queue.qsize()}, limit={self._max_buffered_events}",
                transport_id=self._transport_id,
            )
        self._queue.put_nowait(self._build_sse("message", event.to_payload()))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_END_OF_STREAM)

    def on_client_closed(self, callback: Callable[[], Any]) -> None:
        self._client_closed_callbacks.append(callback)

    def on_error(self, callback: Callable[[BaseException], Any]) -> None:
        self._error_callbacks.append(callback)

    def notify_client_closed(self) -> None:
        """소비 측이 먼저 떠났음을 통지한다. 이미 닫혔으면 아무것도 하지 않는다."""

        if self._closed:
            return
        self._closed = True
        self._logger.info(
            f"transport.client_closed: id={self._transport_id}, frames_sent={self._frames_sent}"
        )
        for callback in list(self._client_closed_callbacks):
            callback()

    def notify_error(self, error: BaseException) -> None:
        """전송 계층 오류를 통지한다. 이미 닫혔으면 아무것도 하지 않는다."""

        if self._closed:
            return
        self._closed = True
        self._logger.error(f"transport.error: id={self._transport_id}, error={error!r}")
        for callback in list(self._error_callbacks):
            callback(error)

    async def iter_frames(self) -> AsyncIterator[str]:
        """큐에 적재된 SSE 프레임을 종료 표식까지 순서대로 내보낸다."""

        if self._metadata is None:
            raise StreamTransportError.from_code("전송이 아직 열리지 않았습니다.", ErrorCode.TRANSPORT_NOT_OPEN)
        idle_timeout = self._metadata.idle_timeout_seconds
        try:
            while True:
                try:
                    item = await asyncio.wait_for(self._queue.get(), timeout=idle_timeout)
                except TimeoutError as error:
                    self.notify_error(
                        StreamTransportError.from_code(
                            "스트림 프레임 대기 시간이 초과되었습니다.",
                            ErrorCode.TRANSPORT_IDLE_TIMEOUT,
                            cause=f"idle_timeout={idle_timeout}s",
                            original=error,
                        )
                    )
                    return
                if item is _END_OF_STREAM:
                    return
                self._frames_sent += 1
                yield item
        except Exception as error:
            self.notify_error(error)
            raise
        finally:
            # 취소/aclose로 빠져나온 경우만 여기서 닫힘 처리된다.
            self.notify_client_closed()

    def to_response(self) -> StreamingResponse:
        """전송을 소비하는 FastAPI 스트리밍 응답을 만든다."""

        if self._metadata is None:
            raise StreamTransportError.from_code("전송이 아직 열리지 않았습니다.", ErrorCode.TRANSPORT_NOT_OPEN)
        return _TransportStreamingResponse(
            transport=self,
            content=self.iter_frames(),
            media_type=self._metadata.media_type,
            headers=dict(self._metadata.headers),
        )

    def _build_sse(self, event: str, payload: dict[str, Any]) -> str:
        body = json.dumps(payload, ensure_ascii=True)
        return f"event: {event}\ndata: {body}\n\n"


class _TransportStreamingResponse(StreamingResponse):
    """응답 수명 종료를 전송 계층에 확실히 전달하는 StreamingResponse."""

    def __init__(
        self,
        transport: SSEQueueTransport,
        content: AsyncIterator[str],
        media_type: str,
        headers: dict[str, str],
    ) -> None:
        super().__init__(content, media_type=media_type, headers=headers)
        self._transport = transport

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        except (ClientDisconnect, OSError):
            self._transport.notify_client_closed()
            raise
        except Exception as error:
            self._transport.notify_error(error)
            raise
        finally:
            self._transport.notify_client_closed()
