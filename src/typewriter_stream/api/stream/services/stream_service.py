"""
목적: 프롬프트 스트림 요청 핸들러를 제공한다.
설명: 요청을 검증하고 응답을 렌더링한 뒤 전송을 열고 세션을 만들어 시작하고 곧바로 응답을 반환한다.
    이후 송출은 이벤트 루프의 케이던스 트리거가 비동기로 진행한다.
디자인 패턴: 서비스 레이어
참조: src/typewriter_stream/core/stream/session/stream_session.py, src/typewriter_stream/shared/runtime/transport/sse_transport.py
"""

from __future__ import annotations

import json
from collections.abc import Callable

from fastapi.responses import StreamingResponse

from typewriter_stream.api.stream.models import SimulateRequest, SimulateResponse, StreamPromptRequest
from typewriter_stream.core.stream import (
    ResponseSelector,
    StreamSession,
    StreamSessionRegistry,
    StreamSettings,
)
from typewriter_stream.shared.exceptions import BaseAppException, ErrorCode
from typewriter_stream.shared.logging import Logger, create_default_logger
from typewriter_stream.shared.runtime import CadenceScheduler, SSEQueueTransport, StreamingMetadata


class PromptStreamService:
    """프롬프트 스트림 요청 핸들러.

    Args:
        settings: 불변 스트림 설정.
        selector: 응답 선택기.
        scheduler: 케이던스 스케줄러.
        registry: 활성 세션 레지스트리.
        logger: 서비스 로거.
        session_logger: 세션 로거.
        transport_factory: 요청마다 새 SSE 전송을 만드는 팩토리.
    """

    def __init__(
        self,
        settings: StreamSettings,
        selector: ResponseSelector,
        scheduler: CadenceScheduler,
        registry: StreamSessionRegistry,
        logger: Logger | None = None,
        session_logger: Logger | None = None,
        transport_factory: Callable[[], SSEQueueTransport] | None = None,
    ) -> None:
        self._settings = settings
        self._selector = selector
        self._scheduler = scheduler
        self._registry = registry
        self._logger = logger or create_default_logger("PromptStreamService")
        self._session_logger = session_logger or create_default_logger("StreamSession")
        self._transport_factory = transport_factory or self._default_transport

    @property
    def registry(self) -> StreamSessionRegistry:
        return self._registry

    def open_stream(self, request: StreamPromptRequest) -> StreamingResponse:
        """검증 후 스트림을 시작하고 스트리밍 응답을 반환한다.

        Raises:
            BaseAppException: 프롬프트가 비어 있거나(STREAM_PROMPT_EMPTY),
                스트림 시작 전 예기치 못한 오류가 난 경우(STREAM_OPEN_FAILED).
        """

        prompt = self._validate_prompt(request.prompt)
        session: StreamSession | None = None
        try:
            rendered = self._selector.render(prompt)
            transport = self._transport_factory()
            transport.open(self._build_metadata())
            session = StreamSession(
                rendered=rendered,
                transport=transport,
                scheduler=self._scheduler,
                cadence_seconds=self._settings.cadence_seconds,
                logger=self._session_logger,
                on_finished=self._registry.release,
            )
            transport.on_client_closed(session.cancel)
            transport.on_error(session.fail)
            session.start()
            self._registry.register(session)
            response = transport.to_response()
        except Exception as error:
            if session is not None:
                session.fail(error)
            if isinstance(error, BaseAppException):
                raise
            self._logger.error(f"stream.open.error: {error!r}")
            raise BaseAppException.from_code(
                "스트림을 시작하지 못했습니다.",
                ErrorCode.OPEN_FAILED,
                cause=str(error),
                original=error,
            ) from error
        self._logger.info(
            f"stream.open: session_id={session.session_id}, total_chars={session.total_chars}"
        )
        return response

    def simulate(self, request: SimulateRequest) -> SimulateResponse:
        """받은 데이터를 가공 메시지로 감싸 즉시 반환한다."""

        data = request.data
        rendered = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
        self._logger.info(f"simulate.received: data={rendered}")
        return SimulateResponse(message=f"Processed data: {rendered}")

    def _validate_prompt(self, prompt: str | None) -> str:
        if prompt is None or not prompt.strip():
            raise BaseAppException.from_code(
                "프롬프트가 비어 있습니다.",
                ErrorCode.PROMPT_EMPTY,
                cause="prompt is missing" if prompt is None else "prompt is blank",
                hint="요청 본문에 {\"prompt\": \"...\"} 형태로 1자 이상의 문자열을 보내세요.",
            )
        return prompt

    def _build_metadata(self) -> StreamingMetadata:
        return StreamingMetadata(idle_timeout_seconds=self._settings.idle_timeout_seconds)

    def _default_transport(self) -> SSEQueueTransport:
        return SSEQueueTransport(
            max_buffered_events=self._settings.max_buffered_events,
            logger=self._logger,
        )
