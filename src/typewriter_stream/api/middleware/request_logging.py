"""
목적: 구조화 요청 로깅 미들웨어를 제공한다.
설명: 순수 ASGI 미들웨어로 응답 시작 시점의 상태 코드와 소요 시간을 기록한다.
    스트리밍 응답의 본문/연결 끊김 전달을 가로채지 않는다.
디자인 패턴: 데코레이터(미들웨어)
참조: src/typewriter_stream/api/main.py, src/typewriter_stream/shared/logging/logger.py
"""

from __future__ import annotations

import time
from uuid import uuid4

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from typewriter_stream.shared.logging import LogContext, LogLevel, Logger


class RequestLoggingMiddleware:
    """HTTP 요청 1건당 로그 1건을 남기는 ASGI 미들웨어."""

    def __init__(self, app: ASGIApp, logger: Logger) -> None:
        self._app = app
        self._logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        started_at = time.monotonic()
        client = scope.get("client")
        context = LogContext(
            request_id=uuid4().hex,
            client=f"{client[0]}:{client[1]}" if client else None,
        )

        async def send_with_logging(message: Message) -> None:
            if message["type"] == "http.response.start":
                status_code = int(message["status"])
                level = LogLevel.ERROR if status_code >= 500 else LogLevel.INFO
                self._logger.log(
                    level,
                    f"http.request: {scope['method']} {scope['path']} -> {status_code}",
                    context=context,
                    metadata={"elapsed_ms": int((time.monotonic() - started_at) * 1000)},
                )
            await send(message)

        await self._app(scope, receive, send_with_logging)
