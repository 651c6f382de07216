"""
목적: 활성 스트림 세션 레지스트리를 제공한다.
설명: 진행 중인 세션을 추적해 헬스체크에 개수를 노출하고, 앱 종료 시 남은 세션을 모두 취소한다.
디자인 패턴: 레지스트리
참조: src/typewriter_stream/core/stream/session/stream_session.py, src/typewriter_stream/api/main.py
"""

from __future__ import annotations

import threading

from typewriter_stream.core.stream.session.stream_session import StreamSession
from typewriter_stream.shared.logging import Logger, create_default_logger


class StreamSessionRegistry:
    """활성 세션 레지스트리."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or create_default_logger("StreamSessionRegistry")
        self._lock = threading.RLock()
        self._sessions: dict[str, StreamSession] = {}

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def register(self, session: StreamSession) -> None:
        """종료되지 않은 세션만 등록한다."""

        if session.status.is_terminal:
            return
        with self._lock:
            self._sessions[session.session_id] = session

    def release(self, session: StreamSession) -> None:
        with self._lock:
            self._sessions.pop(session.session_id, None)

    def get(self, session_id: str) -> StreamSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def cancel_all(self) -> int:
        """남아 있는 세션을 모두 취소하고 취소한 개수를 반환한다."""

        with self._lock:
            sessions = list(self._sessions.values())
        cancelled = sum(1 for session in sessions if session.cancel())
        with self._lock:
            self._sessions.clear()
        if cancelled:
            self._logger.info(f"stream.registry.shutdown: cancelled={cancelled}")
        return cancelled
