"""
목적: 스트림 1건의 수명주기를 소유하는 세션 상태 머신을 제공한다.
설명: 케이던스 트리거마다 렌더링된 응답의 문자 1개를 전송하고, 끝에 도달하면 done 이벤트 1건을 보낸다.
    완료/클라이언트 종료/오류 어느 경로든 종료 전이 시점에 트리거를 동기적으로 해제하고 전송을 닫는다.
    status가 유일한 판단 기준이며, 종료 상태에서 들어온 틱은 아무것도 쓰지 않는다.
디자인 패턴: 상태 머신
참조: src/typewriter_stream/shared/runtime/cadence/model.py, src/typewriter_stream/shared/runtime/transport/model.py
"""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

from typewriter_stream.core.stream.session.status import StreamStatus
from typewriter_stream.shared.exceptions import BaseAppException, ErrorCode
from typewriter_stream.shared.logging import LogContext, Logger, create_default_logger
from typewriter_stream.shared.runtime.cadence import CadenceHandle, CadenceScheduler
from typewriter_stream.shared.runtime.transport import (
    ChunkEvent,
    DoneEvent,
    StreamTransport,
    StreamTransportError,
)


class StreamSession:
    """문자 단위 스트림 세션.

    Args:
        rendered: 송출할 최종 응답 문자열.
        transport: 이벤트를 밀어 넣을 전송(비소유 핸들).
        scheduler: 케이던스 트리거 스케줄러.
        cadence_seconds: 문자 1개당 송출 간격(초).
        logger: 주입 가능한 로거.
        session_id: 세션 식별자. 없으면 생성한다.
        on_finished: 종료 전이 직후 호출되는 콜백(레지스트리 해제 등).
    """

    def __init__(
        self,
        rendered: str,
        transport: StreamTransport,
        scheduler: CadenceScheduler,
        cadence_seconds: float,
        logger: Logger | None = None,
        session_id: str | None = None,
        on_finished: Callable[["StreamSession"], None] | None = None,
    ) -> None:
        if cadence_seconds <= 0:
            raise ValueError("cadence_seconds는 0보다 커야 합니다.")
        self._session_id = session_id or uuid4().hex
        self._rendered = rendered
        self._transport = transport
        self._scheduler = scheduler
        self._cadence_seconds = cadence_seconds
        base_logger = logger or create_default_logger("StreamSession")
        self._logger = base_logger.with_context(LogContext(session_id=self._session_id))
        self._on_finished = on_finished
        self._status = StreamStatus.ACTIVE
        self._cursor = 0
        self._cadence: CadenceHandle | None = None
        self._error: BaseException | None = None

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def status(self) -> StreamStatus:
        return self._status

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def total_chars(self) -> int:
        return len(self._rendered)

    @property
    def rendered(self) -> str:
        return self._rendered

    @property
    def error(self) -> BaseException | None:
        """FAILED로 끝난 경우 원인 예외를 반환한다."""

        return self._error

    @property
    def cadence_armed(self) -> bool:
        return self._cadence is not None

    def start(self) -> None:
        """케이던스 트리거를 정확히 1개 무장한다."""

        if self._cadence is not None or self._status is not StreamStatus.ACTIVE:
            raise BaseAppException.from_code(
                "이미 시작되었거나 종료된 세션입니다.",
                ErrorCode.SESSION_ALREADY_STARTED,
                cause=f"status={self._status.value}",
                session_id=self._session_id,
            )
        self._cadence = self._scheduler.schedule_repeating(self._cadence_seconds, self._tick)
        self._logger.info(
            f"stream.session.start: total_chars={self.total_chars}, cadence_ms={self._cadence_seconds * 1000:g}"
        )

    def cancel(self) -> bool:
        """클라이언트 종료로 세션을 취소한다. 이미 종료 상태면 False를 반환한다."""

        return self._finish(StreamStatus.CANCELLED)

    def fail(self, error: BaseException) -> bool:
        """전송 오류로 세션을 실패 처리한다. 이미 종료 상태면 False를 반환한다."""

        return self._finish(StreamStatus.FAILED, error=error)

    def _tick(self) -> None:
        if self._status is not StreamStatus.ACTIVE:
            return
        if self._cursor < len(self._rendered):
            event = ChunkEvent(chunk=self._rendered[self._cursor])
            if self._emit(event):
                self._cursor += 1
            return
        if self._emit(DoneEvent(total_chars=len(self._rendered))):
            self._finish(StreamStatus.COMPLETED)

    def _emit(self, event: ChunkEvent | DoneEvent) -> bool:
        try:
            self._transport.push(event)
        except StreamTransportError as error:
            self._finish(StreamStatus.FAILED, error=error)
            return False
        except Exception as error:
            # 소켓 오류처럼 도메인 밖의 쓰기 실패도 같은 실패 경로로 정리한다.
            self._finish(
                StreamStatus.FAILED,
                error=StreamTransportError.from_code(
                    "전송 쓰기에 실패했습니다.",
                    ErrorCode.TRANSPORT_WRITE_FAILED,
                    cause=repr(error),
                    original=error,
                    session_id=self._session_id,
                ),
            )
            return False
        return True

    def _finish(self, status: StreamStatus, error: BaseException | None = None) -> bool:
        if self._status is not StreamStatus.ACTIVE:
            return False
        self._status = status
        self._error = error
        if self._cadence is not None:
            self._cadence.cancel()
            self._cadence = None
        self._transport.close()
        self._log_finish()
        if self._on_finished is not None:
            self._on_finished(self)
        return True

    def _log_finish(self) -> None:
        progress = {"cursor": self._cursor, "total_chars": self.total_chars}
        if self._status is StreamStatus.COMPLETED:
            self._logger.info("stream.session.completed", metadata=progress)
            return
        if self._status is StreamStatus.CANCELLED:
            # 클라이언트가 먼저 떠난 것은 오류가 아니다.
            self._logger.info("stream.session.cancelled", metadata=progress)
            return
        if isinstance(self._error, BaseAppException):
            reason = self._error.describe()
        else:
            reason = repr(self._error)
        self._logger.error(f"stream.session.failed: {reason}", metadata=progress)
