"""
목적: 스트림 테스트용 가짜 케이던스 시계와 기록용 전송을 제공한다.
설명: 실제 시간 대신 테스트가 틱을 직접 발생시키고, 전송에 밀어 넣은 이벤트를 그대로 기록한다.
디자인 패턴: 테스트 더블(Fake)
참조: src/typewriter_stream/shared/runtime/cadence/model.py, src/typewriter_stream/shared/runtime/transport/model.py
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from typewriter_stream.shared.exceptions import ErrorCode
from typewriter_stream.shared.runtime import (
    CadenceHandle,
    CadenceScheduler,
    StreamEvent,
    StreamTransport,
    StreamTransportError,
    StreamingMetadata,
)


class ManualCadenceHandle(CadenceHandle):
    """테스트가 직접 틱을 발생시키는 케이던스 핸들."""

    def __init__(self, interval_seconds: float, callback: Callable[[], None], owner: "ManualCadenceScheduler") -> None:
        self.interval_seconds = interval_seconds
        self.callback = callback
        self._owner = owner
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def fire(self) -> None:
        if self._active:
            self.callback()


class ManualCadenceScheduler(CadenceScheduler):
    """가짜 시계 역할을 하는 수동 스케줄러."""

    def __init__(self) -> None:
        self.handles: list[ManualCadenceHandle] = []

    @property
    def active_count(self) -> int:
        return sum(1 for handle in self.handles if handle.active)

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> CadenceHandle:
        handle = ManualCadenceHandle(interval_seconds, callback, self)
        self.handles.append(handle)
        return handle

    def tick(self, times: int = 1) -> None:
        """무장된 모든 트리거를 times번 발생시킨다."""

        for _ in range(times):
            for handle in list(self.handles):
                handle.fire()

    def run_until_idle(self, max_ticks: int = 100_000) -> int:
        """무장된 트리거가 없어질 때까지 틱을 발생시키고 틱 수를 반환한다."""

        ticks = 0
        while self.active_count and ticks < max_ticks:
            self.tick()
            ticks += 1
        return ticks


class RecordingTransport(StreamTransport):
    """push된 이벤트를 기록하는 테스트 전송.

    Args:
        reject_after: 이 개수만큼 push가 성공한 뒤의 push는 백프레셔 오류로 거절한다.
    """

    def __init__(self, reject_after: int | None = None) -> None:
        self.events: list[StreamEvent] = []
        self.metadata: StreamingMetadata | None = None
        self.close_calls = 0
        self.rejected_pushes = 0
        self._reject_after = reject_after
        self._closed = False
        self._client_closed_callbacks: list[Callable[[], Any]] = []
        self._error_callbacks: list[Callable[[BaseException], Any]] = []

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self, metadata: StreamingMetadata) -> None:
        self.metadata = metadata

    def push(self, event: StreamEvent) -> None:
        if self._closed:
            self.rejected_pushes += 1
            raise StreamTransportError.from_code("closed", ErrorCode.TRANSPORT_CLOSED)
        if self._reject_after is not None and len(self.events) >= self._reject_after:
            self.rejected_pushes += 1
            raise StreamTransportError.from_code("full", ErrorCode.TRANSPORT_BACKPRESSURE)
        self.events.append(event)

    def close(self) -> None:
        self.close_calls += 1
        self._closed = True

    def on_client_closed(self, callback: Callable[[], Any]) -> None:
        self._client_closed_callbacks.append(callback)

    def on_error(self, callback: Callable[[BaseException], Any]) -> None:
        self._error_callbacks.append(callback)

    def simulate_client_closed(self) -> None:
        if self._closed:
            return
        self._closed = True
        for callback in list(self._client_closed_callbacks):
            callback()

    def simulate_error(self, error: BaseException) -> None:
        if self._closed:
            return
        self._closed = True
        for callback in list(self._error_callbacks):
            callback(error)

    @property
    def chunks(self) -> list[str]:
        return [event.chunk for event in self.events if not event.done]

    @property
    def done_events(self) -> list[StreamEvent]:
        return [event for event in self.events if event.done]




class BrokenPipeTransport(RecordingTransport):
    """after 개수만큼 push가 성공한 뒤 소켓 오류를 던지는 전송."""

    def __init__(self, after: int = 0) -> None:
        super().__init__()
        self._after = after

    def push(self, event: StreamEvent) -> None:
        if not self.closed and len(self.events) >= self._after:
            self.rejected_pushes += 1
            raise BrokenPipeError(32, "Broken pipe")
        super().push(event)
