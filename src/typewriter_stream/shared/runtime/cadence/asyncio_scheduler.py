"""
목적: asyncio 이벤트 루프 기반 케이던스 스케줄러를 제공한다.
설명: loop.call_later를 틱마다 재무장하는 방식으로 반복 트리거를 구현한다.
    콜백과 취소가 모두 같은 루프에서 실행되므로 취소 이후의 틱은 실행되지 않는다.
디자인 패턴: 어댑터 패턴
참조: src/typewriter_stream/shared/runtime/cadence/model.py, src/typewriter_stream/core/stream/session/stream_session.py
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from typewriter_stream.shared.logging import Logger, create_default_logger
from typewriter_stream.shared.runtime.cadence.model import CadenceHandle, CadenceScheduler


class _AsyncioCadenceHandle(CadenceHandle):
    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval_seconds: float,
        callback: Callable[[], None],
        on_release: Callable[["_AsyncioCadenceHandle"], None],
    ) -> None:
        self._loop = loop
        self._interval = interval_seconds
        self._callback = callback
        self._on_release = on_release
        self._timer: asyncio.TimerHandle | None = None
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def arm(self) -> None:
        if self._active:
            self._timer = self._loop.call_later(self._interval, self._fire)

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._on_release(self)

    def _fire(self) -> None:
        self._timer = None
        if not self._active:
            return
        try:
            self._callback()
        except Exception:
            # 콜백이 깨지면 더 이상 재무장하지 않는다. 예외는 루프 예외 핸들러로 전달된다.
            self.cancel()
            raise
        self.arm()


class AsyncioCadenceScheduler(CadenceScheduler):
    """asyncio 기반 케이던스 스케줄러.

    Args:
        loop: 사용할 이벤트 루프. None이면 무장 시점의 실행 중 루프를 사용한다.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._loop = loop
        self._logger = logger or create_default_logger("AsyncioCadenceScheduler")
        self._handles: set[_AsyncioCadenceHandle] = set()

    @property
    def active_count(self) -> int:
        return len(self._handles)

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> CadenceHandle:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds는 0보다 커야 합니다.")
        loop = self._loop or asyncio.get_running_loop()
        handle = _AsyncioCadenceHandle(
            loop=loop,
            interval_seconds=interval_seconds,
            callback=callback,
            on_release=self._release,
        )
        self._handles.add(handle)
        handle.arm()
        self._logger.debug(f"cadence.armed: interval={interval_seconds}, active={self.active_count}")
        return handle

    def cancel_all(self) -> int:
        """무장된 트리거를 모두 해제하고 해제 개수를 반환한다."""

        handles = list(self._handles)
        for handle in handles:
            handle.cancel()
        return len(handles)

    def _release(self, handle: _AsyncioCadenceHandle) -> None:
        self._handles.discard(handle)
        self._logger.debug(f"cadence.released: active={self.active_count}")
