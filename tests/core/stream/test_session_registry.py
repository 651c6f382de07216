"""
목적: 활성 세션 레지스트리 동작을 검증한다.
설명: 등록/해제 추적과 종료 시 일괄 취소 후 무장 트리거가 0개가 되는지 확인한다.
디자인 패턴: 레지스트리 단위 테스트
참조: src/typewriter_stream/core/stream/session/registry.py
"""

from __future__ import annotations

from tests._stream_test_support import ManualCadenceScheduler, RecordingTransport
from typewriter_stream.core.stream import StreamSession, StreamSessionRegistry, StreamStatus
from typewriter_stream.shared.logging import create_default_logger


def _session(registry: StreamSessionRegistry, scheduler: ManualCadenceScheduler, rendered: str) -> StreamSession:
    session = StreamSession(
        rendered=rendered,
        transport=RecordingTransport(),
        scheduler=scheduler,
        cadence_seconds=0.01,
        on_finished=registry.release,
    )
    session.start()
    registry.register(session)
    return session


def test_finished_sessions_are_released() -> None:
    """완료된 세션은 레지스트리에서 빠지는지 확인한다."""

    scheduler = ManualCadenceScheduler()
    registry = StreamSessionRegistry()
    short = _session(registry, scheduler, "ab")
    long = _session(registry, scheduler, "abcdefgh")

    assert registry.active_count == 2
    scheduler.tick(3)

    assert short.status is StreamStatus.COMPLETED
    assert registry.get(short.session_id) is None
    assert registry.get(long.session_id) is long
    assert registry.active_count == 1


def test_cancel_all_leaves_no_armed_trigger() -> None:
    """cancel_all이 남은 세션을 모두 취소하고 트리거를 0개로 만드는지 확인한다."""

    scheduler = ManualCadenceScheduler()
    logger = create_default_logger("registry-test")
    registry = StreamSessionRegistry(logger=logger)
    sessions = [_session(registry, scheduler, "x" * 50) for _ in range(3)]
    scheduler.tick(2)

    assert registry.cancel_all() == 3

    assert registry.active_count == 0
    assert scheduler.active_count == 0
    assert all(session.status is StreamStatus.CANCELLED for session in sessions)
    assert [record.message for record in logger.repository.list()] == ["stream.registry.shutdown: cancelled=3"]


def test_terminal_session_is_not_registered() -> None:
    """이미 종료된 세션은 등록하지 않는다."""

    scheduler = ManualCadenceScheduler()
    registry = StreamSessionRegistry()
    session = StreamSession(rendered="a", transport=RecordingTransport(), scheduler=scheduler, cadence_seconds=0.01)
    session.cancel()

    registry.register(session)

    assert registry.active_count == 0
