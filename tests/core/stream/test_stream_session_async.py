"""
목적: 실제 이벤트 루프 위에서 세션과 SSE 전송의 결합 동작을 검증한다.
설명: asyncio 케이던스 스케줄러와 SSE 큐 전송으로 정상 완료와 중간 연결 끊김 시나리오를 확인한다.
디자인 패턴: 통합 테스트
참조: src/typewriter_stream/core/stream/session/stream_session.py, src/typewriter_stream/shared/runtime/transport/sse_transport.py
"""

from __future__ import annotations

import asyncio
import json

import pytest

from tests._stream_test_support import BrokenPipeTransport
from typewriter_stream.core.stream import StreamSession, StreamSessionRegistry, StreamStatus
from typewriter_stream.shared.logging import InMemoryLogger, LogLevel, create_default_logger
from typewriter_stream.shared.runtime import AsyncioCadenceScheduler, SSEQueueTransport, StreamingMetadata


def _payload(frame: str) -> dict:
    for line in frame.splitlines():
        if line.startswith("data: "):
            return json.loads(line[len("data: ") :])
    raise AssertionError(f"SSE payload가 없습니다: {frame!r}")


async def _collect(transport: SSEQueueTransport) -> list[str]:
    return [frame async for frame in transport.iter_frames()]


def _wire(
    rendered: str,
    cadence_seconds: float,
    logger: InMemoryLogger | None = None,
) -> tuple[StreamSession, SSEQueueTransport, AsyncioCadenceScheduler]:
    scheduler = AsyncioCadenceScheduler()
    transport = SSEQueueTransport()
    transport.open(StreamingMetadata())
    session = StreamSession(
        rendered=rendered,
        transport=transport,
        scheduler=scheduler,
        cadence_seconds=cadence_seconds,
        logger=logger or create_default_logger("session-async"),
    )
    transport.on_client_closed(session.cancel)
    transport.on_error(session.fail)
    session.start()
    return session, transport, scheduler


@pytest.mark.asyncio
async def test_stream_runs_to_completion() -> None:
    """마커, 문자별 청크, done 1건 순서로 끝나고 트리거가 남지 않는지 확인한다."""

    rendered = "Hi, stream!"
    session, transport, scheduler = _wire(rendered, 0.001)

    frames = await asyncio.wait_for(_collect(transport), timeout=5.0)

    assert frames[0] == ": connected\n\n"
    payloads = [_payload(frame) for frame in frames[1:]]
    assert "".join(item["chunk"] for item in payloads[:-1]) == rendered
    assert payloads[-1] == {"done": True, "totalChars": len(rendered)}
    assert sum(1 for item in payloads if item["done"]) == 1
    assert session.status is StreamStatus.COMPLETED
    assert scheduler.active_count == 0


@pytest.mark.asyncio
async def test_disconnect_after_five_chunks_stops_writes() -> None:
    """5개 청크를 받은 뒤 연결을 끊으면 이후 쓰기가 없고 트리거가 해제되는지 확인한다."""

    logger = create_default_logger("session-async")
    session, transport, scheduler = _wire("x" * 120, 0.02, logger)
    frames = transport.iter_frames()

    assert await frames.__anext__() == ": connected\n\n"
    for _ in range(5):
        payload = _payload(await asyncio.wait_for(frames.__anext__(), timeout=2.0))
        assert payload == {"chunk": "x", "done": False}
    await frames.aclose()

    assert session.status is StreamStatus.CANCELLED
    assert scheduler.active_count == 0
    cursor_at_close = session.cursor
    await asyncio.sleep(0.1)

    assert cursor_at_close >= 5
    assert session.cursor == cursor_at_close
    assert transport.frames_sent == 6
    assert transport.buffered <= 1
    assert LogLevel.ERROR not in [record.level for record in logger.repository.list()]


@pytest.mark.asyncio
async def test_socket_error_on_event_loop_releases_session() -> None:
    """이벤트 루프 위에서 push가 OSError를 던져도 세션이 FAILED로 정리되는지 확인한다."""

    scheduler = AsyncioCadenceScheduler()
    registry = StreamSessionRegistry()
    transport = BrokenPipeTransport(after=3)
    session = StreamSession(
        rendered="x" * 50,
        transport=transport,
        scheduler=scheduler,
        cadence_seconds=0.001,
        logger=create_default_logger("session-async"),
        on_finished=registry.release,
    )
    session.start()
    registry.register(session)

    await asyncio.sleep(0.05)

    assert session.status is StreamStatus.FAILED
    assert session.cadence_armed is False
    assert transport.closed is True
    assert scheduler.active_count == 0
    assert registry.active_count == 0
