"""
목적: 스트림 API 런타임 조립 인스턴스를 제공한다.
설명: 불변 설정으로 선택기/스케줄러/레지스트리/핸들러를 한 번 조립해 앱 상태에 보관하고,
    라우터가 FastAPI Depends로 꺼내 쓰게 한다. 전역 가변 상태는 두지 않는다.
디자인 패턴: 모듈 조립 + 의존성 주입
참조: src/typewriter_stream/api/main.py, src/typewriter_stream/api/stream/services/stream_service.py
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from typewriter_stream.api.stream.services.stream_service import PromptStreamService
from typewriter_stream.core.stream import ResponseSelector, StreamSessionRegistry, StreamSettings
from typewriter_stream.shared.logging import Logger, create_console_logger
from typewriter_stream.shared.runtime import AsyncioCadenceScheduler


@dataclass(frozen=True)
class StreamRuntime:
    """앱 1개가 소유하는 스트림 런타임 구성 요소 묶음."""

    settings: StreamSettings
    selector: ResponseSelector
    scheduler: AsyncioCadenceScheduler
    registry: StreamSessionRegistry
    service: PromptStreamService
    request_logger: Logger


def build_stream_runtime(
    settings: StreamSettings,
    logger_factory=create_console_logger,
) -> StreamRuntime:
    """설정으로 런타임 구성 요소를 조립한다.

    Args:
        settings: 불변 스트림 설정.
        logger_factory: 이름을 받아 Logger를 돌려주는 함수. 테스트에서는 인메모리 로거를 주입한다.
    """

    # 1) 로깅
    service_logger: Logger = logger_factory("typewriter_stream.service")
    session_logger: Logger = logger_factory("typewriter_stream.session")
    request_logger: Logger = logger_factory("typewriter_stream.request")

    # 2) 코어 구성 요소. 응답 테이블은 읽기 전용이라 세션 간에 공유한다.
    selector = ResponseSelector(settings.responses)
    scheduler = AsyncioCadenceScheduler(logger=logger_factory("typewriter_stream.cadence"))
    registry = StreamSessionRegistry(logger=service_logger)

    # 3) 요청 핸들러
    service = PromptStreamService(
        settings=settings,
        selector=selector,
        scheduler=scheduler,
        registry=registry,
        logger=service_logger,
        session_logger=session_logger,
    )
    return StreamRuntime(
        settings=settings,
        selector=selector,
        scheduler=scheduler,
        registry=registry,
        service=service,
        request_logger=request_logger,
    )


def shutdown_stream_runtime(runtime: StreamRuntime) -> None:
    """앱 종료 시 남은 세션을 취소하고 무장된 트리거를 모두 해제한다."""

    runtime.registry.cancel_all()
    runtime.scheduler.cancel_all()


def get_stream_runtime(request: Request) -> StreamRuntime:
    """FastAPI Depends 경유로 앱에 묶인 런타임을 반환한다."""

    return request.app.state.stream_runtime


def get_prompt_stream_service(request: Request) -> PromptStreamService:
    """FastAPI Depends 경유로 요청 핸들러를 반환한다."""

    return get_stream_runtime(request).service
