"""
목적: FastAPI 앱을 구성하기 위한 엔트리 포인트 제공
설명: 헬스체크/루트/스트림 API와 정적 UI, CORS 허용 목록, 요청 로깅을 포함한 실행 엔트리이다.
디자인 패턴: 애플리케이션 팩토리
참조: src/typewriter_stream/static, src/typewriter_stream/api/stream/services/runtime.py
"""
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from typewriter_stream import __version__
from typewriter_stream.shared.config import RuntimeEnvironmentLoader
from typewriter_stream.shared.logging import configure_console_logging

BASE_DIR = Path(__file__).resolve().parents[1]
STATIC_DIR = BASE_DIR / "static"

# 런타임 환경(local/dev/stg/prod)을 판별해 환경 파일을 로드한다.
RUNTIME_ENV = RuntimeEnvironmentLoader().load()
configure_console_logging(os.getenv("LOG_LEVEL", "INFO"))

# NOTE:
# .env 로딩 이후에 설정/런타임을 import해야 STREAM__* 환경 변수가 반영된다.
from typewriter_stream.api.const import (  # noqa: E402
    HEALTH_PATH,
    ROOT_PATH,
    SIMULATE_PATH,
    STREAM_API_PATH,
    STREAM_API_PREFIX,
    UI_MOUNT_PATH,
)
from typewriter_stream.api.health.routers import router as health_router  # noqa: E402
from typewriter_stream.api.middleware import RequestLoggingMiddleware  # noqa: E402
from typewriter_stream.api.stream.models import ServiceInfoResponse  # noqa: E402
from typewriter_stream.api.stream.routers import router as stream_router  # noqa: E402
from typewriter_stream.api.stream.services import (  # noqa: E402
    StreamRuntime,
    build_stream_runtime,
    shutdown_stream_runtime,
)
from typewriter_stream.core.stream import StreamSettings  # noqa: E402


def create_app(
    settings: StreamSettings | None = None,
    runtime: StreamRuntime | None = None,
) -> FastAPI:
    """설정(또는 조립된 런타임)으로 FastAPI 앱을 만든다."""

    if runtime is None:
        runtime = build_stream_runtime(settings or StreamSettings.load())
    settings = runtime.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """앱 종료 시 남은 스트림 세션을 정리한다."""
        try:
            yield
        finally:
            shutdown_stream_runtime(runtime)

    app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
    app.state.stream_runtime = runtime
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(RequestLoggingMiddleware, logger=runtime.request_logger)
    app.mount(UI_MOUNT_PATH, StaticFiles(directory=str(STATIC_DIR), html=True), name="ui")
    app.include_router(health_router)
    app.include_router(stream_router)

    @app.get(ROOT_PATH, response_model=ServiceInfoResponse, include_in_schema=False)
    def service_info() -> ServiceInfoResponse:
        """서비스 정보와 주요 엔드포인트를 반환한다."""
        return ServiceInfoResponse(
            name=settings.app_name,
            version=__version__,
            endpoints={
                "stream": f"POST {STREAM_API_PREFIX}{STREAM_API_PATH}",
                "simulate": f"POST {SIMULATE_PATH}",
                "health": f"GET {HEALTH_PATH}",
                "ui": f"GET {UI_MOUNT_PATH}/",
            },
        )

    return app


app = create_app()
