"""
목적: 스트림 E2E 테스트용 서버 픽스처를 제공한다.
설명: pytest 실행 중 uvicorn 서버를 실제 프로세스로 기동/종료하고 HTTP 클라이언트를 제공한다.
디자인 패턴: 테스트 픽스처 패턴
참조: src/typewriter_stream/api/main.py
"""

from __future__ import annotations

import os
import socket
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import httpx
import pytest

# 끊김 이후 자연 종료와 구분되도록 응답 1건이 수 초 걸리는 케이던스를 쓴다.
E2E_CADENCE_MS = 10


@dataclass(frozen=True)
class StreamServerContext:
    """E2E 서버 실행 컨텍스트."""

    base_url: str
    cadence_ms: int


def _find_free_port() -> int:
    """사용 가능한 로컬 포트를 반환한다."""

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])


def _wait_for_server_ready(
    process: subprocess.Popen[str],
    base_url: str,
    timeout_seconds: float = 20.0,
) -> None:
    """서버 헬스체크 응답이 가능할 때까지 대기한다."""

    deadline = time.monotonic() + timeout_seconds
    last_error: Exception | None = None
    while time.monotonic() < deadline:
        if process.poll() is not None:
            stdout, stderr = process.communicate(timeout=1)
            raise RuntimeError(
                "E2E 서버가 초기화 전에 종료되었습니다.\n"
                f"stdout:\n{stdout[-500:]}\n"
                f"stderr:\n{stderr[-500:]}"
            )
        try:
            response = httpx.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == 200:
                return
        except httpx.HTTPError as error:
            last_error = error
        time.sleep(0.2)
    raise RuntimeError(f"E2E 서버 기동 대기 타임아웃: {last_error}")


@pytest.fixture(scope="session")
def stream_server_context() -> Iterator[StreamServerContext]:
    """스트림 API 서버를 실제 프로세스로 띄운 뒤 컨텍스트를 반환한다."""

    root = Path(__file__).resolve().parents[2]
    port = _find_free_port()
    base_url = f"http://127.0.0.1:{port}"

    command = [
        sys.executable,
        "-m",
        "uvicorn",
        "typewriter_stream.api.main:app",
        "--host",
        "127.0.0.1",
        "--port",
        str(port),
    ]
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(root / "src"), env.get("PYTHONPATH")]))
    env["ENV"] = "local"
    env["LOG_LEVEL"] = "WARNING"
    env["STREAM__CADENCE_MS"] = str(E2E_CADENCE_MS)
    env["PYTHONUNBUFFERED"] = "1"

    process = subprocess.Popen(
        command,
        cwd=str(root),
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    try:
        _wait_for_server_ready(process=process, base_url=base_url)
        yield StreamServerContext(base_url=base_url, cadence_ms=E2E_CADENCE_MS)
    finally:
        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=10)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait(timeout=5)
        process.communicate(timeout=1)


@pytest.fixture
def stream_api_client(stream_server_context: StreamServerContext) -> Iterator[httpx.Client]:
    """스트림 API 호출용 HTTP 클라이언트를 반환한다."""

    with httpx.Client(base_url=stream_server_context.base_url, timeout=10.0) as client:
        yield client
