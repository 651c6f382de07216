"""
목적: 테스트 공통 환경/픽스처/로깅 훅을 제공한다.
설명: .env 로딩, 수동 케이던스 시계, 기록용 전송, 인메모리 로거 픽스처와 pytest 로깅 훅을 함께 제공한다.
디자인 패턴: 테스트 픽스처 + 테스트 훅
참조: tests/_stream_test_support.py
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from dotenv import load_dotenv

from tests._stream_test_support import ManualCadenceScheduler, RecordingTransport
from typewriter_stream.shared.logging import InMemoryLogger, create_default_logger

_LOGGER = logging.getLogger("tests")
_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _load_env_files() -> None:
    """프로젝트 루트에 .env가 있으면 로딩한다."""

    env_path = _PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


_load_env_files()


@pytest.fixture
def manual_scheduler() -> ManualCadenceScheduler:
    """수동 케이던스 스케줄러를 반환한다."""

    return ManualCadenceScheduler()


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """기록용 전송을 반환한다."""

    return RecordingTransport()


@pytest.fixture
def memory_logger() -> InMemoryLogger:
    """레코드를 검사할 수 있는 인메모리 로거를 반환한다."""

    return create_default_logger("test")


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
