"""
목적: 로깅 모듈 공개 API를 제공한다.
설명: 로거 구현, 저장소, 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/shared/logging/logger.py, src/typewriter_stream/shared/logging/models.py
"""

from typewriter_stream.shared.logging.console_repository import (
    ConsoleLogRepository,
    configure_console_logging,
    create_console_logger,
)
from typewriter_stream.shared.logging.logger import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogRepository,
    Logger,
    create_default_logger,
)
from typewriter_stream.shared.logging.models import LogContext, LogLevel, LogRecord

__all__ = [
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogger",
    "InMemoryLogRepository",
    "ConsoleLogRepository",
    "create_default_logger",
    "create_console_logger",
    "configure_console_logging",
]
