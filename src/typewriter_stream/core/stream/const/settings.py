"""
목적: 스트림 코어의 설정 상수를 정의한다.
설명: 케이던스 기본값, CORS 기본 허용 목록, 응답 봉투 형식, 기본 응답 테이블을 제공한다.
디자인 패턴: 상수 객체 패턴
참조: src/typewriter_stream/core/stream/models/settings.py
"""

from __future__ import annotations

# 문자 1개당 송출 간격(ms)
DEFAULT_CADENCE_MS = 30.0
DEFAULT_APP_NAME = "typewriter-stream"
DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
)

# STREAM__CADENCE_MS, STREAM__ALLOWED_ORIGINS 처럼 읽는다.
SETTINGS_ENV_PREFIX = "STREAM__"
# JSON 설정 파일 경로를 담는 환경 변수 이름
SETTINGS_FILE_ENV = "STREAM_CONFIG_PATH"

# 응답 테이블에서 매칭 대상이 아닌 기본 응답 키
DEFAULT_RESPONSE_KEY = "default"

ECHO_TEMPLATE = 'You asked: "{prompt}"\n\n'
TIMESTAMP_TEMPLATE = "\n\nGenerated at {timestamp}"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"

# 순서가 의미를 가진다. 먼저 나온 키워드가 우선한다.
DEFAULT_RESPONSES: dict[str, str] = {
    "hello": (
        "Hello there! I'm a simulated assistant. Every character you see is sent "
        "one at a time over a server-sent event stream, so it feels like I'm typing "
        "this reply live."
    ),
    "javascript": (
        "JavaScript runs in every browser and, with Node.js, on the server too. Its "
        "event loop makes it a natural fit for streaming UIs: read the response body "
        "with a ReadableStream and append each chunk as it arrives."
    ),
    "python": (
        "Python is a great choice for streaming services. An async framework such as "
        "FastAPI can hand a generator to StreamingResponse and push events to the "
        "client without blocking the event loop."
    ),
    "stream": (
        "Streaming sends a response in small pieces instead of waiting for the whole "
        "thing. Server-sent events keep one HTTP connection open and push text frames "
        "down it, which is how most chat interfaces show tokens as they are generated."
    ),
    "weather": (
        "I can't check a real forecast, since this is a demo without live data. "
        "Imagine clear skies, a light breeze, and a perfect afternoon for a walk."
    ),
    DEFAULT_RESPONSE_KEY: (
        "That's an interesting question. This demo doesn't call a real model, so the "
        "answer is canned, but it is streamed character by character to show what a "
        "live generative response feels like. Try asking about Python, JavaScript, "
        "streaming, or the weather."
    ),
}
