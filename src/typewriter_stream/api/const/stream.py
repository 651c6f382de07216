"""
목적: API 라우팅 상수를 정의한다.
설명: 스트림/시뮬레이트/헬스/UI 경로와 태그를 한곳에 모은다.
디자인 패턴: 상수 객체 패턴
참조: src/typewriter_stream/api/stream/routers/router.py, src/typewriter_stream/api/main.py
"""

STREAM_API_PREFIX = "/api"
STREAM_API_TAG = "stream"
STREAM_API_PATH = "/stream"
SIMULATE_PATH = "/simulate"
HEALTH_PATH = "/health"
ROOT_PATH = "/"
UI_MOUNT_PATH = "/ui"
