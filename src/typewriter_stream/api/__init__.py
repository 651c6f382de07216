"""
목적: API 계층 패키지를 정의한다.
설명: FastAPI 앱, 라우터, 서비스, 미들웨어를 담는다.
디자인 패턴: 패키지 구성
참조: src/typewriter_stream/api/main.py
"""
