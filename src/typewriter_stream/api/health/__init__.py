"""
목적: 헬스체크 API 패키지를 정의한다.
설명: 서비스 생존 확인 라우터를 담는다.
디자인 패턴: 패키지 구성
참조: src/typewriter_stream/api/health/routers/server.py
"""
