"""
App 레이어: 읽기 전용 HTTP API (FastAPI).

역할:
- 템플릿 스토어의 list()/get()을 호스트 플랫폼에 노출
- 렌더된 문서 + 미리 채운 이슈 payload 제공
- 쓰기 엔드포인트 없음 (메인테이너가 문서 직접 편집)
"""
