"""
App layer: 웹 서버 (FastAPI + HTMX).

역할:
- 이름 입력 화면, 결과 렌더링
- POST /api/coffee: Bedrock 호출 → 정규화된 추천 JSON

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (HTMX)
- src/client/ → API를 호출하는 클라이언트 (상태 머신)
"""
