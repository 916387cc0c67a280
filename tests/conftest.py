"""
Pytest configuration and shared fixtures
"""
import pytest
from unittest.mock import AsyncMock
from fastapi import FastAPI
from fastapi.testclient import TestClient


SAMPLE_ROADMAP = """### 1) 로드맵 요약
- **대상**: Backend Developer / Junior
- 총 4 Weeks, 주당 5 Hours

### 2) 단계별/기간별 커리큘럼

#### 1단계. 테스트 자동화 기초 (1주차)
- **목표**: `pytest`로 단위 테스트 작성
- **실습/과제**: CI 파이프라인에 테스트 추가

1. 환경 설정
2. 첫 테스트 작성

실무에 바로 적용할 수 있도록 **작은 서비스**부터 시작하세요."""


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset singleton services before each test"""
    import learning_roadmap.roadmap_service
    import learning_roadmap.services.gemini_service

    monkeypatch.setattr(learning_roadmap.services.gemini_service, "_gemini_service_instance", None)
    monkeypatch.setattr(learning_roadmap.roadmap_service, "_roadmap_service_instance", None)


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Never pick up a real API key from the environment during tests."""
    from learning_roadmap.config import settings

    monkeypatch.setattr(settings, "gemini_api_key", None)
    monkeypatch.setattr(settings, "gemini_temperature", None)


@pytest.fixture
def sample_roadmap():
    return SAMPLE_ROADMAP


@pytest.fixture
def mock_gemini_service():
    """Gemini stand-in returning the sample roadmap"""
    service = AsyncMock()
    service.generate_response_async = AsyncMock(return_value=SAMPLE_ROADMAP)
    return service


@pytest.fixture
def roadmap_service(mock_gemini_service):
    """RoadmapService wired to the mock Gemini service"""
    from learning_roadmap.roadmap_service import RoadmapService

    return RoadmapService(gemini_factory=lambda: mock_gemini_service)


@pytest.fixture
def client(roadmap_service):
    """FastAPI test client with dependency overrides"""
    from learning_roadmap.api.pages import router as pages_router
    from learning_roadmap.api.roadmap import router as roadmap_router
    from learning_roadmap.api.routes import router
    from learning_roadmap.config import settings
    from learning_roadmap.roadmap_service import get_roadmap_service

    test_app = FastAPI(title=settings.app_name, debug=settings.debug)
    test_app.include_router(pages_router)
    test_app.include_router(router, prefix="/api")
    test_app.include_router(roadmap_router, prefix="/api/roadmap", tags=["roadmap"])
    test_app.dependency_overrides[get_roadmap_service] = lambda: roadmap_service

    return TestClient(test_app)
