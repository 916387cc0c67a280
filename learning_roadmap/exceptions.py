"""
Exception hierarchy for roadmap generation.
Routers translate these into HTTP responses or re-rendered pages.
"""

# User-facing notification shown when a generation request fails
GENERATION_FAILED_MESSAGE = "로드맵 생성 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요."
MISSING_API_KEY_MESSAGE = "API Key is missing. Please set it in the environment."
MISSING_ROLE_MESSAGE = "직무(Role)를 입력해주세요."
IN_PROGRESS_MESSAGE = "AI가 커리큘럼을 설계하고 있습니다. 잠시만 기다려주세요."


# ============================================
# Exception Hierarchy
# ============================================


class RoadmapError(Exception):
    """Base exception for roadmap generation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(RoadmapError):
    """Required configuration (the Gemini API key) is missing."""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(message)


class GenerationError(RoadmapError):
    """Network or service failure while calling the model."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)


class GenerationInProgressError(RoadmapError):
    """A generation request is already in flight."""

    def __init__(self, message: str = IN_PROGRESS_MESSAGE):
        super().__init__(message)


class RoadmapInputError(RoadmapError):
    """Form input is not sufficient to start a generation."""

    def __init__(self, message: str = MISSING_ROLE_MESSAGE):
        super().__init__(message)
