from fastapi import APIRouter
import logging

from learning_roadmap.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "model": settings.gemini_model,
        "gemini_configured": bool(settings.gemini_api_key),
    }
