"""
AI·DX Learning Roadmap
Application package initialization
"""

from learning_roadmap.config import settings, get_settings, Settings

__all__ = ["settings", "get_settings", "Settings"]
