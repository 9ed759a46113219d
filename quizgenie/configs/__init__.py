"""
QuizGenie configuration.

Usage:
    from quizgenie.configs import get_settings
    chunk_size = get_settings().pipeline.chunk_size
"""

from quizgenie.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
