"""
AI provider boundary.

Embedding and text-generation clients backed by Google Gemini through LangChain.
"""

from quizgenie.boundary.ai.embedding_client import EmbeddingClient
from quizgenie.boundary.ai.generation_client import GenerationClient
from quizgenie.boundary.ai.quiz_schemas import GeneratedChoice, GeneratedQuestion, GeneratedQuiz

__all__ = [
    "EmbeddingClient",
    "GenerationClient",
    "GeneratedChoice",
    "GeneratedQuestion",
    "GeneratedQuiz",
]
