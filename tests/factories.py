"""
Test data builders.

Builders for generated quiz payloads and helpers that persist rows directly,
bypassing the services under test.
"""

from quizgenie.boundary.ai.quiz_schemas import GeneratedChoice, GeneratedQuestion, GeneratedQuiz
from quizgenie.boundary.db.models import (
    ChunkModel,
    DocumentModel,
    DocumentStatus,
    QuizModel,
    QuizStatus,
)


def make_generated_question(number: int, choices: int = 4) -> GeneratedQuestion:
    """Build a well-formed question whose first choice is correct."""
    return GeneratedQuestion(
        text=f"Question {number}?",
        explanation=f"Explanation {number}",
        choices=[
            GeneratedChoice(
                text=f"Choice {number}.{index}",
                is_correct=index == 0,
                explanation=f"Reason {number}.{index}",
            )
            for index in range(choices)
        ],
    )


def make_generated_quiz(question_count: int, choices: int = 4) -> GeneratedQuiz:
    """Build a well-formed quiz with the given number of questions."""
    return GeneratedQuiz(
        questions=[make_generated_question(n + 1, choices) for n in range(question_count)]
    )


async def add_document(
    session_factory,
    bucket_id: int,
    storage_path: str = "notes.txt",
    status: DocumentStatus = DocumentStatus.PENDING,
    chunks: list[str] | None = None,
    embedding: list[float] | None = None,
) -> int:
    """Persist a document (and optional chunks) and return its ID."""
    async with session_factory() as session:
        document = DocumentModel(
            bucket_id=bucket_id,
            name=storage_path,
            storage_path=storage_path,
            status=status,
        )
        session.add(document)
        await session.flush()
        for index, content in enumerate(chunks or []):
            session.add(
                ChunkModel(
                    document_id=document.id,
                    sequence_index=index,
                    content=content,
                    embedding=embedding,
                )
            )
        await session.commit()
        return document.id


async def add_quiz(
    session_factory,
    bucket_id: int,
    status: QuizStatus = QuizStatus.PENDING,
    question_count: int = 2,
    practice_mode: bool = False,
) -> int:
    """Persist a quiz and return its ID."""
    async with session_factory() as session:
        quiz = QuizModel(
            bucket_id=bucket_id,
            status=status,
            question_count=question_count,
            choice_count=4,
            difficulty="medium",
            practice_mode=practice_mode,
        )
        session.add(quiz)
        await session.commit()
        return quiz.id
