"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite session factory, seeded buckets/documents/quizzes,
fake AI collaborators, temp storage
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quizgenie.boundary.db.base import Base
from quizgenie.boundary.db.models import AnswerModel, BucketModel, QuestionModel, QuizStatus
from quizgenie.boundary.db.models.chunk_model import EMBEDDING_DIMENSION
from quizgenie.boundary.storage.local_storage import LocalFileStorage
from quizgenie.configs.storage import StorageSettings

from factories import add_quiz, make_generated_quiz


@pytest.fixture
async def session_factory():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        async_sessionmaker: Factory bound to a fresh schema
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_async_db(session_factory):
    """
    Provide a session on the test database.

    Yields:
        AsyncSession: Test database session, rolled back afterwards
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def bucket(session_factory) -> BucketModel:
    """Persist a bucket owned by user 1."""
    async with session_factory() as session:
        row = BucketModel(user_id=1, name="Untitled bucket")
        session.add(row)
        await session.commit()
        return row


@pytest.fixture
def storage(tmp_path) -> LocalFileStorage:
    """Provide file storage rooted in a temp directory."""
    return LocalFileStorage(StorageSettings(base_path=str(tmp_path)))


@pytest.fixture
def embedding_vector() -> list[float]:
    """Provide a vector of the configured embedding dimension."""
    return [0.25] * EMBEDDING_DIMENSION


@pytest.fixture
def mock_embedder(embedding_vector) -> MagicMock:
    """Provide an embedding client whose embed() always succeeds."""
    embedder = MagicMock()
    embedder.embed = AsyncMock(return_value=embedding_vector)
    return embedder


@pytest.fixture
def mock_generator() -> MagicMock:
    """Provide a generation client returning a fixed name and quiz."""
    generator = MagicMock()
    generator.generate_name = AsyncMock(return_value="Cell Biology Notes")
    generator.generate_quiz = AsyncMock(return_value=make_generated_quiz(2))
    return generator


@pytest.fixture
async def ready_quiz(session_factory, bucket) -> dict:
    """
    Persist a ready quiz with three questions of two answers each.

    Returns:
        dict: quiz_id plus per-question ids:
            [{"question_id", "correct_id", "wrong_id"}, ...]
    """
    quiz_id = await add_quiz(session_factory, bucket.id, status=QuizStatus.READY, question_count=3)
    questions = []
    async with session_factory() as session:
        for number in range(3):
            question = QuestionModel(
                quiz_id=quiz_id,
                text=f"Question {number}?",
                explanation=f"Because {number}",
            )
            session.add(question)
            await session.flush()
            correct = AnswerModel(question_id=question.id, text=f"Right {number}", is_correct=True)
            wrong = AnswerModel(question_id=question.id, text=f"Wrong {number}", is_correct=False)
            session.add_all([correct, wrong])
            await session.flush()
            questions.append(
                {"question_id": question.id, "correct_id": correct.id, "wrong_id": wrong.id}
            )
        await session.commit()
    return {"quiz_id": quiz_id, "bucket_id": bucket.id, "questions": questions}
