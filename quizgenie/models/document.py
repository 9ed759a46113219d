"""
Document domain schemas.

Dependencies: pydantic
System role: Document read contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from quizgenie.boundary.db.models.document_model import DocumentStatus


class DocumentStatusResponse(BaseModel):
    """Processing status of one document."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    bucket_id: int
    name: str
    status: DocumentStatus
    error_message: str | None = None
    chunk_count: int | None = None
    embedded_chunk_count: int | None = None
    created_at: datetime
    updated_at: datetime
