"""
Bucket CRUD operations.

Dependencies: sqlalchemy, quizgenie.boundary.db.models
System role: Bucket persistence operations
"""

from sqlalchemy.ext.asyncio import AsyncSession

from quizgenie.boundary.db.models.bucket_model import BucketModel
from quizgenie.boundary.db.CRUD.base_crud import BaseCRUD


class BucketCRUD(BaseCRUD[BucketModel]):
    """CRUD operations for BucketModel."""

    def __init__(self) -> None:
        """Initialize BucketCRUD with BucketModel."""
        super().__init__(BucketModel)

    async def rename(
        self,
        session: AsyncSession,
        id: int,
        name: str,
    ) -> BucketModel | None:
        """
        Replace a bucket's display name.

        Args:
            session: Async database session
            id: Bucket ID
            name: New display name (truncated to the 255-character column)

        Returns:
            Updated BucketModel if found, None otherwise
        """
        return await self.update_by_id(session, id, name=name[:255])


bucket_crud = BucketCRUD()
