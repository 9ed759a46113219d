"""
Text extraction task.

Reads a stored document into one text string. PDFs are parsed page by page
with LangChain's PyPDFLoader and the pages joined with blank lines; every
other file is read as UTF-8 text.

Dependencies: langchain_community.document_loaders (pypdf)
System role: First stage of the content pipeline
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from quizgenie.core.exceptions import ExtractionError

PAGE_SEPARATOR = "\n\n"


class ExtractionTask:
    """Extract raw text from PDF or plain-text documents."""

    def extract(self, file_path: Path, document_id: int | None = None) -> str:
        """
        Extract the full text of a document.

        Args:
            file_path: Location of the stored file
            document_id: Owning document ID (for error context)

        Returns:
            str: Extracted text, possibly empty

        Raises:
            ExtractionError: File missing, unreadable, or not parseable
        """
        path = Path(file_path)
        if not path.is_file():
            raise ExtractionError(
                f"File not found: {path}",
                document_id=document_id,
                file_path=str(path),
            )

        if path.suffix.lower() == ".pdf":
            return self._extract_pdf(path, document_id)
        return self._extract_text(path, document_id)

    def _extract_pdf(self, path: Path, document_id: int | None) -> str:
        try:
            pages = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise ExtractionError(
                f"PDF extract error: {e}",
                document_id=document_id,
                file_path=str(path),
            ) from e
        return PAGE_SEPARATOR.join(page.page_content for page in pages)

    def _extract_text(self, path: Path, document_id: int | None) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(
                f"text file read error: {e}",
                document_id=document_id,
                file_path=str(path),
            ) from e
