"""Document loader - raw JSON text to validated Document."""

from typing import Any

from returns.result import Failure, Result

from uiengine.core import (
    LRUCache,
    JSONParseError,
    SchemaInvalid,
    Settings,
    decode_json,
    get_logger,
    get_settings,
    validate_json_size,
)
from uiengine.schema.models import Document
from uiengine.schema.validator import validate

logger = get_logger(__name__)

LoadResult = Result[Document, list[str]]


class DocumentLoader:
    """Parses and validates documents, memoizing outcomes per distinct text."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.cache: LRUCache[LoadResult] | None = (
            LRUCache(max_size=self.settings.cache_size) if self.settings.enable_cache else None
        )

    def load(self, source: str | bytes | dict[str, Any] | Document) -> LoadResult:
        """
        Load a document from JSON text or an already decoded value.

        Args:
            source: JSON text/bytes, a decoded mapping, or a Document

        Returns:
            Success(Document) or Failure(error messages). Malformed text
            yields a single-element error list.
        """
        if not isinstance(source, (str, bytes)):
            return validate(source, self.settings.max_document_depth)

        if self.cache is not None:
            cached = self.cache.get(source)
            if cached is not None:
                logger.debug("document_cache_hit")
                return cached

        result = self._load_text(source)

        if self.cache is not None:
            self.cache.set(source, result)
        return result

    def _load_text(self, text: str | bytes) -> LoadResult:
        try:
            validate_json_size(text, self.settings.max_document_size, "Document")
            data = decode_json(text, repair=self.settings.repair_json)
        except JSONParseError as e:
            logger.info("document_parse_failed", error=str(e))
            return Failure([str(e)])

        return validate(data, self.settings.max_document_depth)

    def load_or_raise(self, source: str | bytes | dict[str, Any] | Document) -> Document:
        """Load a document, raising SchemaInvalid with every error on failure."""
        result = self.load(source)
        if isinstance(result, Failure):
            raise SchemaInvalid(result.failure())
        return result.unwrap()


def load_document(source: str | bytes | dict[str, Any] | Document) -> LoadResult:
    """
    Convenience function to load a document with default settings

    Args:
        source: JSON text or decoded document

    Returns:
        Success(Document) or Failure(list of error messages)
    """
    return DocumentLoader().load(source)
