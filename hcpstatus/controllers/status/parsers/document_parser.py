"""Shared decoding for parsers that read one live-resource document."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from hcpstatus.models.core.errors import DocumentParseError
from hcpstatus.models.core.manifest_work import ManifestCondition, ManifestWorkDocument

ModelT = TypeVar("ModelT", bound=BaseModel)


def describe_validation_error(error: ValidationError) -> str:
    """Condense a pydantic ValidationError into a single line."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid document")
    summary = f"{location}: {message}" if location else message
    if len(details) > 1:
        summary += f" (and {len(details) - 1} more)"
    return summary


class DocumentParser:
    """Base class for parsers decoding one raw JSON document."""

    _DOCUMENT_LABEL = "document"

    def _decode(self, model: type[ModelT], raw: str | bytes, key: str) -> ModelT:
        """Decode raw JSON text into model.

        Raises:
            DocumentParseError: The text is not JSON or does not fit the model.
        """
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            raise DocumentParseError(
                key, describe_validation_error(exc), self._DOCUMENT_LABEL
            ) from exc

    @staticmethod
    def _iter_manifests(
        document: ManifestWorkDocument, kind: str
    ) -> Iterator[ManifestCondition]:
        """Yield embedded manifests whose resource kind equals kind."""
        for manifest in document.status.resource_status.manifests:
            if manifest.resource_meta.kind == kind:
                yield manifest
