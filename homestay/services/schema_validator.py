"""Parse and validate a raw property import document. No side effects."""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from homestay.schemas.property_import import PropertyImportDocument

ROOT_PATH = "(root)"


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class DocumentValidationError(Exception):
    """Malformed JSON or a structural violation. Nothing may be written when this is raised."""

    def __init__(self, errors: list[FieldError], invalid_json: bool = False):
        self.errors = errors
        self.invalid_json = invalid_json
        super().__init__("; ".join(str(e) for e in errors))


def _error_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or ROOT_PATH


def validate_document(raw_text: str) -> PropertyImportDocument:
    """Return the typed document, or raise DocumentValidationError listing every violated field in document order."""
    try:
        return PropertyImportDocument.model_validate_json(raw_text or "")
    except ValidationError as e:
        details = e.errors(include_url=False)
        invalid_json = any(d.get("type") == "json_invalid" for d in details)
        errors = [FieldError(_error_path(tuple(d.get("loc") or ())), d.get("msg") or "Invalid value") for d in details]
        raise DocumentValidationError(errors, invalid_json=invalid_json) from e
