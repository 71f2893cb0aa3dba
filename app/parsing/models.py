from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

PDF_MIME_TYPE = "application/pdf"


class RawDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str
    mime_type: str = ""
    content: bytes = b""

    @field_validator("file_name")
    @classmethod
    def _validate_file_name(cls, value: str) -> str:
        cleaned = value.strip()
        return cleaned or "uploaded-file"

    @field_validator("mime_type")
    @classmethod
    def _normalize_mime_type(cls, value: str) -> str:
        return value.split(";", 1)[0].strip().lower()

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == PDF_MIME_TYPE or self.file_name.lower().endswith(".pdf")
