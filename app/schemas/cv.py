from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

SheetStatus = Literal["queued", "appended", "skipped", "error"]


class ResumeResult(BaseModel):
    file_name: str = Field(serialization_alias="fileName")
    summary: str
    sheet_status: SheetStatus = Field(serialization_alias="sheetStatus")
    sheet_message: str | None = Field(default=None, serialization_alias="sheetMessage")


class ProcessResponse(BaseModel):
    results: list[ResumeResult] = Field(default_factory=list)
    global_message: str = Field(serialization_alias="globalMessage")
