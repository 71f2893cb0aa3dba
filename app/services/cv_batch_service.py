from __future__ import annotations

from datetime import datetime, timezone
import logging

from app.core.config import settings
from app.integrations.google_sheets import SheetCredentials, SheetWriter, SheetsSyncError, connect_sheet
from app.parsing import RawDocument, TextExtractionError, extract_resume_text
from app.schemas.cv import ProcessResponse, ResumeResult
from app.summary import generate_summary, truncate_summary

logger = logging.getLogger(__name__)

EXTRACTION_FAILED_SUMMARY = "Could not extract meaningful text from this file."
SYNCED_MESSAGE = "CV summaries generated and synced to Google Sheets."
NOT_SYNCED_MESSAGE = "Processed CVs but could not sync to Google Sheets."
CLIENT_UNAVAILABLE_MESSAGE = "Sheets client unavailable."


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def summarize_document(document: RawDocument) -> str:
    text = extract_resume_text(document)
    summary = generate_summary(text, document.file_name)
    return truncate_summary(summary, settings.summary_max_chars)


def _sync_result(
    file_name: str,
    summary: str,
    writer: SheetWriter | None,
    bootstrap_error: SheetsSyncError | None,
) -> ResumeResult:
    if bootstrap_error is not None:
        return ResumeResult(
            file_name=file_name,
            summary=summary,
            sheet_status="error",
            sheet_message=str(bootstrap_error),
        )
    if writer is None:
        return ResumeResult(
            file_name=file_name,
            summary=summary,
            sheet_status="skipped",
            sheet_message=CLIENT_UNAVAILABLE_MESSAGE,
        )
    try:
        writer.append_row(file_name, summary, _timestamp())
    except SheetsSyncError as exc:
        logger.warning("sheet_append_failed file=%s error=%s", file_name, exc)
        return ResumeResult(
            file_name=file_name,
            summary=summary,
            sheet_status="error",
            sheet_message=str(exc) or "Failed to append to sheet.",
        )
    except Exception as exc:  # noqa: BLE001 - one failed row must not abort the batch
        logger.exception("sheet_append_crashed file=%s", file_name)
        return ResumeResult(
            file_name=file_name,
            summary=summary,
            sheet_status="error",
            sheet_message=str(exc) or "Failed to append to sheet.",
        )
    return ResumeResult(file_name=file_name, summary=summary, sheet_status="appended")


def process_batch(documents: list[RawDocument], credentials: SheetCredentials | None) -> ProcessResponse:
    """Summarize every document and append one sheet row per file.

    Files are handled one after another. A failure on one file is reported in
    its own result and never stops the rest of the batch.
    """
    writer: SheetWriter | None = None
    bootstrap_error: SheetsSyncError | None = None
    if credentials is not None:
        try:
            writer = connect_sheet(credentials)
        except SheetsSyncError as exc:
            bootstrap_error = exc

    results: list[ResumeResult] = []
    for document in documents:
        try:
            summary = summarize_document(document)
        except TextExtractionError as exc:
            logger.warning("cv_extraction_failed file=%s error=%s", document.file_name, exc)
            results.append(
                ResumeResult(
                    file_name=document.file_name,
                    summary=EXTRACTION_FAILED_SUMMARY,
                    sheet_status="error",
                    sheet_message=str(exc) or "Unexpected failure while parsing CV.",
                )
            )
            continue
        results.append(_sync_result(document.file_name, summary, writer, bootstrap_error))

    appended = sum(1 for result in results if result.sheet_status == "appended")
    logger.info("cv_batch_processed files=%d appended=%d", len(results), appended)
    return ProcessResponse(
        results=results,
        global_message=SYNCED_MESSAGE if appended else NOT_SYNCED_MESSAGE,
    )
