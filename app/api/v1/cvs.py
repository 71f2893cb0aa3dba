import asyncio
import logging

from fastapi import APIRouter, File, Form, Header, HTTPException, Request, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.integrations.google_sheets import SheetCredentials
from app.parsing import RawDocument
from app.schemas.cv import ProcessResponse
from app.services.cv_batch_service import process_batch

router = APIRouter()
logger = logging.getLogger(__name__)

_READ_CHUNK_BYTES = 1024 * 64


async def _read_upload(file: UploadFile) -> RawDocument:
    filename = file.filename or "uploaded-file"
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=(
                    f"File '{filename}' is too large. Maximum allowed size is "
                    f"{settings.max_upload_bytes // (1024 * 1024)} MB."
                ),
            )
        chunks.append(chunk)
    return RawDocument(file_name=filename, mime_type=file.content_type or "", content=b"".join(chunks))


@router.post(
    "/cvs/process",
    response_model=ProcessResponse,
    response_model_exclude_none=True,
    summary="Summarize CVs",
    description="Summarize uploaded CVs and append one row per file to a Google Sheet.",
)
@rate_limit()
async def process_cvs(
    request: Request,
    files: list[UploadFile] | None = File(default=None),
    sheet_id: str = Form(default="", alias="sheetId"),
    sheet_name: str = Form(default="", alias="sheetName"),
    client_email: str = Form(default="", alias="clientEmail"),
    private_key: str = Form(default="", alias="privateKey"),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)

    uploads = files or []
    if not uploads:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No files uploaded.")
    if len(uploads) > settings.max_files_per_batch:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"You can upload a maximum of {settings.max_files_per_batch} files per request.",
        )

    credentials = SheetCredentials.from_form(sheet_id, sheet_name, client_email, private_key)
    if not credentials.is_complete():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing Google Sheets credentials.")

    documents = [await _read_upload(upload) for upload in uploads]

    try:
        return await asyncio.to_thread(process_batch, documents, credentials)
    except Exception as exc:  # noqa: BLE001 - surfaced as a 500 envelope
        logger.exception("cv_batch_failed files=%d", len(documents))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc) or "Unexpected error while processing the uploaded CV batch.",
        ) from exc
