from .extract import TextExtractionError, decode_text, extract_resume_text
from .models import RawDocument

__all__ = ["RawDocument", "TextExtractionError", "decode_text", "extract_resume_text"]
