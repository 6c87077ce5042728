from .extraction_prompts import (
    AUDIO_TRANSCRIPTION_SYSTEM_PROMPT,
    AUDIO_TRANSCRIPTION_INSTRUCTION,
    DOCUMENT_EXTRACTION_SYSTEM_PROMPT,
    DOCUMENT_EXTRACTION_INSTRUCTION,
)

__all__ = [
    "AUDIO_TRANSCRIPTION_SYSTEM_PROMPT",
    "AUDIO_TRANSCRIPTION_INSTRUCTION",
    "DOCUMENT_EXTRACTION_SYSTEM_PROMPT",
    "DOCUMENT_EXTRACTION_INSTRUCTION",
]
