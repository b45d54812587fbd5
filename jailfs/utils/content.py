"""
Heuristics for classifying file content.
"""

import mimetypes
import os

SCAN_WINDOW = 512
NON_PRINTABLE_PERCENT_LIMIT = 30

# Deterministic answers for the common cases; everything else goes to mimetypes.
_MIME_BY_EXTENSION: dict[str, str] = {
    "txt": "text/plain",
    "c": "text/x-c++src",
    "cc": "text/x-c++src",
    "cpp": "text/x-c++src",
    "h": "text/x-c++hdr",
    "hpp": "text/x-c++hdr",
    "py": "text/x-python",
    "js": "text/javascript",
    "html": "text/html",
    "css": "text/css",
    "json": "application/json",
    "xml": "application/xml",
    "pdf": "application/pdf",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "zip": "application/zip",
    "tar": "application/x-tar",
    "gz": "application/gzip",
}


def _utf8_sequence_length(lead: int) -> int:
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def is_text(buffer: bytes) -> bool:
    """
    Decide whether a buffer looks like human-readable text.

    Only the first 512 bytes are inspected. A NUL byte means binary; other
    control characters (except tab, LF and CR), invalid UTF-8 lead bytes and
    broken multi-byte sequences each count as one non-printable unit. The
    buffer is text when fewer than 30% of the scanned bytes are non-printable.

    Args:
        buffer: Raw content

    Returns:
        True for text, False for binary
    """
    if not buffer:
        return True

    total = min(len(buffer), SCAN_WINDOW)
    window = buffer[:total]
    if 0 in window:
        return False

    non_printable = 0
    i = 0
    while i < total:
        byte = window[i]

        if byte < 32:
            if byte not in (0x09, 0x0A, 0x0D):
                non_printable += 1
            i += 1
            continue

        if byte >= 0x80:
            length = _utf8_sequence_length(byte)
            if not length:
                non_printable += 1
                i += 1
                continue

            continuation = window[i + 1 : min(i + length, total)]
            if any(cc & 0xC0 != 0x80 for cc in continuation):
                non_printable += 1
            i += length
            continue

        i += 1

    return non_printable * 100 // total < NON_PRINTABLE_PERCENT_LIMIT


def guess_mime_type(filename: str) -> str:
    """Best-effort MIME type from the file extension, empty string if unknown."""
    _, ext = os.path.splitext(filename)
    ext = ext.lstrip(".").lower()
    if not ext:
        return ""
    if ext in _MIME_BY_EXTENSION:
        return _MIME_BY_EXTENSION[ext]
    guessed, _ = mimetypes.guess_type(f"file.{ext}")
    return guessed or ""
