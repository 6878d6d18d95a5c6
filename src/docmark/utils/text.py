"""Telling text files from binary ones."""

from pathlib import Path

# Extensions that are never worth scanning for passages
BINARY_EXTENSIONS = {
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp", ".tiff",
    # Office and PDF
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt",
    # Archives
    ".zip", ".tar", ".gz", ".rar", ".7z", ".bz2", ".xz",
    # Executables and compiled code
    ".exe", ".dll", ".so", ".dylib", ".bin", ".pyc", ".class", ".o",
    # Media and fonts
    ".mp3", ".mp4", ".wav", ".mov", ".ttf", ".otf", ".woff", ".woff2",
    # Databases
    ".db", ".sqlite", ".sqlite3",
}

# Share of non-text bytes above which content counts as binary
NON_TEXT_RATIO = 0.30


def has_binary_extension(path: str | Path) -> bool:
    return Path(path).suffix.lower() in BINARY_EXTENSIONS


def looks_binary(content: bytes, sample_size: int = 8192) -> bool:
    """Guess whether raw bytes are binary.

    A NUL byte anywhere in the sample decides it; otherwise the share of
    bytes outside printable ASCII and common whitespace is compared with
    NON_TEXT_RATIO. Bytes >= 0x80 count as text so UTF-8 prose passes.
    """
    if not content:
        return False

    sample = content[:sample_size]
    if b"\x00" in sample:
        return True

    control = sum(1 for byte in sample if byte < 32 and byte not in (9, 10, 12, 13))
    return control / len(sample) > NON_TEXT_RATIO


def is_text_file(path: str | Path, content: bytes) -> bool:
    """Check both the extension and the content."""
    return not has_binary_extension(path) and not looks_binary(content)


def decode_text(content: bytes) -> str:
    """Decode file bytes as UTF-8 (BOM stripped), replacing bad sequences."""
    return content.decode("utf-8-sig", errors="replace")
