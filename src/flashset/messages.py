"""User-facing texts for import and export outcomes."""

from .codec.errors import CodecError, ErrorKind


UNKNOWN_ERROR = "Unknown error"
UNKNOWN_SET = "Unknown Set"

IMPORT_DETAILS: dict[ErrorKind, str] = {
    ErrorKind.WRONG_FILE_FORMAT: "Please select a JSON or CSV file",
    ErrorKind.FAILED_TO_READ: "Failed to read file",
    ErrorKind.INVALID_JSON: "Invalid JSON file",
    ErrorKind.INVALID_CSV: "Invalid CSV file: a header and at least one data row are required",
    ErrorKind.INSUFFICIENT_COLUMNS: "CSV file has insufficient columns (at least 8 required)",
    ErrorKind.UNSUPPORTED_FORMAT: "Unsupported file format",
    ErrorKind.MISSING_SET_INFO: "File is missing set information (set name is required)",
    ErrorKind.IN_PROGRESS: "Another import is already in progress",
}

EXPORT_FAILED = "Failed to export set."
EXPORT_IN_PROGRESS = "Another export is already in progress"


def import_failure(err: CodecError) -> str:
    if err.kind is ErrorKind.WRONG_FILE_FORMAT:
        return IMPORT_DETAILS[err.kind]
    if err.kind is ErrorKind.IMPORT_FAILED:
        detail = err.reason or UNKNOWN_ERROR
    else:
        detail = IMPORT_DETAILS.get(err.kind, UNKNOWN_ERROR)
        if err.reason:
            detail = f"{detail} ({err.reason})"
    return f"Import failed: {detail}"


def import_success(set_name: str | None, count: int) -> str:
    return f"Set '{set_name or UNKNOWN_SET}' imported successfully with {count} flashcards"


def export_failure(err: CodecError) -> str:
    if err.kind is ErrorKind.IN_PROGRESS:
        return EXPORT_IN_PROGRESS
    return EXPORT_FAILED


def export_success(path: str) -> str:
    return f"Set exported to {path}"
