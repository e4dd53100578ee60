from enum import Enum


class ErrorKind(str, Enum):
    WRONG_FILE_FORMAT = "wrong_file_format"
    FAILED_TO_READ = "failed_to_read"
    INVALID_JSON = "invalid_json"
    INVALID_CSV = "invalid_csv"
    INSUFFICIENT_COLUMNS = "insufficient_columns"
    UNSUPPORTED_FORMAT = "unsupported_format"
    MISSING_SET_INFO = "missing_set_info"
    IMPORT_FAILED = "import_failed"
    EXPORT_FAILED = "export_failed"
    IN_PROGRESS = "in_progress"


class CodecError(Exception):
    """A decode, validation or transfer failure tagged with its kind.

    ``reason`` carries the detail worth showing to the user, e.g. the message
    a backend sent back when it rejected an import.
    """

    def __init__(self, kind: ErrorKind, reason: str | None = None) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"{kind.value}: {reason}" if reason else kind.value)
