from .csv_decoder import decode_csv
from .csv_line import join_line, split_line
from .errors import CodecError, ErrorKind
from .json_decoder import decode_json
from .validator import validate_payload

__all__ = [
    "CodecError",
    "ErrorKind",
    "decode_csv",
    "decode_json",
    "join_line",
    "split_line",
    "validate_payload",
]
