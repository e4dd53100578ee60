import asyncio
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from .api_client import SetsApiClient
from .codec import CodecError, ErrorKind, decode_csv, decode_json, validate_payload
from .logging import get_logger
from .messages import import_failure, import_success
from .set_entry import ImportPayload, SetRecord
from .set_store import SetStore


ACCEPTED_CONTENT_TYPES = ("application/json", "text/csv")
ACCEPTED_SUFFIXES = (".json", ".csv")


@dataclass
class SelectedFile:
    path: Path
    content_type: str | None = None

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def declared_type(self) -> str | None:
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.path.name)
        return guessed


@dataclass
class ImportResult:
    ok: bool
    message: str
    set: SetRecord | None = None
    flashcard_count: int = 0
    error_kind: ErrorKind | None = None


def is_accepted_file(selected: SelectedFile) -> bool:
    """File-type gate, checked on name and declared type only."""
    return selected.declared_type in ACCEPTED_CONTENT_TYPES or selected.name.endswith(ACCEPTED_SUFFIXES)


def decode_file_content(file_name: str, text: str) -> ImportPayload:
    lowered = file_name.lower()
    if lowered.endswith(".json"):
        return decode_json(text)
    if lowered.endswith(".csv"):
        return decode_csv(text)
    raise CodecError(ErrorKind.UNSUPPORTED_FORMAT)


class ImportOrchestrator:
    """Runs one import as a unit: gate, read, decode, validate, submit, reconcile.

    Local state is only touched once the backend has accepted the set. While
    a run is outstanding ``in_flight`` is set and further runs are refused.
    """

    def __init__(self, client: SetsApiClient, store: SetStore) -> None:
        self.logger = get_logger("flashset.importer")
        self.client = client
        self.store = store
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run(self, selected: SelectedFile) -> ImportResult:
        if self._in_flight:
            self.logger.warning("Import of %s refused: another import is running", selected.name)
            return self._failure(CodecError(ErrorKind.IN_PROGRESS))

        self._in_flight = True
        try:
            return await self._run(selected)
        except CodecError as err:
            self.logger.warning("Import of %s failed (%s)", selected.name, err)
            return self._failure(err)
        finally:
            self._in_flight = False

    async def _run(self, selected: SelectedFile) -> ImportResult:
        if not is_accepted_file(selected):
            raise CodecError(ErrorKind.WRONG_FILE_FORMAT)

        text = await self._read_text(selected.path)
        payload = validate_payload(decode_file_content(selected.name, text))

        response = await self.client.import_set(payload)

        raw_set = response.get("set") if isinstance(response, dict) else None
        created = response.get("flashcards") if isinstance(response, dict) else None
        count = len(created) if isinstance(created, list) else 0

        record = SetRecord.from_dict(raw_set) if isinstance(raw_set, dict) else None
        if record is not None:
            self.store.append(record)

        set_name = record.name if record is not None else None
        self.logger.info("Imported set '%s' with %d flashcards", set_name, count)
        return ImportResult(
            ok=True,
            message=import_success(set_name, count),
            set=record,
            flashcard_count=count,
        )

    async def _read_text(self, path: Path) -> str:
        self.logger.info("Reading import file %s", path)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise CodecError(ErrorKind.FAILED_TO_READ, str(exc)) from exc

    @staticmethod
    def _failure(err: CodecError) -> ImportResult:
        return ImportResult(ok=False, message=import_failure(err), error_kind=err.kind)
