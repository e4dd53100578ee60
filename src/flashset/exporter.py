import contextlib
import json
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Literal

from .api_client import SetsApiClient
from .codec import CodecError, ErrorKind
from .logging import get_logger
from .messages import export_failure, export_success
from .set_store import SetStore


ExportFormat = Literal["json", "csv"]

FALLBACK_FILE_STEM = "flashcard-set"

_UNSAFE_FILE_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


@dataclass
class ExportResult:
    ok: bool
    message: str
    path: Path | None = None
    error_kind: ErrorKind | None = None


def export_file_name(set_name: str | None, export_format: ExportFormat) -> str:
    stem = _UNSAFE_FILE_CHARS.sub("_", set_name or "").strip()
    return f"{stem or FALLBACK_FILE_STEM}.{export_format}"


def render_export(body: bytes, export_format: ExportFormat) -> bytes:
    """JSON bodies are re-serialised pretty-printed; CSV bytes pass through untouched."""
    if export_format == "csv":
        return body
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise CodecError(ErrorKind.EXPORT_FAILED, "response is not valid JSON") from exc
    return json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")


@contextlib.contextmanager
def download_target(output_path: Path) -> Iterator[Path]:
    """Yield a temporary file next to ``output_path``.

    If the body completes, the file is moved to ``output_path``; the
    temporary file never outlives the block.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=output_path.parent, prefix=".flashset-", suffix=output_path.suffix
    )
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        yield tmp_path
        tmp_path.replace(output_path)
    finally:
        tmp_path.unlink(missing_ok=True)


class ExportOrchestrator:
    def __init__(self, client: SetsApiClient, store: SetStore, output_dir: Path) -> None:
        self.logger = get_logger("flashset.exporter")
        self.client = client
        self.store = store
        self.output_dir = Path(output_dir)
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run(self, set_id: str, export_format: ExportFormat = "json") -> ExportResult:
        if self._in_flight:
            self.logger.warning("Export of set %s refused: another export is running", set_id)
            return self._failure(CodecError(ErrorKind.IN_PROGRESS))

        self._in_flight = True
        try:
            body = await self.client.export_set(set_id, export_format)
            content = render_export(body, export_format)

            record = self.store.find(set_id)
            output_path = self.output_dir / export_file_name(
                record.name if record else None, export_format
            )
            with download_target(output_path) as tmp_path:
                tmp_path.write_bytes(content)
        except CodecError as err:
            self.logger.warning("Export of set %s failed (%s)", set_id, err)
            return self._failure(err)
        except OSError as exc:
            self.logger.error("Could not write export of set %s: %s", set_id, exc)
            return self._failure(CodecError(ErrorKind.EXPORT_FAILED, str(exc)))
        finally:
            self._in_flight = False

        self.logger.info("Exported set %s as %s to %s", set_id, export_format, output_path)
        return ExportResult(ok=True, message=export_success(str(output_path)), path=output_path)

    @staticmethod
    def _failure(err: CodecError) -> ExportResult:
        return ExportResult(ok=False, message=export_failure(err), error_kind=err.kind)
