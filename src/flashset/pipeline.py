import asyncio

import aiohttp
from rich.console import Console

from .api_client import SetsApiClient
from .exporter import ExportOrchestrator
from .formats import sample_csv, sample_json
from .importer import ImportOrchestrator, SelectedFile
from .logging import get_logger
from .set_store import SetStore
from .settings import Settings


class Pipeline:
    def __init__(self, settings: Settings, console: Console | None = None) -> None:
        self.settings = settings
        self.logger = get_logger("flashset.pipeline")
        self.console = console or Console()

        self.client = SetsApiClient(
            base_url=settings.api_base_url,
            token=settings.token_value(),
            timeout=settings.request_timeout,
        )
        self.store = SetStore()
        self.importer = ImportOrchestrator(self.client, self.store)
        self.exporter = ExportOrchestrator(self.client, self.store, settings.output_dir)

    async def run(self) -> bool:
        """Run whatever the settings ask for. Returns False if any step failed."""
        if self.settings.show_formats:
            self._print_formats()
            return True

        if not self.settings.import_file and not self.settings.export_set_id:
            self.logger.info("Nothing to do: neither import_file nor export_set_id given")
            return True

        ok = True
        if self.settings.import_file:
            result = await self.importer.run(
                SelectedFile(self.settings.import_file, self.settings.import_content_type)
            )
            self._report(result.ok, result.message)
            ok = ok and result.ok

        if self.settings.export_set_id:
            await self._load_sets()
            result = await self.exporter.run(self.settings.export_set_id, self.settings.export_format)
            self._report(result.ok, result.message)
            ok = ok and result.ok

        return ok

    async def _load_sets(self) -> None:
        # Only used to name the exported file; the export itself does not need it
        try:
            self.store.replace_all(await self.client.list_sets())
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            self.logger.warning("Could not fetch sets, export file name falls back: %s", exc)

    def _report(self, ok: bool, message: str) -> None:
        self.console.print(message, style="green" if ok else "bold red", markup=False, highlight=False)

    def _print_formats(self) -> None:
        self.console.print("[bold]Supported import formats[/bold]")
        self.console.print("\n[bold]JSON[/bold]")
        self.console.print(sample_json(), markup=False, highlight=False)
        self.console.print("\n[bold]CSV[/bold] [dim](header row, then one row per flashcard)[/dim]")
        self.console.print(sample_csv(), markup=False, highlight=False, end="")
