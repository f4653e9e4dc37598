import asyncio
from collections.abc import Callable, Sequence

from statement_scanner.config.settings import Settings
from statement_scanner.documents.encoder import DocumentEncoder
from statement_scanner.documents.models import BaseDocument
from statement_scanner.extraction.base import BaseExtractor
from statement_scanner.extraction.factory import ExtractorFactory
from statement_scanner.extraction.models import Transaction
from statement_scanner.logging.logger import Log
from statement_scanner.pipeline.exceptions import AggregateRunError, RunInProgressError
from statement_scanner.pipeline.models import RunState, RunStatus

ProgressObserver = Callable[[int, int], None]


class PipelineOrchestrator:
    """Runs encode -> extract concurrently over a document set, then merges and sorts.

    A run is all-or-nothing: one failed document fails the whole run and no
    partial results are kept. ``reset`` abandons the current run; results of
    an abandoned run never reach ``state``.
    """

    def __init__(self, encoder: DocumentEncoder, extractor: BaseExtractor) -> None:
        self._encoder = encoder
        self._extractor = extractor
        self._state = RunState()
        self._generation = 0

    @property
    def state(self) -> RunState:
        return self._state

    def reset(self) -> None:
        """Return to Idle and detach any in-flight run from the state."""
        self._generation += 1
        self._state = RunState()

    async def run(
        self,
        documents: Sequence[BaseDocument],
        on_progress: ProgressObserver | None = None,
    ) -> list[Transaction]:
        """Extract, merge and date-sort transactions from all documents.

        The first failing document cancels the others still in flight; their
        results would be discarded anyway.

        Raises:
            RunInProgressError: if a run is already processing.
            AggregateRunError: if any document fails.
        """
        if self._state.status is RunStatus.PROCESSING:
            raise RunInProgressError("A run is already in progress")

        snapshot = tuple(documents)
        self._generation += 1
        generation = self._generation
        self._state = RunState(status=RunStatus.PROCESSING, total=len(snapshot))
        Log.info(f"Starting run over {len(snapshot)} documents")

        def report_progress() -> None:
            if generation != self._generation:
                return
            self._state.completed += 1
            if on_progress is not None:
                on_progress(self._state.completed, self._state.total)

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._process_document(document, report_progress))
                    for document in snapshot
                ]
        except ExceptionGroup as eg:
            errors = list(eg.exceptions)
            run_error = AggregateRunError(errors)
            if generation == self._generation:
                self._state.status = RunStatus.ERROR
                self._state.error_message = str(run_error)
            Log.error(f"Run failed: {run_error}")
            raise run_error from errors[0]
        except asyncio.CancelledError:
            if generation == self._generation:
                self._state = RunState()
            raise

        merged = [t for task in tasks for t in task.result()]
        merged.sort(key=lambda t: t.calendar_date)

        if generation == self._generation:
            self._state.transactions = tuple(merged)
            self._state.status = RunStatus.SUCCESS
            Log.info(f"Run complete: {len(merged)} transactions from {len(snapshot)} documents")
        else:
            Log.warning("Run finished after reset, discarding its results")
        return merged

    async def _process_document(
        self,
        document: BaseDocument,
        report_progress: Callable[[], None],
    ) -> list[Transaction]:
        encoded = await self._encoder.encode(document)
        transactions = await self._extractor.extract(encoded.payload, encoded.media_type)
        Log.info(f"Extracted {len(transactions)} transactions from {document.name}")
        report_progress()
        return transactions


def build_orchestrator(settings: Settings) -> PipelineOrchestrator:
    """Build a PipelineOrchestrator with all required adapters."""
    return PipelineOrchestrator(
        encoder=DocumentEncoder(),
        extractor=ExtractorFactory.create(settings),
    )
