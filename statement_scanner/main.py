import argparse
import asyncio
import sys
from pathlib import Path

from statement_scanner.config.settings import Settings
from statement_scanner.documents.file_loader import FileLoader
from statement_scanner.documents.submission import SubmissionSet
from statement_scanner.export.clipboard import ClipboardSink
from statement_scanner.export.summary import summarize
from statement_scanner.export.table_serializer import serialize
from statement_scanner.logging.logger import Log
from statement_scanner.pipeline.exceptions import AggregateRunError
from statement_scanner.pipeline.orchestrator import PipelineOrchestrator, build_orchestrator

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_NO_DOCUMENTS = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="statement-scanner",
        description="Extract transactions from scanned statements into a spreadsheet-ready table.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Images (JPEG/PNG/WEBP/HEIC) or PDFs")
    parser.add_argument("--copy", action="store_true", help="Copy the table to the clipboard")
    return parser.parse_args(argv)


def collect_documents(paths: list[Path], loader: FileLoader) -> SubmissionSet:
    """Build the submission set, skipping missing, unsupported and duplicate files."""
    submission = SubmissionSet()
    for path in paths:
        try:
            document = loader.load(path)
        except FileNotFoundError as exc:
            Log.warning(str(exc))
            continue
        if not submission.add([document]):
            Log.warning(f"Skipping {path}: unsupported type or duplicate")
    return submission


def run(
    args: argparse.Namespace,
    orchestrator: PipelineOrchestrator,
    clipboard: ClipboardSink,
) -> int:
    submission = collect_documents(args.files, FileLoader())
    if not len(submission):
        Log.error("No supported documents to analyze")
        return EXIT_NO_DOCUMENTS

    def on_progress(completed: int, total: int) -> None:
        Log.info(f"Processed {completed}/{total} documents ({total - completed} pending)")

    try:
        transactions = asyncio.run(orchestrator.run(submission.snapshot(), on_progress))
    except AggregateRunError as exc:
        Log.error(f"Extraction failed: {exc}")
        return EXIT_RUN_FAILED

    table = serialize(transactions)
    if table:
        sys.stdout.write(table + "\n")
        Log.info(summarize(transactions).describe())
    else:
        Log.warning("No transactions found")

    if args.copy and table:
        if clipboard.copy(table):
            Log.info("Table copied to clipboard")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> run over the given files."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = parse_args(argv)
    return run(args, build_orchestrator(settings), ClipboardSink())


if __name__ == "__main__":
    sys.exit(main())
