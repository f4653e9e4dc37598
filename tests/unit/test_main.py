from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from statement_scanner.documents.encoder import DocumentEncoder
from statement_scanner.documents.file_loader import FileLoader
from statement_scanner.export.clipboard import ClipboardSink
from statement_scanner.extraction.example_client_adapter import ExampleClientAdapter
from statement_scanner.extraction.exceptions import ExtractionError
from statement_scanner.extraction.extractor import Extractor
from statement_scanner.main import (
    EXIT_NO_DOCUMENTS,
    EXIT_OK,
    EXIT_RUN_FAILED,
    collect_documents,
    main,
    parse_args,
    run,
)
from statement_scanner.pipeline.orchestrator import PipelineOrchestrator

_RESPONSE = {
    "transactions": [
        {"date": "2024-03-05", "description": "Coffee Shop", "category": "Dining", "amount": -4.50},
    ]
}


def _orchestrator(response: dict[str, object] | None = None) -> PipelineOrchestrator:
    extractor = Extractor(client=ExampleClientAdapter(response or _RESPONSE), model="example")
    return PipelineOrchestrator(encoder=DocumentEncoder(), extractor=extractor)


def _write(tmp_path: Path, name: str, content: bytes = b"data") -> Path:
    path = tmp_path / name
    path.write_bytes(content)
    return path


class TestCollectDocuments:
    def test_skips_unsupported_missing_and_duplicate_files(self, tmp_path: Path) -> None:
        scan = _write(tmp_path, "scan.png")
        notes = _write(tmp_path, "notes.txt")
        submission = collect_documents(
            [scan, notes, tmp_path / "missing.pdf", scan], FileLoader()
        )
        assert [d.name for d in submission] == ["scan.png"]


class TestRun:
    def test_prints_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args([str(_write(tmp_path, "scan.png"))])
        code = run(args, _orchestrator(), MagicMock(spec=ClipboardSink))
        assert code == EXIT_OK
        assert capsys.readouterr().out == (
            "Date\tDescription\tCategory\tAmount\n2024-03-05\tCoffee Shop\tDining\t-4.5\n"
        )

    def test_logs_totals_after_table(self, tmp_path: Path) -> None:
        args = parse_args([str(_write(tmp_path, "scan.png"))])
        with patch("statement_scanner.main.Log") as log:
            assert run(args, _orchestrator(), MagicMock(spec=ClipboardSink)) == EXIT_OK
        log.info.assert_any_call("1 rows extracted, income 0, spending 4.5")

    def test_copies_when_requested(self, tmp_path: Path) -> None:
        args = parse_args([str(_write(tmp_path, "scan.png")), "--copy"])
        clipboard = MagicMock(spec=ClipboardSink)
        run(args, _orchestrator(), clipboard)
        clipboard.copy.assert_called_once_with(
            "Date\tDescription\tCategory\tAmount\n2024-03-05\tCoffee Shop\tDining\t-4.5"
        )

    def test_clipboard_failure_does_not_fail_run(self, tmp_path: Path) -> None:
        args = parse_args([str(_write(tmp_path, "scan.png")), "--copy"])
        clipboard = MagicMock(spec=ClipboardSink)
        clipboard.copy.return_value = False
        assert run(args, _orchestrator(), clipboard) == EXIT_OK

    def test_no_transactions_prints_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        args = parse_args([str(_write(tmp_path, "scan.png")), "--copy"])
        clipboard = MagicMock(spec=ClipboardSink)
        assert run(args, _orchestrator({"transactions": []}), clipboard) == EXIT_OK
        assert capsys.readouterr().out == ""
        clipboard.copy.assert_not_called()

    def test_no_supported_documents(self, tmp_path: Path) -> None:
        args = parse_args([str(_write(tmp_path, "notes.txt"))])
        assert run(args, _orchestrator(), MagicMock(spec=ClipboardSink)) == EXIT_NO_DOCUMENTS

    def test_failed_run_returns_error_code(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        args = parse_args([str(_write(tmp_path, "scan.png"))])
        orchestrator = _orchestrator()
        with patch.object(
            Extractor, "extract", side_effect=ExtractionError("No response received from AI provider")
        ):
            assert run(args, orchestrator, MagicMock(spec=ClipboardSink)) == EXIT_RUN_FAILED
        assert capsys.readouterr().out == ""


class TestMain:
    def test_uses_example_provider_from_env(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("EXTRACTION_PROVIDER", "example")
        path = _write(tmp_path, "statement.pdf", b"%PDF-1.4")
        with patch("statement_scanner.main.Log"):
            assert main([str(path)]) == EXIT_OK
        assert capsys.readouterr().out == ""
