import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from docverify.chat.responder import ChatResponder
from docverify.config.settings import Settings
from docverify.database.connection import close_pool, init_pool
from docverify.extraction.factory import TextExtractorFactory
from docverify.extraction.models import RawFile
from docverify.fields.extractor import FieldExtractor
from docverify.generation.factory import GenerationClientFactory
from docverify.history.base import BaseHistoryRepository
from docverify.history.factory import HistoryFactory
from docverify.history.postgres import PostgresHistoryRepository
from docverify.history.serializer import (
    contract_to_dict,
    to_payload,
    verification_to_dict,
)
from docverify.logging.logger import Log
from docverify.processor.processor import build_contract_processor, build_verification_processor
from docverify.report.renderer import default_filename


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docverify", description="Land document verification and contract analysis."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    verify = commands.add_parser("verify", help="Verify land documents and write PDF reports")
    verify.add_argument("files", nargs="+", type=Path)

    analyze = commands.add_parser("analyze", help="Analyze a contract made of one or more files")
    analyze.add_argument("files", nargs="+", type=Path)

    ask = commands.add_parser("ask", help="Ask a question about a document")
    ask.add_argument("file", type=Path)
    ask.add_argument("question")

    history = commands.add_parser("history", help="List recent history entries")
    history.add_argument("-n", "--limit", type=int, default=20)
    return parser


def run_verify(settings: Settings, history: BaseHistoryRepository, files: list[Path]) -> list[dict]:
    processor = build_verification_processor(settings, history)
    output_dir = Path(settings.report_output_dir)
    results = []
    for path in files:
        context = processor.process(RawFile.from_path(path))
        entry = verification_to_dict(context.verification) if context.verification else {}
        if context.report is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            report_path = output_dir / default_filename(context.report.result)
            report_path.write_bytes(context.report.document)
            Log.info(f"Wrote report {report_path}")
            entry["reportPath"] = str(report_path)
        if context.error_message:
            entry["error"] = context.error_message
        results.append(entry)
    return results


def run_analyze(settings: Settings, history: BaseHistoryRepository, files: list[Path]) -> dict:
    client = GenerationClientFactory.create(settings)
    service = TextExtractorFactory.create_service(settings)
    batch = service.extract_many([RawFile.from_path(path) for path in files])
    failures = [
        {"file": result.source_file_name, "error": result.error or ""} for result in batch.failed
    ]
    text = "\n\n".join(result.text for result in batch.successful if result.text)
    if not text:
        return {"error": "No text could be extracted from the uploaded files", "failures": failures}

    name = ", ".join(result.source_file_name for result in batch.successful)
    data = text.encode("utf-8")
    context = build_contract_processor(settings, history, client).process(
        RawFile(filename=name, mime_type="text/plain", size=len(data), data=data)
    )
    output = contract_to_dict(context.contract) if context.contract else {}
    if context.error_message:
        output["error"] = context.error_message
    output["failures"] = failures
    return output


def run_ask(settings: Settings, path: Path, question: str) -> str:
    service = TextExtractorFactory.create_service(settings)
    batch = service.extract_many([RawFile.from_path(path)])
    extracted = batch.results[0]
    record = FieldExtractor().parse(extracted.text, path.name) if extracted.success else None
    responder = ChatResponder(GenerationClientFactory.create(settings))
    return responder.respond(question, record, extracted.text)


def run_history(history: BaseHistoryRepository, limit: int) -> list[dict]:
    entries = []
    for entry in history.list_recent(limit):
        kind, payload = to_payload(entry)
        entries.append({"kind": kind, **payload})
    return entries


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> build dependencies -> run one command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    history = HistoryFactory.create(settings)
    use_pool = isinstance(history, PostgresHistoryRepository)
    if use_pool:
        init_pool(settings)

    try:
        if isinstance(history, PostgresHistoryRepository):
            history.ensure_schema()
        if args.command == "verify":
            output: object = run_verify(settings, history, args.files)
        elif args.command == "analyze":
            output = run_analyze(settings, history, args.files)
        elif args.command == "ask":
            output = {"question": args.question, "answer": run_ask(settings, args.file, args.question)}
        else:
            output = run_history(history, args.limit)
    finally:
        if use_pool:
            close_pool()

    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
