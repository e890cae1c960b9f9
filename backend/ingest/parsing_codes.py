"""Interlinear table ingestion.

Reads rows of an interlinear translation table (e.g. the BSB translation
tables exported as TSV) and decodes each row's parsing code. Rows for
languages with a different code scheme are skipped. What happens to an
undecodable code is a policy decision made here, never in the decoder:
``skip`` records the error and continues, ``abort`` stops at the first one.
"""
import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Literal, Mapping

from core.config import settings
from core.errors import (
    AppError,
    Err,
    Ok,
    Result,
    file_not_found,
    file_read_error,
    required_field,
)
from core.logging import bind_context, ingest_logger, unbind_context
from languages.greek import GreekWordParsing, parse

log = ingest_logger()

ErrorPolicy = Literal["skip", "abort"]


@dataclass(frozen=True, slots=True)
class DecodedEntry:
    """A table row whose parsing code decoded successfully."""
    row: int
    code: str
    parsing: GreekWordParsing


@dataclass
class IngestionReport:
    """Outcome of one ingestion run."""
    entries: list[DecodedEntry] = field(default_factory=list)
    records_processed: int = 0
    records_skipped: int = 0
    records_failed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def records_decoded(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict:
        return {
            "records_processed": self.records_processed,
            "records_decoded": self.records_decoded,
            "records_skipped": self.records_skipped,
            "records_failed": self.records_failed,
            "errors": self.errors[:100],  # Limit errors in output
        }


class ParsingCodeIngester:
    """Decodes the parsing column of interlinear table rows."""

    __slots__ = ("on_error", "parsing_column", "language_column", "languages", "delimiter")

    def __init__(
        self,
        on_error: ErrorPolicy | None = None,
        parsing_column: str | None = None,
        language_column: str | None = None,
        languages: Iterable[str] | None = None,
        delimiter: str | None = None,
    ):
        self.on_error: ErrorPolicy = on_error or settings.INGEST_ON_ERROR
        self.parsing_column = parsing_column or settings.INGEST_PARSING_COLUMN
        self.language_column = language_column or settings.INGEST_LANGUAGE_COLUMN
        self.languages = set(settings.INGEST_LANGUAGES if languages is None else languages)
        self.delimiter = delimiter or settings.INGEST_DELIMITER

    def _accepts(self, row: Mapping[str, str]) -> bool:
        language = row.get(self.language_column)
        # Tables without a language column are taken as single-language
        return language is None or not self.languages or language.strip() in self.languages

    def ingest_rows(self, rows: Iterable[Mapping[str, str]]) -> Result[IngestionReport, AppError]:
        """Decode every accepted row. Row numbers start at 1."""
        report = IngestionReport()

        for number, row in enumerate(rows, start=1):
            report.records_processed += 1
            code = (row.get(self.parsing_column) or "").strip()

            if not self._accepts(row) or not code:
                report.records_skipped += 1
                continue

            match parse(code):
                case Ok(parsing):
                    report.entries.append(DecodedEntry(row=number, code=code, parsing=parsing))
                case Err(error):
                    if self.on_error == "abort":
                        log.error("ingest_aborted", row=number, code=code, error=error.message)
                        return Err(error.with_metadata(row=number))
                    report.records_failed += 1
                    report.errors.append(f"row {number}: {code}: {error.message}")
                    log.warning("parsing_code_skipped", row=number, code=code, error=error.message)

        log.info("ingest_complete", **report.to_dict())
        return Ok(report)

    def ingest_file(self, path: Path | str) -> Result[IngestionReport, AppError]:
        """Read a delimited text table and decode its parsing column."""
        path = Path(path)
        if not path.is_file():
            return file_not_found(path, origin="ingest.parsing_codes")

        bind_context(source=path.name)
        log.info("ingest_started", path=str(path), on_error=self.on_error)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f, delimiter=self.delimiter)
                if self.parsing_column not in (reader.fieldnames or []):
                    return required_field(self.parsing_column, origin="ingest.parsing_codes")
                return self.ingest_rows(reader)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            return file_read_error(path, e, origin="ingest.parsing_codes")
        finally:
            unbind_context("source")
