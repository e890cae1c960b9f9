"""Ingestion of interlinear tables into decoded parsings."""
from ingest.parsing_codes import (
    DecodedEntry,
    IngestionReport,
    ParsingCodeIngester,
)

__all__ = ["DecodedEntry", "IngestionReport", "ParsingCodeIngester"]
