"""Koine Greek language module implementation."""
from core.errors import AppError, Result
from languages.base import LanguageModule, GrammarConfig
from .grammar import GREEK_GRAMMAR_CONFIG
from .word import GreekWordParsing, parse


class GreekModule(LanguageModule):
    """Koine Greek module backed by the parsing-code decoder."""

    __slots__ = ()

    @property
    def code(self) -> str:
        return "grc"

    @property
    def name(self) -> str:
        return "Koine Greek"

    @property
    def native_name(self) -> str:
        return "Κοινὴ Ἑλληνική"

    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for display."""
        return GREEK_GRAMMAR_CONFIG

    def parse_tag(self, code: str) -> Result[GreekWordParsing, AppError]:
        """Decode a parsing code such as ``V-AIA-3S``."""
        return parse(code)
