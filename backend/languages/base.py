"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class OptionConfig:
    """One selectable value of a grammatical category."""
    code: str
    label: str


@dataclass(frozen=True, slots=True)
class CategoryConfig:
    """A grammatical category and its closed set of values."""
    id: str
    label: str
    options: tuple[OptionConfig, ...]


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration for display tooling."""
    categories: list[CategoryConfig] = field(default_factory=list)
    markers: list[OptionConfig] = field(default_factory=list)

    def get(self, category_id: str) -> CategoryConfig | None:
        return next((c for c in self.categories if c.id == category_id), None)

    def to_dict(self) -> dict:
        """Convert to dict for JSON output."""
        return {
            "categories": [
                {"id": c.id, "label": c.label,
                 "options": [{"code": o.code, "label": o.label} for o in c.options]}
                for c in self.categories
            ],
            "markers": [{"code": m.code, "label": m.label} for m in self.markers],
        }


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639 language code (e.g., 'grc')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for display."""
        ...

    @abstractmethod
    def parse_tag(self, code: str) -> Any:
        """Decode a morphological parsing code into a Result."""
        ...
