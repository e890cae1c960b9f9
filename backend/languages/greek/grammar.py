"""Greek grammar configuration for display tooling."""
from languages.base import CategoryConfig, GrammarConfig, OptionConfig
from .components import COMPONENTS, ComponentCode
from .parsings import Indeclinable, IntensiveParticle

# Spaced labels for the CamelCase category names
_CATEGORY_LABELS = {"PartOfSpeech": "Part of Speech"}


def _category_config(component: type[ComponentCode]) -> CategoryConfig:
    category = component.category()
    return CategoryConfig(
        id=category.lower() if category != "PartOfSpeech" else "part_of_speech",
        label=_CATEGORY_LABELS.get(category, category),
        options=tuple(OptionConfig(code=m.code, label=m.label) for m in component),
    )


GREEK_GRAMMAR_CONFIG = GrammarConfig(
    categories=[_category_config(component) for component in COMPONENTS],
    markers=[
        OptionConfig(code=Indeclinable.marker, label=Indeclinable().label),
        OptionConfig(code=IntensiveParticle.marker, label=IntensiveParticle().label),
    ],
)
