from .config import Backend, load_backends, pot_path
from .errors import (ConfigError, ExtractorError, MalformedCatalogFile,
                     NonEmptyTemplateTranslation)
from .extractor import Extractor
from .merge import merge_template
from .message import Catalog, Comment, Headers, PluralTranslation, Translation
from .reconcile import merge_pot_files
from .store import ExtractionStore

__all__ = [
    "Backend", "Catalog", "Comment", "ConfigError", "ExtractionStore",
    "Extractor", "ExtractorError", "Headers", "MalformedCatalogFile",
    "NonEmptyTemplateTranslation", "PluralTranslation", "Translation",
    "load_backends", "merge_pot_files", "merge_template", "pot_path",
]
