from app.words.loader import WordDataError, load_word_repository
from app.words.records import ConceptId, InflectedOverride, LemmaRecord, normalize_lemma_record
from app.words.repository import InMemoryWordRepository, LanguageWords, WordRepository

__all__ = [
    "ConceptId",
    "InflectedOverride",
    "InMemoryWordRepository",
    "LanguageWords",
    "LemmaRecord",
    "WordDataError",
    "WordRepository",
    "load_word_repository",
    "normalize_lemma_record",
]
