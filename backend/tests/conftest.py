from __future__ import annotations

import pytest

from app.core.config import Settings
from app.words.repository import InMemoryWordRepository


SAMPLE_LEMMAS: dict[str, list[dict[str, object]]] = {
    "en": [
        {"concept_id": 1, "word_lemma": "hello", "level": "A1", "category": "greetings", "type": "greeting"},
        {"concept_id": 2, "word_lemma": "water", "level": "A1", "category": "drinks"},
        {"concept_id": 3, "word_lemma": "children", "level": "A2", "category": "people"},
        {"concept_id": 4, "word_lemma": "cat"},
        {"concept_id": 5, "word_lemma": "freedom", "level": "C1", "category": "abstract"},
        {"concept_id": 6, "word_lemma": "run", "level": "B2", "category": "sport", "type": "verb"},
    ],
    "es": [
        {"concept_id": 6, "word_lemma": "correr", "level": "B2", "category": "sport"},
        {"concept_id": 1, "word_lemma": "hola", "definiton": "saludo", "sentence": "Hola, amigo."},
        {"concept_id": 2, "word_lemma": "agua"},
        {"concept_id": 4, "word_lemma": "gato"},
        {"concept_id": 3, "word_lemma": "niños", "level": "Z9", "category": "family"},
    ],
    "de": [
        {"concept_id": 1, "word_lemma": "hallo"},
    ],
}

SAMPLE_INFLECTED: dict[str, list[dict[str, object]]] = {
    "en": [
        {"concept_id": 6, "word_inflected": "running"},
    ],
}

SAMPLE_CATEGORIES = [{"category": "science"}, {"category": "food"}]


def build_sample_repository() -> InMemoryWordRepository:
    return InMemoryWordRepository.from_raw(
        SAMPLE_LEMMAS,
        inflected_by_language=SAMPLE_INFLECTED,
        categories=SAMPLE_CATEGORIES,
    )


def _settings(words_dir, **overrides) -> Settings:
    values: dict[str, object] = {
        "environment": "test",
        "app_name": "wordflow-backend-test",
        "host": "127.0.0.1",
        "port": 8001,
        "words_dir": words_dir,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def sample_repository() -> InMemoryWordRepository:
    return build_sample_repository()


@pytest.fixture
def sample_repository_factory():
    return lambda _settings: build_sample_repository()


@pytest.fixture
def make_settings():
    return _settings


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return _settings(tmp_path / "words")
