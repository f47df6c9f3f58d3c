from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from app.words.loader import WordDataError, discover_word_files, load_word_repository
from app.words.repository import InMemoryWordRepository


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def test_get_lemmas_returns_empty_sequence_for_unknown_language(sample_repository) -> None:
    assert list(sample_repository.get_lemmas("xx")) == []
    assert sample_repository.get_inflected_form("xx", 1) is None
    assert sample_repository.has_inflections("xx") is False


def test_get_lemmas_preserves_source_order_and_matches_codes_case_insensitively(sample_repository) -> None:
    concept_ids = [record.concept_id for record in sample_repository.get_lemmas("ES")]

    assert concept_ids == [6, 1, 2, 4, 3]


def test_get_inflected_form_reports_absent_without_table_or_override(sample_repository) -> None:
    assert sample_repository.get_inflected_form("en", 6) == "running"
    assert sample_repository.get_inflected_form("en", 1) is None
    assert sample_repository.get_inflected_form("es", 6) is None
    assert sample_repository.has_inflections("en") is True
    assert sample_repository.has_inflections("es") is False


def test_first_inflected_override_wins() -> None:
    repository = InMemoryWordRepository.from_raw(
        {"en": [{"concept_id": 12, "word_lemma": "child"}]},
        inflected_by_language={
            "en": [
                {"concept_id": 12, "word_inflected": "children"},
                {"concept_id": 12, "word_inflected": "childs"},
            ]
        },
    )

    assert repository.get_inflected_form("en", 12) == "children"


def test_from_raw_counts_skipped_entries_in_metadata() -> None:
    repository = InMemoryWordRepository.from_raw(
        {"en": [{"concept_id": 1, "word_lemma": "hello"}, {"word_lemma": "orphan"}]},
        categories=["food", {"category": "science"}, {"category": ""}],
    )

    metadata = repository.metadata()
    assert metadata["languages"] == {"en": {"lemmas": 1, "skipped": 1, "inflected": None}}
    assert list(repository.supplementary_categories()) == ["food", "science"]


def test_discover_word_files_splits_lemmas_and_inflections(tmp_path) -> None:
    _write_json(tmp_path / "EN.json", [])
    _write_json(tmp_path / "EN_inflected.json", [])
    _write_json(tmp_path / "ES.json", [])
    _write_json(tmp_path / "categories.json", [])

    lemma_files, inflected_files = discover_word_files(tmp_path)

    assert sorted(lemma_files) == ["en", "es"]
    assert list(inflected_files) == ["en"]


def test_load_word_repository_reads_directory(tmp_path, make_settings) -> None:
    words_dir = tmp_path / "words"
    _write_json(words_dir / "EN.json", [{"concept_id": 1, "word_lemma": "hello"}])
    _write_json(words_dir / "EN_inflected.json", [{"concept_id": 1, "word_inflected": "hellos"}])
    _write_json(words_dir / "ES.json", [{"concept_id": 1, "word_lemma": "hola"}])
    _write_json(words_dir / "categories.json", [{"category": "greetings"}])

    repository = load_word_repository(make_settings(words_dir))

    assert sorted(repository.language_codes()) == ["en", "es"]
    assert repository.get_inflected_form("en", 1) == "hellos"
    assert list(repository.supplementary_categories()) == ["greetings"]


def test_load_word_repository_counts_non_object_entries_as_skipped(tmp_path, make_settings) -> None:
    words_dir = tmp_path / "words"
    _write_json(words_dir / "EN.json", ["stray", {"concept_id": 1, "word_lemma": "hi"}, 7])
    _write_json(words_dir / "EN_inflected.json", [None, {"concept_id": 1, "word_inflected": "his"}])

    repository = load_word_repository(make_settings(words_dir))

    assert repository.metadata()["languages"]["en"] == {"lemmas": 1, "skipped": 2, "inflected": 1}
    assert repository.get_inflected_form("en", 1) == "his"


def test_load_word_repository_keeps_plain_string_categories(tmp_path, make_settings) -> None:
    words_dir = tmp_path / "words"
    _write_json(words_dir / "EN.json", [{"concept_id": 1, "word_lemma": "hello"}])
    _write_json(words_dir / "categories.json", ["food", {"category": "science"}, 3])

    repository = load_word_repository(make_settings(words_dir))

    assert list(repository.supplementary_categories()) == ["food", "science"]


def test_load_word_repository_fails_for_missing_directory(tmp_path, make_settings) -> None:
    with pytest.raises(WordDataError, match="not found"):
        load_word_repository(make_settings(tmp_path / "missing"))


def test_load_word_repository_fails_for_empty_directory(tmp_path, make_settings) -> None:
    words_dir = tmp_path / "words"
    words_dir.mkdir()

    with pytest.raises(WordDataError, match="No word lists"):
        load_word_repository(make_settings(words_dir))


def test_load_word_repository_fails_for_invalid_json(tmp_path, make_settings) -> None:
    words_dir = tmp_path / "words"
    words_dir.mkdir()
    (words_dir / "EN.json").write_text("[{", encoding="utf-8")

    with pytest.raises(WordDataError, match="Invalid JSON"):
        load_word_repository(make_settings(words_dir))


def test_load_word_repository_fails_for_non_list_payload(tmp_path, make_settings) -> None:
    words_dir = tmp_path / "words"
    _write_json(words_dir / "EN.json", {"concept_id": 1})

    with pytest.raises(WordDataError, match="JSON list"):
        load_word_repository(make_settings(words_dir))


def test_load_word_repository_warns_on_duplicate_concept_ids(tmp_path, make_settings, caplog) -> None:
    words_dir = tmp_path / "words"
    _write_json(
        words_dir / "EN.json",
        [{"concept_id": 1, "word_lemma": "hello"}, {"concept_id": 1, "word_lemma": "hi"}],
    )

    with caplog.at_level(logging.WARNING):
        repository = load_word_repository(make_settings(words_dir))

    assert len(repository.get_lemmas("en")) == 2
    assert any(record.getMessage() == "word_list_duplicate_concepts" for record in caplog.records)


def test_load_word_repository_rejects_duplicates_when_strict(tmp_path, make_settings) -> None:
    words_dir = tmp_path / "words"
    _write_json(
        words_dir / "EN.json",
        [{"concept_id": 1, "word_lemma": "hello"}, {"concept_id": 1, "word_lemma": "hi"}],
    )

    with pytest.raises(WordDataError, match="Duplicate concept ids in 'en'"):
        load_word_repository(make_settings(words_dir, reject_duplicate_concepts=True))
