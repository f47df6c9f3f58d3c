from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import create_app


def test_check_answers_returns_score_and_per_answer_results(test_settings, sample_repository_factory) -> None:
    app = create_app(test_settings, word_repository_factory=sample_repository_factory)

    with TestClient(app) as client:
        response = client.post(
            "/api/quiz/check",
            json={
                "source_lang": "en",
                "target_lang": "es",
                "answers": [
                    {"concept_id": 1, "answer": "HOLA"},
                    {"concept_id": 2, "answer": "agua "},
                    {"concept_id": 3, "answer": "ninos"},
                ],
            },
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["correct_count"] == 2
    assert payload["total"] == 3
    assert payload["percentage"] == 67
    assert payload["message"] == "Keep learning! Practice makes perfect!"
    assert payload["results"][2] == {
        "concept_id": 3,
        "source_text": "children",
        "answer": "ninos",
        "expected": "niños",
        "correct": False,
    }


def test_check_answers_perfect_score(test_settings, sample_repository_factory) -> None:
    app = create_app(test_settings, word_repository_factory=sample_repository_factory)

    with TestClient(app) as client:
        response = client.post(
            "/api/quiz/check",
            json={
                "source_lang": "en",
                "target_lang": "de",
                "answers": [{"concept_id": 1, "answer": "Hallo"}],
            },
        )

    assert response.status_code == 200
    assert response.json()["percentage"] == 100
    assert response.json()["message"] == "Perfect score! Well done!"


def test_check_answers_rejects_untranslated_concept(test_settings, sample_repository_factory) -> None:
    app = create_app(test_settings, word_repository_factory=sample_repository_factory)

    with TestClient(app) as client:
        response = client.post(
            "/api/quiz/check",
            json={
                "source_lang": "en",
                "target_lang": "es",
                "answers": [{"concept_id": 5, "answer": "libertad"}],
            },
        )

    assert response.status_code == 400
    assert "no en->es translation" in response.json()["detail"]


def test_check_answers_requires_language_codes(test_settings, sample_repository_factory) -> None:
    app = create_app(test_settings, word_repository_factory=sample_repository_factory)

    with TestClient(app) as client:
        response = client.post("/api/quiz/check", json={"source_lang": "", "target_lang": "es"})

    assert response.status_code == 422
