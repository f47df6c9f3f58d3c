from fastapi.testclient import TestClient

import app.main as main_module
from app.main import create_app



def test_application_imports_and_starts(test_settings, sample_repository_factory) -> None:
    app = create_app(test_settings, word_repository_factory=sample_repository_factory)
    client = TestClient(app)

    response = client.get("/api/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_app_starts_with_unknown_log_level_in_env(monkeypatch, sample_repository_factory) -> None:
    monkeypatch.setenv("WORDFLOW_LOG_LEVEL", "verbose")

    app = create_app(word_repository_factory=sample_repository_factory)

    assert app.state.settings.log_level == "INFO"
    with TestClient(app) as client:
        assert client.get("/api/health").json()["status"] == "ok"


def test_run_serves_app_on_configured_host_and_port(monkeypatch, make_settings, tmp_path) -> None:
    calls = []
    monkeypatch.setattr(main_module.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main_module.run(make_settings(tmp_path, host="0.0.0.0", port=9001))

    assert len(calls) == 1
    served_app, options = calls[0]
    assert served_app is main_module.app
    assert options["host"] == "0.0.0.0"
    assert options["port"] == 9001
