from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import Settings, load_settings
from app.core.logging import configure_logging
from app.services.matching import ConceptMatcher
from app.words.loader import load_word_repository
from app.words.repository import WordRepository

configure_logging()
logger = logging.getLogger(__name__)


def _default_word_repository_factory(settings: Settings) -> WordRepository:
    return load_word_repository(settings)


def create_app(
    settings: Settings | None = None,
    word_repository_factory: Callable[[Settings], WordRepository] = _default_word_repository_factory,
) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        repository: WordRepository | None = None
        matcher: ConceptMatcher | None = None
        try:
            repository = word_repository_factory(app_settings)
            matcher = ConceptMatcher(repository)
            # Warm the global facets before the first request needs them.
            global_facets = matcher.global_facets
            app.state.words_ready = True
            app.state.words_error = None
        except Exception as exc:
            repository = None
            matcher = None
            global_facets = None
            app.state.words_ready = False
            app.state.words_error = str(exc)
            logger.exception(
                "backend_words_startup_failed",
                extra={"words_dir": str(app_settings.words_dir)},
            )
        app.state.word_repository = repository
        app.state.concept_matcher = matcher

        logger.info(
            "backend_startup",
            extra={
                "status": "ok" if app.state.words_ready else "degraded",
                "environment": app_settings.environment,
                "words_dir": str(app_settings.words_dir),
                "host": app_settings.host,
                "port": app_settings.port,
                "words_error": app.state.words_error,
                "words": repository.metadata() if repository else None,
                "levels": list(global_facets.levels) if global_facets else [],
                "category_count": len(global_facets.categories) if global_facets else 0,
            },
        )
        yield

    app = FastAPI(title="Wordflow Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.words_ready = False
    app.state.words_error = None
    app.state.word_repository = None
    app.state.concept_matcher = None
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


def run(settings: Settings | None = None) -> None:
    serve_settings = settings or app.state.settings
    uvicorn.run(
        app,
        host=serve_settings.host,
        port=serve_settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
