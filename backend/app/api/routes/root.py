from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "wordflow vocabulary backend"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    words_ready = bool(getattr(request.app.state, "words_ready", False))
    payload: dict[str, object] = {
        "status": "ok" if words_ready else "degraded",
        "service": "backend",
        "components": {
            "words": "ok" if words_ready else "degraded",
        },
    }

    words_error = getattr(request.app.state, "words_error", None)
    if words_error:
        payload["words_error"] = str(words_error)

    return payload
