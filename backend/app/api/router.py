from fastapi import APIRouter

from app.api.routes.quiz import router as quiz_router
from app.api.routes.root import router as root_router
from app.api.routes.vocabulary import router as vocabulary_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(vocabulary_router)
api_router.include_router(quiz_router)
