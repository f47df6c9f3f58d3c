from app.services.use_cases.quiz import QuizUseCase
from app.services.use_cases.vocabulary import VocabularyUseCase

__all__ = ["QuizUseCase", "VocabularyUseCase"]
