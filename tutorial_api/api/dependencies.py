"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_tutorial_repository() : crée un TutorialRepository à partir d’une session DB.

get_tutorial_service() : injecte ce repository dans un TutorialService.

🔹 Avantages :

Le stockage est passé explicitement au service (pas d'état global).

Facile à remplacer dans les tests (app.dependency_overrides).
"""

from fastapi import Depends
from sqlmodel import Session

from tutorial_api.db.session import get_session
from tutorial_api.db.repositories.tutorials import TutorialRepository
from tutorial_api.features.tutorials.services import TutorialService


def get_tutorial_repository(session: Session = Depends(get_session)) -> TutorialRepository:
    return TutorialRepository(session)


def get_tutorial_service(
    repo: TutorialRepository = Depends(get_tutorial_repository),
) -> TutorialService:
    return TutorialService(repo)
