"""
➡️ But : Orchestrer le stockage des tutoriels.

TutorialService : recopie les champs, force published=False à la création,
lève LookupError si l'id demandé n'existe pas.

Les erreurs d'accès à la base (SQLAlchemyError) ne sont pas interceptées ici :
c'est le routeur qui décide du code HTTP.

🔹 Avantages :

Code découplé du web.

Test unitaire possible avec un faux stockage.
"""

import logging
from typing import Optional, Sequence

from tutorial_api.db.models.tutorials import Tutorial
from tutorial_api.domain.repositories import TutorialStore

logger = logging.getLogger(__name__)


class TutorialService:
    def __init__(self, repo: TutorialStore):
        self.repo = repo

    def list(self, title: Optional[str] = None) -> Sequence[Tutorial]:
        if title is None:
            return self.repo.find_all()
        return self.repo.find_by_title_containing(title)

    def list_published(self) -> Sequence[Tutorial]:
        return self.repo.find_by_published(True)

    def get(self, tutorial_id: int) -> Tutorial:
        tutorial = self.repo.get(tutorial_id)
        if tutorial is None:
            raise LookupError(f"Tutorial {tutorial_id} not found")
        return tutorial

    def create(self, *, title: Optional[str], description: Optional[str]) -> Tutorial:
        tutorial = self.repo.create(title=title, description=description, published=False)
        logger.info("Tutorial created with ID: %s", tutorial.id, extra={"tutorial_id": tutorial.id})
        return tutorial

    def update(
        self,
        tutorial_id: int,
        *,
        title: Optional[str],
        description: Optional[str],
        published: bool,
    ) -> Tutorial:
        try:
            tutorial = self.get(tutorial_id)
        except LookupError:
            logger.warning("Tutorial not found with ID: %s", tutorial_id, extra={"tutorial_id": tutorial_id})
            raise
        tutorial.title = title
        tutorial.description = description
        tutorial.published = published
        updated = self.repo.save(tutorial)
        logger.info("Tutorial updated with ID: %s", tutorial_id, extra={"tutorial_id": tutorial_id})
        return updated

    def delete(self, tutorial_id: int) -> None:
        self.repo.delete_by_id(tutorial_id)
        logger.info("Tutorial deleted with ID: %s", tutorial_id, extra={"tutorial_id": tutorial_id})

    def delete_all(self) -> None:
        self.repo.delete_all()
        logger.info("All tutorials deleted")
