# tutorial_api/db/repositories/tutorials.py
from typing import Sequence

from sqlmodel import col, select

from tutorial_api.db.repositories.base import BaseRepository
from tutorial_api.db.models.tutorials import Tutorial


class TutorialRepository(BaseRepository[Tutorial]):
    """
    Repository pour la table tutorials.
    Hérite du CRUD générique de BaseRepository.
    Contient uniquement les requêtes spécifiques à Tutorial.
    """
    model = Tutorial

    def find_by_title_containing(self, title: str) -> Sequence[Tutorial]:
        """Tutoriels dont le titre contient `title`, sans tenir compte de la casse."""
        stmt = (
            select(Tutorial)
            # autoescape : '%' et '_' dans la recherche sont pris littéralement
            .where(col(Tutorial.title).icontains(title, autoescape=True))
            .order_by(Tutorial.id)
        )
        return self.session.exec(stmt).all()

    def find_by_published(self, published: bool) -> Sequence[Tutorial]:
        stmt = (
            select(Tutorial)
            .where(Tutorial.published == published)
            .order_by(Tutorial.id)
        )
        return self.session.exec(stmt).all()
