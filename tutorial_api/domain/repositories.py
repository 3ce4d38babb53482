"""
➡️ But : Décrire le contrat de stockage dont dépend le service des tutoriels.

TutorialStore : les huit opérations que toute implémentation doit fournir
(SQLModel en prod, faux stockage en mémoire dans les tests).

Chaque opération renvoie un résultat ou lève une SQLAlchemyError
(erreur d'accès à la base).
"""

from typing import Any, Optional, Protocol, Sequence

from tutorial_api.db.models.tutorials import Tutorial


class TutorialStore(Protocol):
    def create(self, **fields: Any) -> Tutorial: ...

    def get(self, id_: int) -> Optional[Tutorial]: ...

    def find_all(self) -> Sequence[Tutorial]: ...

    def find_by_title_containing(self, title: str) -> Sequence[Tutorial]: ...

    def find_by_published(self, published: bool) -> Sequence[Tutorial]: ...

    def save(self, entity: Tutorial) -> Tutorial: ...

    def delete_by_id(self, id_: int) -> None: ...

    def delete_all(self) -> None: ...
