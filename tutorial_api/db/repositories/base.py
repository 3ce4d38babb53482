from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select

# Type générique pour le modèle (Tutorial, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, get, find_all, save, delete.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Les erreurs SQLAlchemy (SQLAlchemyError) remontent telles quelles.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def find_all(self) -> Sequence[ModelT]:
        """Retourne tous les enregistrements, triés par id."""
        statement = select(self.model).order_by(self.model.id)
        return self.session.exec(statement).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement ; l'id est généré par la base."""
        entity = self.model(**fields)
        return self.save(entity)

    # ---------- UPDATE ----------

    def save(self, entity: ModelT) -> ModelT:
        """Persiste l'état courant de l'entité (insert ou écrasement complet)."""
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    # ---------- DELETE ----------

    def delete_by_id(self, id_: Any) -> None:
        """
        Supprime un enregistrement par son identifiant.
        Aucun contrôle d'existence : un id inconnu est ignoré.
        """
        entity = self.session.get(self.model, id_)
        if entity is not None:
            self.session.delete(entity)
        self.session.commit()

    def delete_all(self) -> None:
        """Supprime tous les enregistrements de la table."""
        for entity in self.session.exec(select(self.model)).all():
            self.session.delete(entity)
        self.session.commit()
