"""
➡️ But : Définir la structure de la table des tutoriels (ORM).

Chaque champ = une colonne SQL. L'id est attribué par la base à l'insertion.
"""

from typing import Optional

from sqlmodel import SQLModel, Field


class Tutorial(SQLModel, table=True):
    __tablename__ = "tutorials"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = Field(default=None, description="Titre du tutoriel")
    description: Optional[str] = Field(default=None, description="Description libre")
    published: bool = Field(default=False, description="Tutoriel publié ou brouillon")
