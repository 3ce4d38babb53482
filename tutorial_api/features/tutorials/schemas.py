"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

TutorialCreate → corps de requête POST (published est ignoré)

TutorialUpdate → corps PUT (écrasement complet)

TutorialOut → réponse de l’API
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TutorialCreate(BaseModel):
    title: Optional[str] = Field(None, examples=["Go"])
    description: Optional[str] = Field(None, examples=["Learn Go"])


class TutorialUpdate(BaseModel):
    # Pas de sémantique PATCH : un champ absent écrase avec sa valeur par défaut
    title: Optional[str] = Field(None, examples=["Go"])
    description: Optional[str] = Field(None, examples=["Learn Go"])
    published: bool = Field(False, examples=[True])

    @field_validator("published", mode="before")
    @classmethod
    def null_means_unpublished(cls, value):
        """`"published": null` équivaut à false, comme un champ absent."""
        return False if value is None else value


class TutorialOut(BaseModel):
    id: int
    title: Optional[str]
    description: Optional[str]
    published: bool

    model_config = {"from_attributes": True}
