"""
➡️ But : Définir les endpoints /api/tutorials.

Réceptionne les requêtes HTTP, appelle TutorialService, traduit le résultat :

liste vide → 204 sans corps

LookupError → 404 sans corps

SQLAlchemyError → 500 sans corps (détail seulement dans les logs)

get_one et update n'interceptent pas SQLAlchemyError : l'erreur remonte
jusqu'au gestionnaire par défaut de FastAPI (500).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError

from tutorial_api.api.dependencies import get_tutorial_service
from tutorial_api.features.tutorials.schemas import TutorialCreate, TutorialUpdate, TutorialOut
from tutorial_api.features.tutorials.services import TutorialService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tutorials",
    tags=["tutorials"],
)

_EMPTY = {204: {"description": "Aucun tutoriel"}}
_NOT_FOUND = {404: {"description": "Not Found"}}
_ERROR = {500: {"description": "Erreur d'accès à la base"}}

# Identifiant sur 64 bits signés : au-delà, 422 avant tout accès à la base
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _list_or_no_content(items):
    if not items:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [TutorialOut.model_validate(i) for i in items]


@router.get(
    "",
    summary="Lister les tutoriels",
    description="Retourne tous les tutoriels, ou ceux dont le titre contient `title` (insensible à la casse).",
    response_model=List[TutorialOut],
    responses={**_EMPTY, **_ERROR},
)
def list_tutorials(
    title: Optional[str] = Query(None, description="Sous-chaîne recherchée dans le titre"),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        return _list_or_no_content(svc.list(title=title))
    except SQLAlchemyError:
        logger.exception("Error retrieving tutorials")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# Déclarée avant /{tutorial_id} pour ne pas être capturée par le paramètre
@router.get(
    "/published",
    summary="Lister les tutoriels publiés",
    response_model=List[TutorialOut],
    responses={**_EMPTY, **_ERROR},
)
def list_published(svc: TutorialService = Depends(get_tutorial_service)):
    try:
        return _list_or_no_content(svc.list_published())
    except SQLAlchemyError:
        logger.exception("Error retrieving published tutorials")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get(
    "/{tutorial_id}",
    summary="Récupérer un tutoriel",
    response_model=TutorialOut,
    responses=_NOT_FOUND,
)
def get_tutorial(
    tutorial_id: int = Path(..., ge=_MIN_ID, le=_MAX_ID),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        return svc.get(tutorial_id)
    except LookupError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post(
    "",
    summary="Créer un tutoriel",
    description="`published` est toujours initialisé à false, quelle que soit la valeur envoyée.",
    status_code=status.HTTP_201_CREATED,
    response_model=TutorialOut,
    responses=_ERROR,
)
def create_tutorial(payload: TutorialCreate, svc: TutorialService = Depends(get_tutorial_service)):
    try:
        return svc.create(title=payload.title, description=payload.description)
    except SQLAlchemyError:
        logger.exception("Error creating tutorial")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.put(
    "/{tutorial_id}",
    summary="Remplacer un tutoriel",
    description="Écrase title, description et published avec les valeurs reçues.",
    response_model=TutorialOut,
    responses=_NOT_FOUND,
)
def update_tutorial(
    payload: TutorialUpdate,
    tutorial_id: int = Path(..., ge=_MIN_ID, le=_MAX_ID),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        return svc.update(
            tutorial_id,
            title=payload.title,
            description=payload.description,
            published=payload.published,
        )
    except LookupError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.delete(
    "/{tutorial_id}",
    summary="Supprimer un tutoriel",
    description="Suppression inconditionnelle : un id inconnu renvoie aussi 204.",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERROR,
)
def delete_tutorial(
    tutorial_id: int = Path(..., ge=_MIN_ID, le=_MAX_ID),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        svc.delete(tutorial_id)
    except SQLAlchemyError:
        logger.exception("Error deleting tutorial with ID: %s", tutorial_id, extra={"tutorial_id": tutorial_id})
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "",
    summary="Supprimer tous les tutoriels",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERROR,
)
def delete_all_tutorials(svc: TutorialService = Depends(get_tutorial_service)):
    try:
        svc.delete_all()
    except SQLAlchemyError:
        logger.exception("Error deleting all tutorials")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
