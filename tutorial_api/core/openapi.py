"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec une description
des conventions de l'API (codes 204 / 404 / 500 sans corps).
"""

from fastapi.openapi.utils import get_openapi


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API CRUD de tutoriels (FastAPI + SQLite).\n\n"
            "### Conventions\n"
            "- `204` : opération réussie sans résultat (liste vide, suppression).\n"
            "- `404` : aucun tutoriel pour l'identifiant demandé (corps vide).\n"
            "- `500` : erreur d'accès à la base, sans détail (corps vide).\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
