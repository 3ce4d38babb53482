"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

CORS (origines autorisées, depuis settings.CORS_ORIGINS)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers (/api/tutorials).

Configure les logs et initialise la base au démarrage (@app.on_event("startup")).

Point unique d’exécution : uvicorn tutorial_api.main:app --reload
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tutorial_api.api.routers import tutorials
from tutorial_api.core.config import settings
from tutorial_api.core.observability import setup_logging
from tutorial_api.core.openapi import custom_openapi
from tutorial_api.db.session import init_db

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "tutorials", "description": "Opérations CRUD sur les tutoriels"},
    ],
)

# CORS : une seule origine autorisée par défaut (front de dev)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(tutorials.router, prefix="/api")


@app.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok"}


app.openapi = lambda: custom_openapi(app)


# Démarrage
@app.on_event("startup")
def on_startup():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    init_db()
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)


if __name__ == "__main__":
    uvicorn.run(
        "tutorial_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=(settings.ENV == "dev"),
    )
