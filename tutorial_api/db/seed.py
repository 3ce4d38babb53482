import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session, select

from tutorial_api.db.models.tutorials import Tutorial

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).with_name("seed_data.yaml")


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed Tutorials
# -----------------------------
def seed_tutorials(session: Session, data: Dict[str, Any]) -> int:
    """Insère les tutoriels du YAML si la table est vide. Retourne le nombre inséré."""
    if session.exec(select(Tutorial)).first():
        logger.info("Les tutoriels existent déjà, aucune insertion effectuée.")
        return 0

    tutorials: List[Dict[str, Any]] = data.get("tutorials") or []
    if not tutorials:
        logger.warning("Aucun tutoriel dans le YAML (clé 'tutorials').")
        return 0

    session.add_all([
        Tutorial(
            title=t.get("title"),
            description=t.get("description"),
            published=bool(t.get("published", False)),
        )
        for t in tutorials
    ])
    session.commit()
    logger.info("%d tutoriels insérés.", len(tutorials))
    return len(tutorials)


# -----------------------------
# Main entrypoint
# -----------------------------
def seed_all(session: Session, seed_path: str | Path = DEFAULT_SEED_PATH) -> int:
    data = load_seed_yaml(seed_path)
    return seed_tutorials(session, data)
