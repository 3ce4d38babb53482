from tutorial_api.core.config import settings
from tutorial_api.core.observability import setup_logging
from tutorial_api.db.session import engine, Session, init_db

from tutorial_api.db.seed import seed_all


def run_seed():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    init_db()
    with Session(engine) as session:
        seed_all(session)


if __name__ == "__main__":
    run_seed()
