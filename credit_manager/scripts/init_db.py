"""Create tables and the operator account.

Run once per environment:
    python -m credit_manager.scripts.init_db
"""

import logging

from credit_manager.config import settings
from credit_manager.infrastructure.database.models import Base
from credit_manager.infrastructure.database.session import SessionLocal, engine
from credit_manager.infrastructure.observability.logging import setup_logging
from credit_manager.services.auth import ensure_user


def main() -> None:
    setup_logging(settings.log_level)

    Base.metadata.create_all(bind=engine)
    logging.info("Tables created/checked")

    db = SessionLocal()
    try:
        created = ensure_user(db, settings.admin_email, settings.admin_password, settings.admin_name)
    finally:
        db.close()

    if created:
        logging.info("Operator account created", extra={"email": settings.admin_email})
    else:
        logging.info("Operator account already exists", extra={"email": settings.admin_email})


if __name__ == "__main__":
    main()
