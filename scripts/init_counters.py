# Raise counters.entity_id to the current max id across employees / leave_types / leave_requests
# Usage: set env DATABASE_URL, then run against the service database (e.g. after restoring a backup)
# Example: python scripts/init_counters.py

from sqlalchemy.orm import Session

from leave_service.core.config import settings
from leave_service.core.counters import ENTITY_ID, sync_counter
from leave_service.core.db import Base, make_engine
from leave_service.models import counter, record  # noqa: F401

engine = make_engine(settings.DATABASE_URL)
Base.metadata.create_all(bind=engine)

with Session(bind=engine) as session:
    seq = sync_counter(session, ENTITY_ID)
    session.commit()

print(f"Initialized counters.{ENTITY_ID}.seq to {seq}")
