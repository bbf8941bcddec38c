# autofeature/database/core/main.py
from __future__ import annotations

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from autofeature.common.settings import get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _app_schema() -> str | None:
    s = _settings.db_schema
    return s if s and s.lower() != "public" else None


class Base(DeclarativeBase):
    # Default schema keeps DDL/autogenerate explicit and consistent
    metadata = MetaData(schema=_app_schema(), naming_convention=NAMING_CONVENTION)


engine = create_engine(
    _settings.database_url,                 # <- consistent with env.py
    echo=_settings.db.echo,
    pool_size=_settings.db.pool_size,
    max_overflow=_settings.db.max_overflow,
    pool_pre_ping=_settings.db.pool_pre_ping,
    pool_recycle=_settings.db.pool_recycle,
    future=True,
)

# App schema first, then public (so extensions remain visible)
if _app_schema():
    @event.listens_for(engine, "connect")
    def _set_search_path(dbapi_conn, _):
        with dbapi_conn.cursor() as cur:
            cur.execute(f'SET search_path TO "{_settings.db_schema}", public')


SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)
