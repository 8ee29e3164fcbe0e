"""SQLAlchemy persistence adapter."""

from budgetbook.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from budgetbook.infrastructure.persistence.sqlalchemy.factory import (
    SQLAlchemyLedgerFactory,
)
from budgetbook.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
    translate_store_error,
)

__all__ = [
    "SQLAlchemyLedgerFactory",
    "SQLAlchemyUnitOfWork",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
    "translate_store_error",
]
