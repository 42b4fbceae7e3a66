"""SQLAlchemy-backed repository for group memberships."""

from sqlalchemy import select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.domain.models.ledger import Member
from src.domain.services.normalization import normalize_display_name
from src.infrastructure.schema import memberships, users


class SqlAlchemyMembershipRepository(MembershipRepositoryPort):
    """Membership reads over the users and memberships tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def is_member(self, group_id: int, member_id: int) -> bool:
        query = (
            select(memberships.c.id)
            .where(
                memberships.c.group_id == group_id,
                memberships.c.user_id == member_id,
            )
            .limit(1)
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return row is not None

    def fetch_members(self, group_id: int) -> list[Member]:
        query = (
            select(users.c.id, users.c.username)
            .join(memberships, memberships.c.user_id == users.c.id)
            .where(memberships.c.group_id == group_id)
            .order_by(users.c.id)
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            Member(
                member_id=row.id,
                display_name=normalize_display_name(row.username, row.id),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyMembershipRepository"]
