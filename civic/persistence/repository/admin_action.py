"""PostgreSQL implementation of the admin audit log repository."""

from typing import List
from uuid import UUID

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import AdminAction
from civic.domain.repository import AdminActionRepository
from civic.domain.value import EntityType
from civic.persistence.mappers import admin_action_to_dict, row_to_admin_action
from civic.persistence.tables import admin_logs_table


class PostgresAdminActionRepository(AdminActionRepository):
    """PostgreSQL implementation of AdminActionRepository.

    Insert-only; rows are never updated or deleted.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, action: AdminAction) -> AdminAction:
        """Append an audit entry."""
        stmt = insert(admin_logs_table).values(**admin_action_to_dict(action))
        await self.session.execute(stmt)
        await self.session.flush()
        return action

    async def find_by_entity(
        self, entity_type: EntityType, entity_id: UUID
    ) -> List[AdminAction]:
        """Find audit entries for one entity, oldest first."""
        stmt = (
            select(admin_logs_table)
            .where(
                and_(
                    admin_logs_table.c.entity_type == entity_type.value,
                    admin_logs_table.c.entity_id == entity_id,
                )
            )
            .order_by(admin_logs_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_admin_action(row._asdict()) for row in result.fetchall()]
