"""In-memory admin audit log repository for testing."""

from uuid import UUID

from civic.domain.model.admin_action import AdminAction
from civic.domain.repository.admin_action import AdminActionRepository
from civic.domain.value import EntityType


class InMemoryAdminActionRepository(AdminActionRepository):
    """In-memory implementation of AdminActionRepository for testing."""

    def __init__(self) -> None:
        self._actions: list[AdminAction] = []

    async def append(self, action: AdminAction) -> AdminAction:
        """Append an audit entry."""
        self._actions.append(action)
        return action

    async def find_by_entity(
        self, entity_type: EntityType, entity_id: UUID
    ) -> list[AdminAction]:
        """Find audit entries for one entity, oldest first."""
        return [
            a
            for a in self._actions
            if a.entity_type == entity_type and a.entity_id == entity_id
        ]

    def all(self) -> list[AdminAction]:
        """Every entry, in append order."""
        return list(self._actions)
