"""Admin audit log repository interface."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from civic.domain.model.admin_action import AdminAction
from civic.domain.value import EntityType


class AdminActionRepository(ABC):
    """Repository for the append-only admin audit log."""

    @abstractmethod
    async def append(self, action: AdminAction) -> AdminAction:
        """Append an entry to the audit log.

        Args:
            action: The entry to append

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_by_entity(
        self, entity_type: EntityType, entity_id: UUID
    ) -> List[AdminAction]:
        """Find audit entries for one entity, oldest first.

        Not used by request handling; exists for operators and tests.

        Args:
            entity_type: Kind of entity
            entity_id: Entity ID

        Returns:
            Matching audit entries
        """
        pass
