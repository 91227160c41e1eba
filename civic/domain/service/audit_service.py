"""Admin audit log domain service."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

import logfire

from civic.domain.model.admin_action import AdminAction
from civic.domain.repository import AdminActionRepository
from civic.domain.value import AdminActionId, AdminActionType, EntityType

from .base import Service


class AuditService(Service):
    """Appends admin mutations to the audit log."""

    def __init__(self, admin_action_repository: AdminActionRepository) -> None:
        """Initialize audit service.

        Args:
            admin_action_repository: Admin action repository
        """
        self.admin_action_repository = admin_action_repository

    async def record(
        self,
        action: AdminActionType,
        entity_type: EntityType,
        entity_id: UUID,
        details: dict[str, Any] | None = None,
    ) -> AdminAction:
        """Append one audit entry.

        Args:
            action: What the admin did
            entity_type: Kind of entity touched
            entity_id: ID of the entity touched
            details: JSON-serializable snapshot of the entity

        Returns:
            The stored entry
        """
        with logfire.span(
            "audit_service.record",
            action=action.value,
            entity_type=entity_type.value,
            entity_id=str(entity_id),
        ):
            entry = AdminAction(
                id=AdminActionId(uuid4()),
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                details=details or {},
                created_at=datetime.now(),
            )
            stored = await self.admin_action_repository.append(entry)
            logfire.info(
                "Admin action recorded",
                action_id=str(stored.id),
                action=action.value,
                entity_type=entity_type.value,
                entity_id=str(entity_id),
            )
            return stored
