"""Admin audit log entry."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import AdminActionId, AdminActionType, EntityType


class AdminAction(DomainModel):
    """Record of one admin create/delete.

    Write-only: the application appends these and never reads them back.
    """

    id: AdminActionId
    action: AdminActionType
    entity_type: EntityType
    entity_id: UUID
    details: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
