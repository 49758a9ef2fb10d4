from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, Tuple, Dict, Any, Sequence, Union

from ..models.incident import Incident


@dataclass
class IncidentFilter:
    """Query criteria for incident listings; None means unconstrained"""
    type: Optional[str] = None
    severity: Optional[Union[str, Sequence[str]]] = None
    status: Optional[Union[str, Sequence[str]]] = None
    camera_id: Optional[str] = None
    zone: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class IncidentRepository(ABC):
    """Repository interface - defines contract for incident data access"""

    @abstractmethod
    async def create(self, incident: Incident) -> Incident:
        """Insert incident and return it with its storage id"""
        pass

    @abstractmethod
    async def find_by_id(self, incident_ref: str) -> Optional[Incident]:
        """Find incident by storage id or by incident id"""
        pass

    @abstractmethod
    async def find_by_idempotency_key(self, key: str) -> Optional[Incident]:
        """Find the incident created for a webhook delivery key"""
        pass

    @abstractmethod
    async def list(
        self,
        criteria: IncidentFilter,
        skip: int,
        limit: int,
        sort_by: str = "created_at",
        descending: bool = True,
    ) -> Tuple[int, List[Incident]]:
        """List incidents matching criteria, returning (total, items)"""
        pass

    @abstractmethod
    async def find_matching(self, criteria: IncidentFilter, limit: Optional[int] = None) -> List[Incident]:
        """Return all incidents matching criteria, newest first"""
        pass

    @abstractmethod
    async def count(self, criteria: IncidentFilter) -> int:
        """Count incidents matching criteria"""
        pass

    @abstractmethod
    async def update(
        self,
        incident_id: str,
        fields: Dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[Incident]:
        """
        Apply a partial update and increment the version.

        When expected_version is given the update only applies if the stored
        version matches. Returns None when no document was updated.
        """
        pass
