# Standard library imports
from dataclasses import asdict
from typing import Optional, List, Tuple, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.time_utils import utc_now
from ...domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ...domain.models.incident import (
    Incident,
    IncidentLocation,
    AIDetection,
    BoundingBox,
    Evidence,
    IncidentResponse,
)
from ...domain.constants import IncidentFields
from ...domain.exceptions import ConflictError
from .mongo_connection import get_incident_collection


def _in_or_eq(value):
    if isinstance(value, (list, tuple, set)):
        return {"$in": list(value)}
    return value


def build_incident_query(criteria: IncidentFilter) -> Dict[str, Any]:
    """Translate an IncidentFilter into a MongoDB query document."""
    query: Dict[str, Any] = {}
    if criteria.type:
        query[IncidentFields.TYPE] = _in_or_eq(criteria.type)
    if criteria.severity:
        query[IncidentFields.SEVERITY] = _in_or_eq(criteria.severity)
    if criteria.status:
        query[IncidentFields.STATUS] = _in_or_eq(criteria.status)
    if criteria.camera_id:
        query[IncidentFields.CAMERA_ID] = criteria.camera_id.strip().upper()
    if criteria.zone:
        query[IncidentFields.LOCATION_ZONE] = criteria.zone

    if criteria.start_date or criteria.end_date:
        created_query: Dict[str, Any] = {}
        if criteria.start_date:
            created_query["$gte"] = criteria.start_date
        if criteria.end_date:
            created_query["$lte"] = criteria.end_date
        query[IncidentFields.CREATED_AT] = created_query
    return query


class MongoIncidentRepository(IncidentRepository):
    """MongoDB implementation of IncidentRepository"""

    def __init__(self, incident_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.incident_collection = (
            incident_collection if incident_collection is not None else get_incident_collection()
        )

    async def create(self, incident: Incident) -> Incident:
        if not incident:
            raise ValueError("Incident cannot be None")

        try:
            doc = self._incident_to_dict(incident)
            now = utc_now()
            doc[IncidentFields.CREATED_AT] = incident.created_at or now
            doc[IncidentFields.UPDATED_AT] = now
            doc[IncidentFields.VERSION] = 0
            if not incident.idempotency_key:
                # Sparse unique index: the field must be absent, not null
                doc.pop(IncidentFields.IDEMPOTENCY_KEY, None)

            result = await self.incident_collection.insert_one(doc)
            doc[IncidentFields.MONGO_ID] = result.inserted_id
            return self._document_to_incident(doc)
        except DuplicateKeyError:
            raise ConflictError("Incident already exists")
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving incident: {str(e)}")

    async def find_by_id(self, incident_ref: str) -> Optional[Incident]:
        """
        Find incident by ID

        Args:
            incident_ref: MongoDB ObjectId string or incident ID (INC-...)

        Returns:
            Incident domain model if found, None otherwise
        """
        if not incident_ref:
            return None

        try:
            query = {IncidentFields.MONGO_ID: ObjectId(incident_ref)}
        except (InvalidId, ValueError, TypeError):
            query = {IncidentFields.INCIDENT_ID: incident_ref}

        try:
            document = await self.incident_collection.find_one(query)
            if document is None:
                return None
            return self._document_to_incident(document)
        except Exception as e:
            raise RuntimeError(f"Error finding incident: {str(e)}")

    async def find_by_idempotency_key(self, key: str) -> Optional[Incident]:
        if not key:
            return None
        try:
            document = await self.incident_collection.find_one({IncidentFields.IDEMPOTENCY_KEY: key})
            if document is None:
                return None
            return self._document_to_incident(document)
        except Exception as e:
            raise RuntimeError(f"Error finding incident by idempotency key: {str(e)}")

    async def list(
        self,
        criteria: IncidentFilter,
        skip: int,
        limit: int,
        sort_by: str = IncidentFields.CREATED_AT,
        descending: bool = True,
    ) -> Tuple[int, List[Incident]]:
        query = build_incident_query(criteria)
        direction = DESCENDING if descending else ASCENDING

        try:
            total = await self.incident_collection.count_documents(query)
            cursor = (
                self.incident_collection.find(query)
                .sort([(sort_by, direction), (IncidentFields.SEQUENCE, direction)])
                .skip(max(0, int(skip)))
                .limit(max(1, int(limit)))
            )
            items: List[Incident] = []
            async for doc in cursor:
                items.append(self._document_to_incident(doc))
            return total, items
        except Exception as e:
            raise RuntimeError(f"Error listing incidents: {str(e)}")

    async def find_matching(self, criteria: IncidentFilter, limit: Optional[int] = None) -> List[Incident]:
        try:
            cursor = self.incident_collection.find(build_incident_query(criteria)).sort(
                IncidentFields.CREATED_AT, DESCENDING
            )
            if limit:
                cursor = cursor.limit(int(limit))
            items: List[Incident] = []
            async for doc in cursor:
                items.append(self._document_to_incident(doc))
            return items
        except Exception as e:
            raise RuntimeError(f"Error querying incidents: {str(e)}")

    async def count(self, criteria: IncidentFilter) -> int:
        try:
            return await self.incident_collection.count_documents(build_incident_query(criteria))
        except Exception as e:
            raise RuntimeError(f"Error counting incidents: {str(e)}")

    async def update(
        self,
        incident_id: str,
        fields: Dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[Incident]:
        try:
            query: Dict[str, Any] = {IncidentFields.MONGO_ID: ObjectId(incident_id)}
        except (InvalidId, ValueError, TypeError):
            return None
        if expected_version is not None:
            query[IncidentFields.VERSION] = expected_version

        update_fields = dict(fields)
        update_fields[IncidentFields.UPDATED_AT] = utc_now()
        try:
            document = await self.incident_collection.find_one_and_update(
                query,
                {"$set": update_fields, "$inc": {IncidentFields.VERSION: 1}},
                return_document=ReturnDocument.AFTER,
            )
            if document is None:
                return None
            return self._document_to_incident(document)
        except Exception as e:
            raise RuntimeError(f"Error updating incident: {str(e)}")

    def _document_to_incident(self, doc: Dict[str, Any]) -> Incident:
        location = doc.get(IncidentFields.LOCATION) or {}
        detection = doc.get(IncidentFields.AI_DETECTION) or {}
        box = detection.get("bounding_box")
        evidence = doc.get(IncidentFields.EVIDENCE) or {}
        response = doc.get(IncidentFields.RESPONSE) or {}

        return Incident(
            id=str(doc.get(IncidentFields.MONGO_ID)),
            incident_id=doc.get(IncidentFields.INCIDENT_ID, ""),
            sequence=doc.get(IncidentFields.SEQUENCE),
            type=doc.get(IncidentFields.TYPE, ""),
            severity=doc.get(IncidentFields.SEVERITY, "low"),
            status=doc.get(IncidentFields.STATUS, "detected"),
            camera_id=doc.get(IncidentFields.CAMERA_ID, ""),
            camera_name=doc.get(IncidentFields.CAMERA_NAME),
            location=IncidentLocation(**location),
            description=doc.get(IncidentFields.DESCRIPTION, ""),
            ai_detection=AIDetection(
                confidence=detection.get("confidence", 0.0),
                model_version=detection.get("model_version", "unknown"),
                bounding_box=BoundingBox(**box) if box else None,
                processed_at=detection.get("processed_at"),
            ),
            evidence=Evidence(**evidence),
            response=IncidentResponse(**response),
            report_included=doc.get(IncidentFields.REPORT_INCLUDED, False),
            idempotency_key=doc.get(IncidentFields.IDEMPOTENCY_KEY),
            version=doc.get(IncidentFields.VERSION, 0),
            created_at=doc.get(IncidentFields.CREATED_AT),
            updated_at=doc.get(IncidentFields.UPDATED_AT),
        )

    def _incident_to_dict(self, incident: Incident) -> Dict[str, Any]:
        return {
            IncidentFields.INCIDENT_ID: incident.incident_id,
            IncidentFields.SEQUENCE: incident.sequence,
            IncidentFields.TYPE: incident.type,
            IncidentFields.SEVERITY: incident.severity,
            IncidentFields.STATUS: incident.status,
            IncidentFields.CAMERA_ID: incident.camera_id,
            IncidentFields.CAMERA_NAME: incident.camera_name,
            IncidentFields.LOCATION: asdict(incident.location),
            IncidentFields.DESCRIPTION: incident.description,
            IncidentFields.AI_DETECTION: asdict(incident.ai_detection),
            IncidentFields.EVIDENCE: asdict(incident.evidence),
            IncidentFields.RESPONSE: asdict(incident.response),
            IncidentFields.REPORT_INCLUDED: incident.report_included,
            IncidentFields.IDEMPOTENCY_KEY: incident.idempotency_key,
        }
