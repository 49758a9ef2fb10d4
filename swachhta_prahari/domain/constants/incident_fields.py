"""Constants for Incident model field names"""


class IncidentFields:
    """Field name constants for Incident model"""
    INCIDENT_ID = "incident_id"
    SEQUENCE = "sequence"
    TYPE = "type"
    SEVERITY = "severity"
    STATUS = "status"
    CAMERA_ID = "camera_id"
    CAMERA_NAME = "camera_name"
    LOCATION = "location"
    DESCRIPTION = "description"
    AI_DETECTION = "ai_detection"
    EVIDENCE = "evidence"
    RESPONSE = "response"
    REPORT_INCLUDED = "report_included"
    IDEMPOTENCY_KEY = "idempotency_key"
    VERSION = "version"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    LOCATION_ZONE = "location.zone"
    CONFIDENCE = "ai_detection.confidence"
    ASSIGNED_TO = "response.assigned_to"
    ASSIGNED_AT = "response.assigned_at"
    ACTION_TAKEN = "response.action_taken"
    RESOLVED_AT = "response.resolved_at"
    RESOLVED_BY = "response.resolved_by"
    NOTES = "response.notes"

    # MongoDB specific
    MONGO_ID = "_id"


class CounterFields:
    """Field names for the atomic sequence counters collection"""
    MONGO_ID = "_id"
    SEQ = "seq"

    INCIDENT_SEQUENCE = "incident_sequence"
    REPORT_SEQUENCE = "report_sequence"
