from .create_incident import CreateIncidentUseCase, allocate_incident_id
from .list_incidents import ListIncidentsUseCase
from .get_incident import GetIncidentUseCase
from .get_incident_stats import GetIncidentStatsUseCase
from .update_incident_status import UpdateIncidentStatusUseCase
from .assign_incident import AssignIncidentUseCase

__all__ = [
    "CreateIncidentUseCase",
    "allocate_incident_id",
    "ListIncidentsUseCase",
    "GetIncidentUseCase",
    "GetIncidentStatsUseCase",
    "UpdateIncidentStatusUseCase",
    "AssignIncidentUseCase",
]
