"""Constants for Camera model field names"""


class CameraFields:
    """Field name constants for Camera model"""
    CAMERA_ID = "camera_id"
    NAME = "name"
    LOCATION = "location"
    RTSP_URL = "rtsp_url"
    UPLOADED_VIDEOS = "uploaded_videos"
    STATUS = "status"
    SPECIFICATIONS = "specifications"
    AI_CONFIG = "ai_config"
    STATISTICS = "statistics"
    MAINTENANCE = "maintenance"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # Nested paths used in queries and partial updates
    LOCATION_ZONE = "location.zone"
    AI_DETECTION_TYPES = "ai_config.detection_types"
    AI_SENSITIVITY = "ai_config.sensitivity"
    AI_CONFIDENCE_THRESHOLD = "ai_config.confidence_threshold"
    AI_ENABLED = "ai_config.enabled"
    STATS_TOTAL_DETECTIONS = "statistics.total_detections"
    STATS_LAST_DETECTION = "statistics.last_detection"
    MAINTENANCE_LAST = "maintenance.last_maintenance"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
