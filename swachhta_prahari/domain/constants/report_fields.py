"""Constants for Report model field names"""


class ReportFields:
    """Field name constants for Report model"""
    REPORT_ID = "report_id"
    TYPE = "type"
    PROJECT = "project"
    SITE = "site"
    PREPARED_FOR = "prepared_for"
    PREPARED_BY = "prepared_by"
    PERIOD = "period"
    EXECUTIVE_SUMMARY = "executive_summary"
    INCIDENTS = "incidents"
    ANALYTICS = "analytics"
    CONCLUSION = "conclusion"
    FILE_INFO = "file_info"
    DELIVERY_STATUS = "delivery_status"
    GENERATED_BY = "generated_by"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"
