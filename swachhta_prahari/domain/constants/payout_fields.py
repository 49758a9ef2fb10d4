"""Constants for Payout model field names"""


class PayoutFields:
    """Field name constants for Payout model"""
    PAYOUT_KEY = "payout_key"
    DATE = "date"
    WORKER_COUNT = "worker_count"
    DAILY_WAGE = "daily_wage"
    STATUS = "status"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
