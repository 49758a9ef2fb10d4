"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    NAME = "name"
    ROLE = "role"
    DEPARTMENT = "department"
    IS_ACTIVE = "is_active"
    LAST_LOGIN = "last_login"
    REFRESH_TOKEN = "refresh_token"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
