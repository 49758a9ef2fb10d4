"""Constants for one-time code field names"""


class OtpFields:
    EMAIL = "email"
    OTP = "otp"
    PURPOSE = "purpose"
    CREATED_AT = "created_at"

    MONGO_ID = "_id"
