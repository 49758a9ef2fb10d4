# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Runtime
        self.environment: Final[str] = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.frontend_url: Final[str] = os.getenv("FRONTEND_URL", "http://localhost:3000")
        self.server_url: Final[str] = os.getenv("SERVER_URL", "")
        self.keep_alive_interval_seconds: Final[int] = int(
            os.getenv("KEEP_ALIVE_INTERVAL_SECONDS", "780")
        )

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "swachhta_prahari")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_refresh_secret_key: Final[str] = os.getenv(
            "JWT_REFRESH_SECRET_KEY", "change_this_refresh_secret_in_production"
        )
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
        )
        self.refresh_token_expire_minutes: Final[int] = int(
            os.getenv("REFRESH_TOKEN_EXPIRE_MINUTES", "10080")
        )
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))
        self.default_department: Final[str] = os.getenv("DEFAULT_DEPARTMENT", "UPSIDA")

        # Rate limiting (window in minutes, as deployed)
        self.rate_limit_window_minutes: Final[int] = int(os.getenv("RATE_LIMIT_WINDOW", "15"))
        self.rate_limit_max: Final[int] = int(os.getenv("RATE_LIMIT_MAX", "100"))
        self.webhook_rate_limit_max: Final[int] = int(os.getenv("WEBHOOK_RATE_LIMIT_MAX", "600"))
        self.webhook_secret: Final[str] = os.getenv("WEBHOOK_SECRET", "")

        # Email (SMTP) Configuration
        self.smtp_host: Final[str] = os.getenv("SMTP_HOST", "")
        self.smtp_port: Final[int] = int(os.getenv("SMTP_PORT", "465"))
        self.smtp_user: Final[str] = os.getenv("SMTP_USER", os.getenv("EMAIL_USER", ""))
        self.smtp_password: Final[str] = os.getenv("SMTP_PASSWORD", os.getenv("EMAIL_PASS", ""))
        self.smtp_use_tls: Final[bool] = _env_bool("SMTP_USE_TLS", "true")
        self.email_from: Final[str] = os.getenv("EMAIL_FROM", self.smtp_user)
        self.email_from_name: Final[str] = os.getenv("EMAIL_FROM_NAME", "Swachhta Prahari")

        # One-time codes
        self.otp_ttl_seconds: Final[int] = int(os.getenv("OTP_TTL_SECONDS", "600"))

        # Video storage (remote upload target)
        self.video_storage_url: Final[str] = os.getenv("VIDEO_STORAGE_URL", "")
        self.video_storage_api_key: Final[str] = os.getenv("VIDEO_STORAGE_API_KEY", "")
        self.video_storage_folder: Final[str] = os.getenv("VIDEO_STORAGE_FOLDER", "upsida/cameras")
        self.upload_tmp_dir: Final[str] = os.getenv("UPLOAD_TMP_DIR", "tmp")
        self.upload_max_mb: Final[int] = int(os.getenv("UPLOAD_MAX_MB", "10240"))

        # Reports
        self.reports_dir: Final[str] = os.getenv("REPORTS_DIR", "reports")
        self.report_project: Final[str] = os.getenv("REPORT_PROJECT", "Swachhta Prahari")
        self.report_site: Final[str] = os.getenv("REPORT_SITE", "UPSIDA Industrial Area")
        self.report_prepared_for: Final[str] = os.getenv("REPORT_PREPARED_FOR", "UPSIDA")
        self.report_prepared_by: Final[str] = os.getenv("REPORT_PREPARED_BY", "Swachhta Prahari AI")

        # Detection model metadata reported by /ai/model/status
        self.ai_model_version: Final[str] = os.getenv("AI_MODEL_VERSION", "1.2.3")
        self.total_camera_slots: Final[int] = int(os.getenv("TOTAL_CAMERA_SLOTS", "16"))

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.frontend_url.split(",") if origin.strip()]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
