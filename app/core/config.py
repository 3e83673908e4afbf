"""Application configuration."""

from os import getenv

from pydantic import BaseModel


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "Campus Orders API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    database_url: str = getenv("DATABASE_URL", "sqlite:///./campus_orders.db")

    identity_jwt_key: str = getenv("IDENTITY_JWT_KEY", "dev-only-change-me-to-a-long-random-secret")
    identity_jwt_algorithms: list[str] = _split_csv(getenv("IDENTITY_JWT_ALGORITHMS", "HS256"))
    identity_audience: str | None = getenv("IDENTITY_AUDIENCE") or None
    identity_issuer: str | None = getenv("IDENTITY_ISSUER") or None

    recaptcha_secret_key: str = getenv("RECAPTCHA_SECRET_KEY", "")
    recaptcha_verify_url: str = getenv("RECAPTCHA_VERIFY_URL", "https://www.google.com/recaptcha/api/siteverify")
    recaptcha_timeout_seconds: float = float(getenv("RECAPTCHA_TIMEOUT_SECONDS", "5"))

    order_timezone: str = getenv("ORDER_TIMEZONE", "Asia/Karachi")
    orders_list_limit: int = int(getenv("ORDERS_LIST_LIMIT", "50"))
    orders_all_limit: int = int(getenv("ORDERS_ALL_LIMIT", "1000"))

    default_delivery_charge_per_person: int = int(getenv("DEFAULT_DELIVERY_CHARGE_PER_PERSON", "150"))
    default_account_title: str = getenv("DEFAULT_ACCOUNT_TITLE", "")
    default_bank_name: str = getenv("DEFAULT_BANK_NAME", "")
    default_account_number: str = getenv("DEFAULT_ACCOUNT_NUMBER", "")

    cors_allowed_origins: list[str] = _split_csv(
        getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:5174")
    )

    super_admin_subject_id: str = getenv("SUPER_ADMIN_SUBJECT_ID", "")
    super_admin_email: str = getenv("SUPER_ADMIN_EMAIL", "")


settings: Settings = Settings()
