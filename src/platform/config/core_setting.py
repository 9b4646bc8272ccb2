from pathlib import Path
from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Show Booking Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'show_booking'

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:'
            f'{self.POSTGRES_PASSWORD.get_secret_value()}@'
            f'{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Booking rules
    TICKET_PRICE: int = 30  # Price per seat, major currency units
    CURRENCY: str = 'INR'
    SEAT_HOLD_MINUTES: int = 10
    SEAT_ROWS: int = 6  # Rows A..F
    SEATS_PER_ROW: int = 10

    # Admin
    ADMIN_PASSWORD: SecretStr = SecretStr('admin123')
    ENABLE_TEST_BOOKING: bool = True  # Allows paid bookings without the payment gateway

    # Payment gateway (Razorpay compatible)
    PAYMENT_KEY_ID: str = 'rzp_test_key'
    PAYMENT_KEY_SECRET: SecretStr = SecretStr('test_payment_secret')
    PAYMENT_API_BASE_URL: str = 'https://api.razorpay.com/v1'
    PAYMENT_TIMEOUT_SECONDS: float = 10.0

    # Mail relay
    SMTP_HOST: str = 'smtp.gmail.com'
    SMTP_PORT: int = 587
    SMTP_USERNAME: str = ''
    SMTP_PASSWORD: SecretStr = SecretStr('')
    SMTP_START_TLS: bool = True
    MAIL_FROM: str = 'tickets@example.com'
    TICKET_BRAND_NAME: str = 'College Movie Night'


settings = Settings()  # type: ignore
