"""
Test Configuration and Fixtures

Architecture:
- Unit tests (test/**/unit/): in-memory fakes from
  test/service/ticketing/conftest.py, no database
- Integration tests (test/**/integration/): repo impls against PostgreSQL
- API tests (test/**/api/): TestClient over the real app, container providers
  overridden with the same fakes
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built when their modules are imported
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['POSTGRES_DB'] = 'show_booking_test_db'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

# =============================================================================
# Regular imports (after environment setup)
# =============================================================================
from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from pydantic import SecretStr  # noqa: E402
import uuid_utils  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.service.ticketing.domain.entity.show_entity import ShowEntity  # noqa: E402


TEST_PAYMENT_SECRET = 'test_payment_secret'
TEST_ADMIN_PASSWORD = 'admin123'


@pytest.fixture
def test_settings() -> Settings:
    """Pinned business constants, independent of any local .env"""
    return Settings(
        TICKET_PRICE=30,
        CURRENCY='INR',
        SEAT_HOLD_MINUTES=10,
        SEAT_ROWS=6,
        SEATS_PER_ROW=10,
        ADMIN_PASSWORD=SecretStr(TEST_ADMIN_PASSWORD),
        ENABLE_TEST_BOOKING=True,
        PAYMENT_KEY_ID='rzp_test_key',
        PAYMENT_KEY_SECRET=SecretStr(TEST_PAYMENT_SECRET),
        PAYMENT_API_BASE_URL='https://api.razorpay.test/v1',
        SMTP_HOST='smtp.test',
        SMTP_PORT=2525,
        SMTP_USERNAME='',
        SMTP_PASSWORD=SecretStr(''),
        MAIL_FROM='tickets@movienight.test',
        TICKET_BRAND_NAME='College Movie Night',
    )


@pytest.fixture
def sample_show() -> ShowEntity:
    return ShowEntity(
        id=uuid_utils.uuid7(),
        name='Interstellar',
        screen='Main Auditorium',
        starts_at=datetime.now(timezone.utc) + timedelta(days=3),
        is_active=True,
        created_at=datetime.now(timezone.utc),
    )
