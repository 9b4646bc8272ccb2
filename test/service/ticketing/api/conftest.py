"""
API test configuration

Test app without database or tracing exporter. The container's storage,
gateway and delivery providers are overridden with the in-memory fakes and
the app is driven through TestClient.
"""

from collections.abc import AsyncIterator, Generator
from contextlib import ExitStack, asynccontextmanager

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🧪 [Test App] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    yield

    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


@pytest.fixture(scope='session')
def app() -> FastAPI:
    return create_app(
        lifespan=lifespan_for_tests,
        title_suffix=' (Test)',
        description='Test Application - in-memory storage, no payment gateway or SMTP',
        service_name='test-show-booking-service',
    )


@pytest.fixture
def client(
    app, test_settings, booking_repo, show_repo, payment_gateway, ticket_delivery
) -> Generator[TestClient, None, None]:
    overrides = [
        (container.config_service, test_settings),
        (container.booking_command_repo, booking_repo),
        (container.booking_query_repo, booking_repo),
        (container.show_command_repo, show_repo),
        (container.show_query_repo, show_repo),
        (container.payment_gateway, payment_gateway),
        (container.ticket_delivery, ticket_delivery),
    ]

    # Checker and dispatcher are singletons built from the overridden providers
    container.reset_singletons()
    with ExitStack() as stack:
        for provider, fake in overrides:
            stack.enter_context(provider.override(providers.Object(fake)))
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    container.reset_singletons()
