"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.ticketing.app.service.seat_conflict_checker import SeatConflictChecker
from src.service.ticketing.app.service.ticket_dispatcher import TicketDispatcher
from src.service.ticketing.driven_adapter.delivery.smtp_ticket_delivery import SmtpTicketDelivery
from src.service.ticketing.driven_adapter.payment.razorpay_payment_gateway import (
    RazorpayPaymentGateway,
)
from src.service.ticketing.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.ticketing.driven_adapter.repo.show_command_repo_impl import ShowCommandRepoImpl
from src.service.ticketing.driven_adapter.repo.show_query_repo_impl import ShowQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database
    database = providers.Singleton(Database)

    # Repositories (stateless - open a session per call)
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    show_command_repo = providers.Singleton(
        ShowCommandRepoImpl, session_factory=database.provided.session
    )
    show_query_repo = providers.Singleton(
        ShowQueryRepoImpl, session_factory=database.provided.session
    )

    # External collaborators
    payment_gateway = providers.Singleton(RazorpayPaymentGateway, settings=config_service)
    ticket_delivery = providers.Singleton(SmtpTicketDelivery, settings=config_service)

    # Application services shared by several use cases
    seat_conflict_checker = providers.Singleton(
        SeatConflictChecker,
        booking_query_repo=booking_query_repo,
        settings=config_service,
    )
    ticket_dispatcher = providers.Singleton(
        TicketDispatcher,
        ticket_delivery=ticket_delivery,
        show_query_repo=show_query_repo,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
