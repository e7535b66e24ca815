from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.api.deps import get_app_settings, get_db_session
from travel_api.application.interfaces.clock import Clock
from travel_api.application.interfaces.identity_verifier import CallerIdentity, IdentityVerifier
from travel_api.application.use_cases.admin_overview import AdminOverviewUseCase
from travel_api.application.use_cases.catalog_items import (
    CreateCatalogItemUseCase,
    DeleteCatalogItemUseCase,
    GetCatalogItemUseCase,
    ListCatalogItemsUseCase,
    UpdateCatalogItemUseCase,
)
from travel_api.application.use_cases.confirm_booking import ConfirmBookingUseCase
from travel_api.application.use_cases.create_payment_intent import CreatePaymentIntentUseCase
from travel_api.application.use_cases.delete_booking import DeleteBookingUseCase
from travel_api.application.use_cases.ensure_admin import EnsureAdminUseCase
from travel_api.application.use_cases.get_booking import GetBookingUseCase
from travel_api.application.use_cases.get_user_profile import GetUserProfileUseCase
from travel_api.application.use_cases.list_bookings import ListBookingsUseCase
from travel_api.application.use_cases.list_user_bookings import ListUserBookingsUseCase
from travel_api.application.use_cases.list_users import ListUsersUseCase
from travel_api.application.use_cases.register_user import RegisterUserUseCase
from travel_api.application.use_cases.update_user_role import UpdateUserRoleUseCase
from travel_api.config import Settings
from travel_api.domain.errors import UnauthorizedError
from travel_api.infrastructure.db.repositories.booking_repo_sql import BookingRepoSQL
from travel_api.infrastructure.db.repositories.catalog_repo_sql import CatalogRepoSQL
from travel_api.infrastructure.db.repositories.user_repo_sql import UserRepoSQL
from travel_api.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from travel_api.infrastructure.in_memory import (
    InMemoryBookingRepo,
    InMemoryCatalogRepo,
    InMemoryUserRepo,
    NoopTransactionManager,
    StubStripeGateway,
)


def build_in_memory_bundle() -> dict:
    return {
        "catalog_repo": InMemoryCatalogRepo(),
        "booking_repo": InMemoryBookingRepo(),
        "user_repo": InMemoryUserRepo(),
        "stripe_gateway": StubStripeGateway(),
        "tx_manager": NoopTransactionManager(),
    }


def _build_use_cases(
    catalog_repo,
    booking_repo,
    user_repo,
    stripe_gateway,
    tx_manager,
    clock: Clock,
    currency: str,
) -> dict:
    return {
        "create_payment_intent": CreatePaymentIntentUseCase(
            catalog_repo=catalog_repo,
            stripe_gateway=stripe_gateway,
            currency=currency,
        ),
        "confirm_booking": ConfirmBookingUseCase(
            catalog_repo=catalog_repo,
            booking_repo=booking_repo,
            stripe_gateway=stripe_gateway,
            transaction_manager=tx_manager,
            clock=clock,
            currency=currency,
        ),
        "list_user_bookings": ListUserBookingsUseCase(booking_repo=booking_repo),
        "list_bookings": ListBookingsUseCase(booking_repo=booking_repo),
        "get_booking": GetBookingUseCase(booking_repo=booking_repo),
        "delete_booking": DeleteBookingUseCase(
            booking_repo=booking_repo,
            user_repo=user_repo,
            transaction_manager=tx_manager,
        ),
        "register_user": RegisterUserUseCase(
            user_repo=user_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "get_user_profile": GetUserProfileUseCase(user_repo=user_repo),
        "list_users": ListUsersUseCase(user_repo=user_repo),
        "update_user_role": UpdateUserRoleUseCase(
            user_repo=user_repo,
            transaction_manager=tx_manager,
        ),
        "ensure_admin": EnsureAdminUseCase(user_repo=user_repo),
        "create_catalog_item": CreateCatalogItemUseCase(
            catalog_repo=catalog_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "list_catalog_items": ListCatalogItemsUseCase(catalog_repo=catalog_repo),
        "get_catalog_item": GetCatalogItemUseCase(catalog_repo=catalog_repo),
        "update_catalog_item": UpdateCatalogItemUseCase(
            catalog_repo=catalog_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "delete_catalog_item": DeleteCatalogItemUseCase(
            catalog_repo=catalog_repo,
            transaction_manager=tx_manager,
        ),
        "admin_overview": AdminOverviewUseCase(
            booking_repo=booking_repo,
            user_repo=user_repo,
            catalog_repo=catalog_repo,
            clock=clock,
        ),
    }


def get_use_cases(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    session: AsyncSession | None = Depends(get_db_session),
) -> dict:
    state = request.app.state
    if settings.use_in_memory:
        bundle = state.bundle
        return _build_use_cases(
            catalog_repo=bundle["catalog_repo"],
            booking_repo=bundle["booking_repo"],
            user_repo=bundle["user_repo"],
            stripe_gateway=bundle["stripe_gateway"],
            tx_manager=bundle["tx_manager"],
            clock=state.clock,
            currency=settings.stripe_currency,
        )

    if not session:
        raise RuntimeError("DB session not available")

    return _build_use_cases(
        catalog_repo=CatalogRepoSQL(session),
        booking_repo=BookingRepoSQL(session),
        user_repo=UserRepoSQL(session),
        stripe_gateway=state.stripe_gateway,
        tx_manager=SQLAlchemyTransactionManager(session),
        clock=state.clock,
        currency=settings.stripe_currency,
    )


def get_identity_verifier(request: Request) -> IdentityVerifier:
    return request.app.state.identity_verifier


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_current_identity(
    authorization: str | None = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> CallerIdentity:
    token = _bearer_token(authorization)
    if not token:
        raise UnauthorizedError()
    return await verifier.verify(token)


async def get_optional_identity(
    authorization: str | None = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> CallerIdentity | None:
    token = _bearer_token(authorization)
    if not token:
        return None
    return await verifier.verify(token)


async def require_admin(
    identity: CallerIdentity = Depends(get_current_identity),
    use_cases: dict = Depends(get_use_cases),
) -> CallerIdentity:
    await use_cases["ensure_admin"].execute(identity)
    return identity
