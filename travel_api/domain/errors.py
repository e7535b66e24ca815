"""Domain exceptions for the travel booking service."""


class DomainError(Exception):
    """Base class for every domain error. `status_code` is the HTTP mapping."""

    status_code = 500

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Authentication / authorization ===


class UnauthorizedError(DomainError):
    """Missing or invalid bearer credential."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message=message, code="UNAUTHORIZED")


class ForbiddenError(DomainError):
    """Authenticated, but not allowed to perform the operation."""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message=message, code="FORBIDDEN")


# === Validation ===


class ValidationError(DomainError):
    """Missing or malformed input."""

    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class InvalidIdentifierError(DomainError):
    status_code = 400

    def __init__(self, entity: str, identifier: str):
        super().__init__(
            message=f"Invalid {entity} id format",
            code="INVALID_IDENTIFIER",
        )
        self.entity = entity
        self.identifier = identifier


class InvalidRoleError(DomainError):
    status_code = 400

    def __init__(self, role: str | None):
        super().__init__(message="Invalid role", code="INVALID_ROLE")
        self.role = role


# === Not found ===


class ItemNotFoundError(DomainError):
    """The package or resort does not exist."""

    status_code = 404

    def __init__(self, item_type: str, item_id: str):
        label = item_type.capitalize() if item_type else "Item"
        super().__init__(message=f"{label} not found", code="ITEM_NOT_FOUND")
        self.item_type = item_type
        self.item_id = item_id


class UserNotFoundError(DomainError):
    status_code = 404

    def __init__(self, email: str):
        super().__init__(message="User not found", code="USER_NOT_FOUND")
        self.email = email


class BookingNotFoundError(DomainError):
    status_code = 404

    def __init__(self, booking_id: str):
        super().__init__(message="Booking not found", code="BOOKING_NOT_FOUND")
        self.booking_id = booking_id


# === Payments ===


class PaymentNotFoundError(DomainError):
    """The payment authority has no record of the payment reference."""

    status_code = 404

    def __init__(self, payment_id: str):
        super().__init__(message=f"Payment not found: {payment_id}", code="PAYMENT_NOT_FOUND")
        self.payment_id = payment_id


class PaymentNotSucceededError(DomainError):
    status_code = 400

    def __init__(self, payment_id: str, current_status: str):
        super().__init__(message="Payment not successful", code="PAYMENT_NOT_SUCCEEDED")
        self.payment_id = payment_id
        self.current_status = current_status


class AmountMismatchError(DomainError):
    """The charged amount differs from the amount recomputed from the catalog."""

    status_code = 400

    def __init__(
        self,
        payment_id: str,
        charged_amount: int,
        charged_currency: str,
        expected_amount: int,
        expected_currency: str,
    ):
        super().__init__(
            message="Payment amount does not match the booking price",
            code="AMOUNT_MISMATCH",
        )
        self.payment_id = payment_id
        self.charged_amount = charged_amount
        self.charged_currency = charged_currency
        self.expected_amount = expected_amount
        self.expected_currency = expected_currency


class PaymentItemMismatchError(DomainError):
    """The payment was created for a different catalog item than the one being confirmed."""

    status_code = 400

    def __init__(self, payment_id: str):
        super().__init__(
            message="Payment was not made for this item",
            code="PAYMENT_ITEM_MISMATCH",
        )
        self.payment_id = payment_id


class BookingAlreadyConfirmedError(DomainError):
    """A booking already exists for the payment reference."""

    status_code = 409

    def __init__(self, payment_id: str, booking_id: str | None = None):
        super().__init__(
            message="Booking already confirmed for this payment",
            code="ALREADY_CONFIRMED",
        )
        self.payment_id = payment_id
        self.booking_id = booking_id


class PaymentGatewayError(DomainError):
    """The payment authority could not be reached or rejected the call."""

    status_code = 500

    def __init__(self, message: str = "Payment provider unavailable"):
        super().__init__(message=message, code="PAYMENT_GATEWAY_ERROR")
