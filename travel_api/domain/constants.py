ITEM_TYPE_PACKAGE = "package"
ITEM_TYPE_RESORT = "resort"
ITEM_TYPES = (ITEM_TYPE_PACKAGE, ITEM_TYPE_RESORT)

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)

BOOKING_STATUS_PAID = "paid"

PAYMENT_STATUS_PENDING = "pending"
PAYMENT_STATUS_SUCCEEDED = "succeeded"
PAYMENT_STATUS_FAILED = "failed"

DEFAULT_CURRENCY = "usd"
MINOR_UNITS_PER_MAJOR = 100

# Largest guest or night count accepted on a booking request.
MAX_QUANTITY = 1000
# Stripe caps a single charge at eight digits in minor units.
MAX_MINOR_AMOUNT = 99_999_999

MAX_OVERVIEW_DAYS = 3650
MAX_PAGE = 100_000
MAX_PAGE_SIZE = 100
