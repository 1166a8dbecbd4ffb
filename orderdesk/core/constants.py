ORDER_STATUS_DRAFT = "draft"
ORDER_STATUS_CONFIRMED = "confirmed"
ORDER_STATUS_PRODUCTION = "production"
ORDER_STATUS_DONE = "done"

# Pipeline order matters: forward-only transitions compare positions.
ORDER_STATUSES = (
    ORDER_STATUS_DRAFT,
    ORDER_STATUS_CONFIRMED,
    ORDER_STATUS_PRODUCTION,
    ORDER_STATUS_DONE,
)

DEFAULT_MIN_QUANTITY = 10
DEFAULT_INVENTORY_CATEGORY = "General"
SYNC_SKU_PREFIX = "SYNC-"

NOT_APPLICABLE = "n/a"
UNKNOWN_CLIENT_NAME = "Unknown Client"
RECENT_ORDERS_LIMIT = 5
