APP_NAME = "Shop Ledger"

DATA_DIR = "data"
DB_FILE_NAME = "shop_ledger.db"

TABLE_SCHEMA_VERSION = "schema_version"
TABLE_KV_STORE = "kv_store"
SCHEMA_VERSION = "1"

# ---- collection keys held in the key-value store ----
KEY_PRODUCTS = "products"
KEY_SALES = "sales"
KEY_EXPENSES = "expenses"
KEY_PAYMENTS = "payments"  # reserved
COLLECTION_KEYS: tuple[str, ...] = (KEY_PRODUCTS, KEY_SALES, KEY_EXPENSES, KEY_PAYMENTS)

# ---- sales ----
PAYMENT_CASH = "cash"
PAYMENT_CREDIT = "credit"
PAYMENT_TYPES: tuple[str, ...] = (PAYMENT_CASH, PAYMENT_CREDIT)

STATUS_PAID = "Paid"
STATUS_UNPAID = "Unpaid"
STATUS_PARTIAL = "Partial"

# ---- inventory ----
LOW_STOCK_THRESHOLD = 5

# ---- reporting ----
NO_TOP_PRODUCT_LABEL = "-"
