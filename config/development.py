import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Policy used when a request does not name one
DEFAULT_RECURRENCE_POLICY = os.getenv("DEFAULT_RECURRENCE_POLICY", "BOTH_15TH_AND_LAST")
DEFAULT_HOURS_PER_DAY = float(os.getenv("DEFAULT_HOURS_PER_DAY", "8"))

# Optional JSON file with {"folders": [...], "invoices": [...]} loaded on startup
INVOICE_SEED_PATH = os.getenv("INVOICE_SEED_PATH") or None
