SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_RECURRENCE_POLICY = "BOTH_15TH_AND_LAST"
DEFAULT_HOURS_PER_DAY = 8.0

INVOICE_SEED_PATH = None
