import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_RECURRENCE_POLICY = os.getenv("DEFAULT_RECURRENCE_POLICY", "BOTH_15TH_AND_LAST")
DEFAULT_HOURS_PER_DAY = float(os.getenv("DEFAULT_HOURS_PER_DAY", "8"))

INVOICE_SEED_PATH = os.getenv("INVOICE_SEED_PATH") or None
