import os

from .config import Config

WORKING_DAY_POLICY = Config.WORKING_DAY_POLICY
HOLIDAYS = Config.HOLIDAYS

PAYROLL_MIN_YEAR = Config.PAYROLL_MIN_YEAR
PAYROLL_MAX_YEAR = Config.PAYROLL_MAX_YEAR

DEBUG = bool(int(os.getenv("DEBUG", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
