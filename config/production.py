from .config import Config

WORKING_DAY_POLICY = Config.WORKING_DAY_POLICY
HOLIDAYS = Config.HOLIDAYS

PAYROLL_MIN_YEAR = Config.PAYROLL_MIN_YEAR
PAYROLL_MAX_YEAR = Config.PAYROLL_MAX_YEAR

DEBUG = False

LOG_LEVEL = Config.LOG_LEVEL
