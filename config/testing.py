WORKING_DAY_POLICY = "calendar"
HOLIDAYS = ()

PAYROLL_MIN_YEAR = 2000
PAYROLL_MAX_YEAR = 2100

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
