import os


def _int_env(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


def _holidays_env(name: str) -> tuple:
    # Comma separated YYYY-MM-DD values
    raw = os.environ.get(name, "")
    return tuple(v.strip() for v in raw.split(",") if v.strip())


class Config:
    # Payroll policy
    WORKING_DAY_POLICY = os.environ.get("WORKING_DAY_POLICY", "calendar")
    HOLIDAYS = _holidays_env("PAYROLL_HOLIDAYS")

    # Sane bounds for requested periods
    PAYROLL_MIN_YEAR = _int_env("PAYROLL_MIN_YEAR", 2000)
    PAYROLL_MAX_YEAR = _int_env("PAYROLL_MAX_YEAR", 2100)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
