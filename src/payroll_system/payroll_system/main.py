from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.repository import AttendanceRepository
from .common.logging_utils import setup_logging
from .container import Container, build_container
from .employees.repository import EmployeeRepository
from .payments.repository import PaymentRepository

logger = logging.getLogger(__name__)


def settings_to_payroll_config(settings) -> dict:
    return {
        "working_day_policy": getattr(settings, "WORKING_DAY_POLICY", "calendar"),
        "holidays": tuple(getattr(settings, "HOLIDAYS", ())),
        "min_year": getattr(settings, "PAYROLL_MIN_YEAR", 2000),
        "max_year": getattr(settings, "PAYROLL_MAX_YEAR", 2100),
    }


def create_container(
    *,
    employees_repo: Optional[EmployeeRepository] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    payments_repo: Optional[PaymentRepository] = None,
) -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    payroll_config = settings_to_payroll_config(settings)
    container = build_container(
        payroll_config=payroll_config,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        payments_repo=payments_repo,
    )

    if getattr(settings, "DEBUG", False):
        logger.debug(
            "settings=%s policy=%s holidays=%d years=%s..%s",
            settings_module,
            container.working_day_policy.name,
            len(payroll_config["holidays"]),
            payroll_config["min_year"],
            payroll_config["max_year"],
        )
    return container
