"""Payroll System package.

This package is organized by feature modules (employees, attendance, payments,
payroll) with a pure calculation engine under ``payroll`` and thin
service/repository layers around it.
"""
