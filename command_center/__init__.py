"""
Life Command Center - Personal Dashboard Service

A FastAPI-based service behind a single-user life dashboard: BNPL
installment plans, debts, IOUs, daily spending, and prayer tracking.
"""

__version__ = "0.1.0"
