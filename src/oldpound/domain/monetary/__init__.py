"""Monetary domain package.

This package contains the pre-decimal UK money value type (pounds, shillings and
pence), its denominations, and the errors raised by parsing and arithmetic.
"""
