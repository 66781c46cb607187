"""Utility functions for hisab."""

from hisab.utils.date_parser import parse_date
from hisab.utils.amount_parser import parse_amount
from hisab.utils.currency import format_taka
from hisab.utils.resolvers import resolve_wallet, resolve_category

__all__ = ["parse_date", "parse_amount", "format_taka", "resolve_wallet", "resolve_category"]
