"""
Formatting helpers for templates.
"""
from decimal import Decimal, InvalidOperation
from typing import Union, Optional

from flask import url_for


def money(value: Union[int, float, Decimal, str, None], decimals: int = 2) -> str:
    """
    Format an amount with a comma thousands separator and fixed decimals.

    Examples:
        money(21000) -> "21,000.00"
        money(Decimal('3990.5')) -> "3,990.50"
        money(None) -> "-"
    """
    if value is None or value == "":
        return "-"

    try:
        num = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return "-"

    return f"{num:,.{decimals}f}"


def year(value: Optional[int]) -> str:
    """Release year or "-" when unknown."""
    if value is None or value == "":
        return "-"
    return str(value)


def yes_no(value) -> str:
    return "Yes" if value else "No"


def image_src(value: Optional[str]) -> str:
    """
    Resolve a watch image for an <img> tag.

    External http(s) URLs are returned unchanged; anything else is
    treated as a path under the static folder (the placeholder image).
    """
    if not value:
        return ""
    if value.startswith(('http://', 'https://')):
        return value
    return url_for('static', filename=value.lstrip('/'))
