"""
Utility functions for itc-reporter-client.

This module builds the Reporter query commands and validates the
arguments of report requests. Everything here is pure and does no I/O.
"""

from typing import Any, Optional
from urllib.parse import quote_plus

from .exceptions import ValidationError

COMMAND_PROPERTIES = "p=Reporter.properties"

VALID_REPORT_SUBTYPES = ["Summary", "Detailed", "Opt-In"]

# Required length of the date string for each date type
DATE_LENGTHS = {
    "Daily": 8,
    "Weekly": 8,
    "Monthly": 6,
    "Yearly": 4,
}


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def build_command(command: str, account: Optional[int] = None) -> str:
    """
    Build the plain (unencoded) query command.

    Args:
        command: Remote command, e.g. 'Sales.getStatus'
        account: Optional account number prepended as 'a=<account>'

    Returns:
        Command string like '[p=Reporter.properties, a=1, Sales.getVendors]'
    """
    parts = [COMMAND_PROPERTIES]
    if account is not None:
        parts.append(f"a={account}")
    parts.append(command)
    return "[" + ", ".join(parts) + "]"


def encode_command(command: str) -> str:
    """Percent-encode a command the way the Reporter service expects it."""
    return quote_plus(command, safe="")


def build_query_input(command: str, account: Optional[int] = None) -> str:
    """Build and encode the queryInput value for a listing or status command."""
    return encode_command(build_command(command, account))


def build_sales_report_command(
    account: int,
    vendor: int,
    report_type: str,
    report_subtype: str,
    date_type: str,
    date: str,
) -> str:
    """
    Build the plain Sales.getReport command.

    Report arguments are joined with bare commas, without the space used
    between the leading command parts.
    """
    report_args = ",".join(
        [str(vendor), report_type, report_subtype, date_type, date]
    )
    return build_command(f"Sales.getReport, {report_args}", account)


def validate_account(account: Any) -> int:
    """
    Validate an account number.

    Args:
        account: The account number to validate

    Returns:
        The validated account number

    Raises:
        ValidationError: If the account is not a positive integer
    """
    if not _is_positive_int(account):
        raise ValidationError("invalid account", field="account")
    return account


def validate_vendor(vendor: Any) -> int:
    """
    Validate a vendor number.

    Raises:
        ValidationError: If the vendor is not a positive integer
    """
    if not _is_positive_int(vendor):
        raise ValidationError("invalid vendor", field="vendor")
    return vendor


def validate_report_subtype(report_subtype: str) -> str:
    """
    Validate a report subtype.

    Matching is exact and case-sensitive.

    Raises:
        ValidationError: If the subtype is not Summary, Detailed or Opt-In
    """
    if report_subtype not in VALID_REPORT_SUBTYPES:
        raise ValidationError("invalid report subtype", field="report_subtype")
    return report_subtype


def validate_report_date(date_type: str, date: str) -> str:
    """
    Validate a date type and the length of its date string.

    Only the length of the date is checked: YYYYMMDD for Daily and
    Weekly, YYYYMM for Monthly, YYYY for Yearly.

    Args:
        date_type: Daily, Weekly, Monthly or Yearly
        date: The date string

    Returns:
        The validated date string

    Raises:
        ValidationError: If the date type is unknown or the date has the
            wrong length
    """
    expected_length = DATE_LENGTHS.get(date_type)
    if expected_length is None:
        raise ValidationError("invalid date type", field="date_type")

    if not isinstance(date, str) or len(date) != expected_length:
        raise ValidationError(f"invalid date format for {date_type}", field="date")

    return date


def validate_sales_report_args(
    account: Any,
    vendor: Any,
    report_type: str,
    report_subtype: str,
    date_type: str,
    date: str,
) -> None:
    """
    Validate the arguments of a Sales.getReport request.

    Checks run in a fixed order and the first failure is raised.
    report_type is passed through to the service unchecked.

    Raises:
        ValidationError: On the first invalid argument
    """
    validate_vendor(vendor)
    validate_account(account)
    validate_report_subtype(report_subtype)
    validate_report_date(date_type, date)
