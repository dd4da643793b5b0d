"""
Tests for query formatting and argument validation.
"""

import pytest

from itc_reporter.exceptions import ValidationError
from itc_reporter.utils import (
    build_command,
    build_query_input,
    build_sales_report_command,
    encode_command,
    validate_account,
    validate_report_date,
    validate_report_subtype,
    validate_sales_report_args,
    validate_vendor,
)


class TestCommandFormatting:
    """Test the query command builders."""

    def test_build_command(self):
        assert build_command("Sales.getStatus") == (
            "[p=Reporter.properties, Sales.getStatus]"
        )

    def test_build_command_with_account(self):
        assert build_command("Sales.getVendors", account=42) == (
            "[p=Reporter.properties, a=42, Sales.getVendors]"
        )

    def test_encode_command(self):
        assert encode_command("[p=Reporter.properties, Sales.getStatus]") == (
            "%5Bp%3DReporter.properties%2C+Sales.getStatus%5D"
        )

    def test_build_query_input(self):
        assert build_query_input("Finance.getVendorsAndRegions", account=3) == (
            "%5Bp%3DReporter.properties%2C+a%3D3%2C+"
            "Finance.getVendorsAndRegions%5D"
        )

    def test_build_sales_report_command(self):
        command = build_sales_report_command(
            1, 2, "Sales", "Summary", "Monthly", "202401"
        )
        assert command == (
            "[p=Reporter.properties, a=1, Sales.getReport, "
            "2,Sales,Summary,Monthly,202401]"
        )

    def test_sales_report_command_encoding(self):
        command = build_sales_report_command(
            85000000, 80012345, "Subscription", "Opt-In", "Daily", "20240115"
        )
        assert encode_command(command) == (
            "%5Bp%3DReporter.properties%2C+a%3D85000000%2C+Sales.getReport%2C+"
            "80012345%2CSubscription%2COpt-In%2CDaily%2C20240115%5D"
        )


class TestIdentifierValidation:
    """Test account and vendor validation."""

    def test_valid_account(self):
        assert validate_account(1) == 1

    @pytest.mark.parametrize("account", [0, -5, "12", 1.5, None, True])
    def test_invalid_account(self, account):
        with pytest.raises(ValidationError, match="invalid account") as exc_info:
            validate_account(account)
        assert exc_info.value.field == "account"

    @pytest.mark.parametrize("vendor", [0, -1, "80012345"])
    def test_invalid_vendor(self, vendor):
        with pytest.raises(ValidationError, match="invalid vendor"):
            validate_vendor(vendor)


class TestReportValidation:
    """Test report subtype and date validation."""

    @pytest.mark.parametrize("subtype", ["Summary", "Detailed", "Opt-In"])
    def test_valid_subtypes(self, subtype):
        assert validate_report_subtype(subtype) == subtype

    @pytest.mark.parametrize("subtype", ["summary", "SUMMARY", "", "Full"])
    def test_invalid_subtypes(self, subtype):
        with pytest.raises(ValidationError, match="invalid report subtype"):
            validate_report_subtype(subtype)

    @pytest.mark.parametrize(
        "date_type, date",
        [
            ("Daily", "20240101"),
            ("Daily", "99999999"),
            ("Weekly", "20240107"),
            ("Monthly", "202401"),
            ("Yearly", "2024"),
        ],
    )
    def test_valid_dates(self, date_type, date):
        assert validate_report_date(date_type, date) == date

    @pytest.mark.parametrize(
        "date_type, date",
        [
            ("Daily", "2024-01-01"),
            ("Weekly", "202401"),
            ("Monthly", "20240101"),
            ("Yearly", "24"),
        ],
    )
    def test_wrong_date_length(self, date_type, date):
        with pytest.raises(
            ValidationError, match=f"invalid date format for {date_type}"
        ):
            validate_report_date(date_type, date)

    def test_invalid_date_type(self):
        with pytest.raises(ValidationError, match="invalid date type") as exc_info:
            validate_report_date("Quarterly", "2024")
        assert exc_info.value.field == "date_type"


class TestSalesReportArgs:
    """Test ordering of sales report validation."""

    def test_valid_args(self):
        validate_sales_report_args(1, 2, "Sales", "Summary", "Monthly", "202401")

    def test_vendor_checked_before_account(self):
        with pytest.raises(ValidationError, match="invalid vendor"):
            validate_sales_report_args(0, 0, "Sales", "Bad", "Bad", "")

    def test_account_checked_before_subtype(self):
        with pytest.raises(ValidationError, match="invalid account"):
            validate_sales_report_args(0, 1, "Sales", "Bad", "Bad", "")

    def test_subtype_checked_before_date(self):
        with pytest.raises(ValidationError, match="invalid report subtype"):
            validate_sales_report_args(1, 1, "Sales", "Bad", "Bad", "")

    def test_report_type_not_checked(self):
        validate_sales_report_args(1, 1, "Anything", "Detailed", "Yearly", "2023")
