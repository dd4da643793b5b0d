"""
iTunes Connect Reporter client.

This module provides a client for Apple's Reporter service, which serves
sales and finance status, account listings and sales report files.
Responses are returned as raw bytes.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote_plus

import requests

from .config import Config, MODE_NORMAL, validate_config
from .exceptions import (
    NotSupportedError,
    RemoteError,
    TransportError,
)
from .utils import (
    build_query_input,
    build_sales_report_command,
    encode_command,
    validate_account,
    validate_sales_report_args,
)

SALES_ENDPOINT = "https://reportingitc-reporter.apple.com/reportservice/sales/v1"
FINANCE_ENDPOINT = "https://reportingitc-reporter.apple.com/reportservice/finance/v1"
API_VERSION = "1.0"


class ReporterClient:
    """
    iTunes Connect Reporter client.

    The client is immutable once constructed and holds no connection
    between calls, so one instance can be shared by several threads.

    Args:
        config: Account credentials and mode
        session: Optional requests.Session used for every request
        timeout: Optional timeout passed to requests; none by default
    """

    def __init__(
        self,
        config: Config,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client, validating the configuration."""
        self._config = validate_config(config)
        self._session = session
        self._timeout = timeout

    @property
    def config(self) -> Config:
        return self._config

    def _base_request(self) -> Dict[str, str]:
        """Build the request fields shared by every command."""
        return {
            "userid": quote_plus(self._config.user_id, safe=""),
            "password": quote_plus(self._config.password, safe=""),
            "version": quote_plus(API_VERSION, safe=""),
            "mode": quote_plus(self._config.mode, safe=""),
            "salesurl": quote_plus(SALES_ENDPOINT, safe=""),
            "financeurl": quote_plus(FINANCE_ENDPOINT, safe=""),
        }

    def _build_request(self, query_input: str) -> Dict[str, str]:
        request = self._base_request()
        request["queryInput"] = query_input
        return request

    def _send(self, endpoint: str, payload: Dict[str, str]) -> bytes:
        """POST a request payload and return the raw response body."""
        logger = logging.getLogger(__name__)

        logger.info(f"_send: POST {endpoint} queryInput={payload['queryInput']}")
        if logger.isEnabledFor(logging.DEBUG):
            masked = dict(payload, password="********")
            logger.debug(f"_send: jsonRequest={json.dumps(masked)}")

        data = {"jsonRequest": json.dumps(payload)}
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        http = self._session if self._session is not None else requests

        try:
            response = http.post(
                endpoint, data=data, headers=headers, timeout=self._timeout
            )
            logger.info(f"_send: Response received - status={response.status_code}")
        except requests.exceptions.RequestException as e:
            logger.error(f"_send: Request failed: {e}")
            raise TransportError(f"Request failed: {e}", cause=e) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"_send: Reporter error {response.status_code}")
            raise RemoteError(response.content, response.status_code)

        return response.content

    # ===== STATUS AND LISTING METHODS =====

    def get_sales_status(self) -> bytes:
        """Return the Sales.getStatus response."""
        payload = self._build_request(build_query_input("Sales.getStatus"))
        return self._send(SALES_ENDPOINT, payload)

    def get_finance_status(self) -> bytes:
        """Return the Finance.getStatus response."""
        payload = self._build_request(build_query_input("Finance.getStatus"))
        return self._send(FINANCE_ENDPOINT, payload)

    def get_sales_accounts(self) -> bytes:
        """Return the Sales.getAccounts response."""
        payload = self._build_request(build_query_input("Sales.getAccounts"))
        return self._send(SALES_ENDPOINT, payload)

    def get_finance_accounts(self) -> bytes:
        """Return the Finance.getAccounts response."""
        payload = self._build_request(build_query_input("Finance.getAccounts"))
        return self._send(FINANCE_ENDPOINT, payload)

    def get_sales_vendors(self, account: int) -> bytes:
        """
        Return the Sales.getVendors response for an account.

        Args:
            account: Account number, a positive integer

        Raises:
            ValidationError: If the account is not a positive integer
        """
        validate_account(account)
        payload = self._build_request(
            build_query_input("Sales.getVendors", account=account)
        )
        return self._send(SALES_ENDPOINT, payload)

    def get_finance_vendors_and_regions(self, account: int) -> bytes:
        """
        Return the Finance.getVendorsAndRegions response for an account.

        Raises:
            ValidationError: If the account is not a positive integer
        """
        validate_account(account)
        payload = self._build_request(
            build_query_input("Finance.getVendorsAndRegions", account=account)
        )
        return self._send(FINANCE_ENDPOINT, payload)

    # ===== REPORT METHODS =====

    def get_sales_report(
        self,
        account: int,
        vendor: int,
        report_type: str,
        report_subtype: str,
        date_type: str,
        date: str,
    ) -> bytes:
        """
        Fetch a sales report.

        Args:
            account: Account number
            vendor: Vendor number
            report_type: Report type, e.g. Sales or Subscription
            report_subtype: Summary, Detailed or Opt-In
            date_type: Daily, Weekly, Monthly or Yearly
            date: YYYYMMDD, YYYYMM or YYYY depending on date_type

        Returns:
            The raw response body. For a successful request this is
            usually a gzip compressed report file.

        Raises:
            ValidationError: If an argument is invalid
            TransportError: If the request could not be sent
            RemoteError: If the service rejected the request
        """
        validate_sales_report_args(
            account, vendor, report_type, report_subtype, date_type, date
        )
        command = build_sales_report_command(
            account, vendor, report_type, report_subtype, date_type, date
        )
        payload = self._build_request(encode_command(command))
        return self._send(SALES_ENDPOINT, payload)

    def get_finance_report(self, *args: Any, **kwargs: Any) -> bytes:
        """Finance.getReport is not supported by this client."""
        raise NotSupportedError("Finance.getReport is not supported")


def create_client(
    user_id: str,
    password: str,
    mode: str = MODE_NORMAL,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> ReporterClient:
    """
    Convenience function to create a ReporterClient from credentials.

    Args:
        user_id: Apple ID
        password: Apple ID password
        mode: Normal or Robot.xml
        session: Optional requests.Session
        timeout: Optional request timeout in seconds

    Returns:
        Configured ReporterClient instance

    Raises:
        ConfigError: If the configuration is invalid
    """
    config = Config(user_id=user_id, password=password, mode=mode)
    return ReporterClient(config, session=session, timeout=timeout)
