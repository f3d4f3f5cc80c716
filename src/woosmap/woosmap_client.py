"""
Woosmap web service client.

Builds authenticated request URLs, performs the HTTP GET and applies the
status protocol to the JSON response envelope.
"""

from typing import Dict, Mapping, Optional, Union
from urllib.parse import urlencode

import requests

from ..config.logger_module import log_debug, log_info, log_error
from .woosmap_config import AuthenticationMode, Configuration, ServiceName
from .woosmap_errors import InvalidResponseException, ZeroResultsException
from .woosmap_result import Result
from .woosmap_signing import sign_url


STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"


class WoosmapClient:
    """
    Sends one authenticated GET per query and returns the "OK" envelope.

    Every other outcome is raised: ZeroResultsException when the service
    reports no matches, InvalidResponseException for everything else.
    """

    def __init__(self,
                 config: Configuration,
                 session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Validated configuration snapshot
            session: HTTP session to reuse (a new one is created if omitted)
        """
        self.config = config

        self._session = session or requests.Session()
        self._session.headers.update({
            'User-Agent': config.user_agent
        })

        log_info(
            f"WoosmapClient initialized "
            f"(end_point={config.end_point}, mode={config.authentication_mode.value})"
        )

    @property
    def session(self) -> requests.Session:
        """HTTP session requests are sent through."""
        return self._session

    def query(self,
              service: Union[ServiceName, str],
              args: Optional[Mapping[str, str]] = None) -> Result:
        """
        Query a service and return its response envelope.

        Args:
            service: Service to call
            args: Query parameters

        Returns:
            Result whose status is "OK"

        Raises:
            ZeroResultsException: If the service found nothing
            InvalidResponseException: On transport, parse or status errors
        """
        service = ServiceName.parse(service)
        url = self.build_url(service, args)
        result = self._fetch(url)
        self._handle_status(service, result)
        log_info(f"{service.value} query succeeded")
        return result

    def build_url(self,
                  service: Union[ServiceName, str],
                  args: Optional[Mapping[str, str]] = None) -> str:
        """
        Build the complete, authenticated URL for a query without sending it.

        Caller arguments override the service's default parameters.
        """
        service = ServiceName.parse(service)
        params: Dict[str, str] = self.config.params_for(service)
        params.update(args or {})

        if self.config.authentication_mode is AuthenticationMode.API_KEY:
            params["private_key"] = self.config.api_key
            return self._base_url(service, params)

        params["client"] = self.config.client_id
        return sign_url(self._base_url(service, params), self.config.client_secret)

    def _base_url(self, service: ServiceName, params: Mapping[str, str]) -> str:
        url = (
            f"{self.config.end_point}{self.config.service_path(service)}"
            f"/{self.config.format}"
        )
        if params:
            url += "?" + urlencode(params)

        log_debug(f"url before possible signing: {url}")
        return url

    def _fetch(self, url: str) -> Result:
        try:
            response = self._session.get(url, timeout=self.config.request_timeout)

            if not 200 <= response.status_code < 300:
                raise InvalidResponseException(f"HTTP {response.status_code}")

            payload = response.json()
            if not isinstance(payload, dict):
                raise InvalidResponseException(
                    f"expected a JSON object, got {type(payload).__name__}"
                )

            status = payload.get("status")
            if not isinstance(status, str):
                raise InvalidResponseException("response has no status field")

        except (requests.exceptions.RequestException,
                ValueError,
                InvalidResponseException) as e:
            log_error(str(e))
            raise InvalidResponseException(f"unknown error: {e}")

        result = Result(payload)
        result.status = status
        return result

    def _handle_status(self, service: ServiceName, result: Result) -> None:
        status = result.status

        if status == STATUS_OK:
            return

        if status == STATUS_ZERO_RESULTS:
            log_info(f"{service.value} query returned no results")
            raise ZeroResultsException(f"Woosmap did not return any results: {status}")

        message = f"Woosmap returned an error status: {status}"
        if result.get("error_message"):
            message += f" ({result['error_message']})"
        log_error(message)
        raise InvalidResponseException(message)
