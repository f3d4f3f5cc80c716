"""
Custom exceptions for the woosmap module.

Configuration errors are raised when settings are applied. Response errors
are raised by the API client for any query that did not produce a usable
"OK" envelope.
"""


class WoosmapError(Exception):
    """Base exception for the woosmap module."""
    pass


class InvalidConfigurationError(WoosmapError):
    """Missing or contradictory credentials, or an unknown authentication mode."""
    pass


class InvalidPremierConfigurationException(InvalidConfigurationError):
    """The digital signature client secret cannot be used to sign a URL."""
    pass


class InvalidResponseException(WoosmapError):
    """Transport failure, unreadable body, or a non-OK status from the service."""
    pass


class ZeroResultsException(InvalidResponseException):
    """The service explicitly reported that nothing matched the query."""
    pass
