"""
Configuration for the woosmap module.

A Configuration is an immutable snapshot: it is validated once when it is
built, and "changing" it means building a new, re-validated snapshot with
configure(). Clients hold a reference to the snapshot they were given.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..config.config_module import ConfigError, get_config, load_config, parse_params, validate_config
from .woosmap_errors import InvalidConfigurationError
from .woosmap_signing import check_secret


class AuthenticationMode(str, Enum):
    """How requests prove who they come from."""

    API_KEY = "api_key"
    DIGITAL_SIGNATURE = "digital_signature"


class ServiceName(Enum):
    """Logical remote endpoints."""

    DIRECTIONS = "directions"
    GEOCODE = "geocode"
    PLACES = "places"
    PLACE_DETAILS = "place_details"
    DISTANCE_MATRIX = "distance_matrix"

    @classmethod
    def parse(cls, value: Union["ServiceName", str]) -> "ServiceName":
        """
        Resolve a ServiceName from an enum member, value or member name.

        Raises:
            InvalidConfigurationError: If the name is not a known service
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key.lower() == member.value or key.upper() == member.name:
                    return member
        raise InvalidConfigurationError(f"Unknown service: {value!r}")


DEFAULT_END_POINT = "https://api.woosmap.com/"

DEFAULT_SERVICE_PATHS = {
    ServiceName.DIRECTIONS: "directions",
    ServiceName.GEOCODE: "geocode",
    ServiceName.PLACES: "place/autocomplete",
    ServiceName.PLACE_DETAILS: "place/details",
    ServiceName.DISTANCE_MATRIX: "distancematrix",
}


# Environment keys that must be set for each mode when loading from the environment
CREDENTIAL_KEYS = {
    AuthenticationMode.API_KEY: ["API_KEY"],
    AuthenticationMode.DIGITAL_SIGNATURE: ["CLIENT_ID", "CLIENT_SECRET"],
}


def _service_map(value: Optional[Mapping[Any, Any]]) -> Dict[ServiceName, Any]:
    return {ServiceName.parse(key): item for key, item in (value or {}).items()}


@dataclass(frozen=True)
class Configuration:
    """Settings the API client needs to build, authenticate and send requests."""

    authentication_mode: Optional[Union[AuthenticationMode, str]] = None
    api_key: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None

    end_point: str = DEFAULT_END_POINT
    default_language: str = "en"
    format: str = "json"

    # Extra query parameters sent with every request to a given service
    default_params: Mapping[ServiceName, Mapping[str, str]] = field(default_factory=dict)
    service_paths: Mapping[ServiceName, str] = field(
        default_factory=lambda: dict(DEFAULT_SERVICE_PATHS)
    )

    # Seconds; passed straight to the HTTP transport. None waits forever.
    request_timeout: Optional[float] = 30.0
    user_agent: str = "woosmap-python/1.0"

    def __post_init__(self):
        """Normalize and validate configuration values."""
        try:
            mode = AuthenticationMode(self.authentication_mode)
        except ValueError:
            raise InvalidConfigurationError(
                f"Invalid authentication_mode: {self.authentication_mode!r}. "
                f"Must be one of: {', '.join(m.value for m in AuthenticationMode)}"
            )
        object.__setattr__(self, "authentication_mode", mode)

        if mode is AuthenticationMode.API_KEY and not self.api_key:
            raise InvalidConfigurationError(
                "api_key is required when authentication_mode is 'api_key'"
            )

        if mode is AuthenticationMode.DIGITAL_SIGNATURE:
            missing = [name for name in ("client_id", "client_secret")
                       if not getattr(self, name)]
            if missing:
                raise InvalidConfigurationError(
                    f"{' and '.join(missing)} required when authentication_mode "
                    f"is 'digital_signature'"
                )
            check_secret(self.client_secret)

        if not self.end_point:
            raise InvalidConfigurationError("end_point cannot be empty")
        if not self.format:
            raise InvalidConfigurationError("format cannot be empty")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise InvalidConfigurationError(
                f"request_timeout must be positive, got {self.request_timeout}"
            )

        params = {
            service: MappingProxyType(dict(values))
            for service, values in _service_map(self.default_params).items()
        }
        object.__setattr__(self, "default_params", MappingProxyType(params))

        paths = _service_map(self.service_paths)
        unmapped = [service.value for service in ServiceName if not paths.get(service)]
        if unmapped:
            raise InvalidConfigurationError(
                f"No service path configured for: {', '.join(unmapped)}"
            )
        object.__setattr__(self, "service_paths", MappingProxyType(paths))

    @classmethod
    def from_env(cls, env_path: Optional[str] = None, **overrides: Any) -> "Configuration":
        """
        Build a configuration from WOOSMAP_* environment variables.

        Args:
            env_path: Optional .env file loaded before reading the environment
            **overrides: Values that take precedence over the environment

        Raises:
            InvalidConfigurationError: If the resulting settings are invalid
        """
        if env_path:
            load_config(env_path)

        required = [] if "authentication_mode" in overrides else ["AUTHENTICATION_MODE"]
        mode = overrides.get("authentication_mode") or get_config("AUTHENTICATION_MODE")
        try:
            credentials = CREDENTIAL_KEYS[AuthenticationMode(mode)]
        except ValueError:
            # Unknown modes are rejected by __post_init__ with a clearer message
            credentials = []
        required += [key for key in credentials if key.lower() not in overrides]

        try:
            validate_config(required)
        except ConfigError as e:
            raise InvalidConfigurationError(str(e))

        settings: Dict[str, Any] = {
            "authentication_mode": get_config("AUTHENTICATION_MODE"),
            "api_key": get_config("API_KEY"),
            "client_id": get_config("CLIENT_ID"),
            "client_secret": get_config("CLIENT_SECRET"),
            "end_point": get_config("END_POINT", DEFAULT_END_POINT),
            "default_language": get_config("DEFAULT_LANGUAGE", "en"),
            "format": get_config("FORMAT", "json"),
        }

        timeout = get_config("REQUEST_TIMEOUT")
        if timeout is not None:
            try:
                settings["request_timeout"] = float(timeout)
            except ValueError:
                raise InvalidConfigurationError(
                    f"WOOSMAP_REQUEST_TIMEOUT must be a number, got {timeout!r}"
                )

        default_params = {}
        for service in ServiceName:
            raw = get_config(f"{service.name}_PARAMS")
            if raw:
                default_params[service] = parse_params(raw)
        settings["default_params"] = default_params

        settings.update(overrides)
        return cls(**settings)

    def configure(self, **changes: Any) -> "Configuration":
        """
        Return a new, validated configuration with the given fields replaced.

        Raises:
            InvalidConfigurationError: On unknown fields or invalid values
        """
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise InvalidConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)

    def service_path(self, service: Union[ServiceName, str]) -> str:
        """Path segment for a service; every ServiceName is guaranteed to resolve."""
        return self.service_paths[ServiceName.parse(service)]

    def params_for(self, service: Union[ServiceName, str]) -> Dict[str, str]:
        """Copy of the default query parameters registered for a service."""
        return dict(self.default_params.get(ServiceName.parse(service), {}))

    def options(self) -> Dict[str, Any]:
        """Current settings as a plain dictionary."""
        return {
            "authentication_mode": self.authentication_mode.value,
            "api_key": self.api_key,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "end_point": self.end_point,
            "default_language": self.default_language,
            "format": self.format,
            "default_params": {
                service.value: dict(values) for service, values in self.default_params.items()
            },
            "service_paths": {
                service.value: path for service, path in self.service_paths.items()
            },
            "request_timeout": self.request_timeout,
            "user_agent": self.user_agent,
        }
