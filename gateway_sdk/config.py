"""Configuration management for gateway-sdk."""

from dataclasses import dataclass, replace
from typing import Any

from gateway_sdk.exceptions import ConfigurationError
from gateway_sdk.models.enums import Environment

BASE_URLS = {
    Environment.PRODUCTION: "https://api.braintreegateway.com:443",
    Environment.SANDBOX: "https://api.sandbox.braintreegateway.com:443",
    Environment.QA: "https://gateway.qa.braintreepayments.com:443",
    Environment.DEVELOPMENT: "http://localhost:3000",
}


def parse_environment(value: str | Environment) -> Environment:
    """Resolve an environment name, case-insensitively."""
    if isinstance(value, Environment):
        return value
    try:
        return Environment(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(env.value for env in Environment)
        raise ConfigurationError(
            f"Unknown environment {value!r} (expected one of: {valid})"
        ) from None


@dataclass(frozen=True)
class GatewayConfig:
    """Connection settings for the payment gateway."""

    environment: Environment = Environment.SANDBOX
    merchant_id: str = ""
    public_key: str = ""
    private_key: str = ""
    timeout: float = 30.0
    api_version: str = "6"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        object.__setattr__(self, "environment", parse_environment(self.environment))

    @property
    def base_url(self) -> str:
        """Get the gateway root URL for the configured environment."""
        return BASE_URLS[self.environment]

    @property
    def merchant_url(self) -> str:
        """Get the merchant-scoped URL that resource paths hang off."""
        return f"{self.base_url}/merchants/{self.merchant_id}"

    def require_credentials(self) -> None:
        """Raise if any value needed to sign a request is empty."""
        missing = [
            name
            for name in ("merchant_id", "public_key", "private_key")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(f"Missing gateway credentials: {', '.join(missing)}")

    def merge(self, **overrides: Any) -> "GatewayConfig":
        """Return a copy with per-call overrides applied; unknown keys are ignored."""
        known = {k: v for k, v in overrides.items() if k in _OVERRIDABLE and v is not None}
        if not known:
            return self
        return replace(self, **known)

    def http_options(self) -> dict[str, Any]:
        """Convert to keyword arguments for ``requests.Session.request``."""
        return {
            "auth": (self.public_key, self.private_key),
            "timeout": self.timeout,
            "headers": {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "X-ApiVersion": self.api_version,
                "User-Agent": "gateway-sdk/python",
            },
        }

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Create config from environment variables."""
        import os

        raw_timeout = os.getenv("GATEWAY_TIMEOUT", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"GATEWAY_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        return cls(
            environment=parse_environment(os.getenv("GATEWAY_ENVIRONMENT", "sandbox")),
            merchant_id=os.getenv("GATEWAY_MERCHANT_ID", ""),
            public_key=os.getenv("GATEWAY_PUBLIC_KEY", ""),
            private_key=os.getenv("GATEWAY_PRIVATE_KEY", ""),
            timeout=timeout,
            api_version=os.getenv("GATEWAY_API_VERSION", "6"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


_OVERRIDABLE = frozenset(
    {"environment", "merchant_id", "public_key", "private_key", "timeout", "api_version"}
)
