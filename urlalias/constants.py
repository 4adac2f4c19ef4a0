import string
from enum import StrEnum


class Alias:
    """Generated alias parameters."""

    # 26 lowercase + 26 uppercase + 10 digits
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    LENGTH = 6


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Auth(StrEnum):
        API_TOKEN = 'API_TOKEN'  # noqa: S105
        # Secrets Manager name holding the token, used when API_TOKEN is unset
        API_TOKEN_SECRET = 'API_TOKEN_SECRET'  # noqa: S105

    class Redis(StrEnum):
        URL = 'REDIS_URL'  # e.g. redis://localhost:6379/0
        SOCKET_TIMEOUT = 'REDIS_SOCKET_TIMEOUT'  # seconds, driver default if unset

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# Authorization header scheme expected on POST /shorten
BEARER_SCHEME = 'Bearer'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
