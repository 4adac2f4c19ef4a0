"""Utility functions for application configuration management.

All configuration is read from environment variables once per Lambda execution
environment (cold start) and validated there. Missing or invalid values raise a
ConfigurationError, which fails the bootstrap of the function.

Environment variables:
    API_TOKEN              : static bearer token expected on POST /shorten
    API_TOKEN_SECRET       : AWS Secrets Manager secret id holding the token
                             (used only when API_TOKEN is unset)
    REDIS_URL              : Redis connection URI (required)
    REDIS_SOCKET_TIMEOUT   : Redis socket timeout in seconds (optional)
    APP_NAME / APP_ENV     : Redis key namespace '<APP_NAME>:<APP_ENV>' (optional)
    LOCALSTACK_ENDPOINT    : AWS endpoint for Secrets Manager when running locally

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    resolve_api_token(secrets_client=None) -> str
        Return the bearer token from `API_TOKEN` or from AWS Secrets Manager.

    load_settings(secrets_client=None) -> Settings
        Read and validate all settings required by the Lambda handlers.

Example:
    Typical usage when bootstrapping a Lambda handler:

        >>> from urlalias.utils.config import load_settings
        >>> settings = load_settings()
        >>> settings.redis_url
        'redis://localhost:6379/0'
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

import boto3

from urlalias.constants import ENV
from urlalias.exceptions import BadConfigurationError, MissingEnvironmentVariableError
from urlalias.types import SecretsManagerClient
from urlalias.utils.helpers import require_environment
from urlalias.utils.runtime import running_locally


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Validated runtime settings.

    Attributes:
        api_token (str):
            Shared secret expected after 'Bearer ' in the Authorization header.
        redis_url (str):
            Redis connection URI.
        redis_socket_timeout (float | None):
            Redis socket timeout in seconds. None keeps the driver's default.
    """

    api_token: str
    redis_url: str
    redis_socket_timeout: float | None = None

    def __repr__(self) -> str:
        return f'Settings(api_token=***, redis_url={self.redis_url!r}, redis_socket_timeout={self.redis_socket_timeout!r})'


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def resolve_api_token(secrets_client: Optional[SecretsManagerClient] = None) -> str:
    """Return the static bearer token.

    `API_TOKEN` wins when set. Otherwise the token is read from the AWS Secrets
    Manager secret named by `API_TOKEN_SECRET` (LocalStack when running locally).

    Args:
        secrets_client (Optional[BaseClient]):
            Optional boto3 Secrets Manager client to reuse (useful in tests).

    Returns:
        str: the bearer token.

    Raises:
        MissingEnvironmentVariableError:
            If neither `API_TOKEN` nor `API_TOKEN_SECRET` is set.
        BadConfigurationError:
            If the secret holds an empty token.
        botocore.exceptions.BotoCoreError / ClientError:
            On AWS Secrets Manager API failures.
    """
    token = os.environ.get(ENV.Auth.API_TOKEN)
    if token:
        return token

    secret_name = os.environ.get(ENV.Auth.API_TOKEN_SECRET)
    if not secret_name:
        raise MissingEnvironmentVariableError(
            f"Missing required environment variables: '{ENV.Auth.API_TOKEN}' (or '{ENV.Auth.API_TOKEN_SECRET}')"
        )

    # fmt: off
    secrets_client_kwargs = {
        'endpoint_url': os.environ.get(ENV.LocalStack.ENDPOINT, 'http://localhost:4566'),
    } if running_locally() else {}
    # fmt: on
    sm = secrets_client or boto3.client('secretsmanager', **secrets_client_kwargs)

    logger.debug('Resolving API token from Secrets Manager.', extra={'secretName': secret_name})
    token = (sm.get_secret_value(SecretId=secret_name).get('SecretString') or '').strip()
    if not token:
        raise BadConfigurationError(f"Secret '{secret_name}' holds an empty API token")
    return token


def _redis_socket_timeout() -> float | None:
    raw = os.environ.get(ENV.Redis.SOCKET_TIMEOUT)
    if not raw:
        return None

    try:
        timeout = float(raw)
    except ValueError as e:
        raise BadConfigurationError(f'Invalid {ENV.Redis.SOCKET_TIMEOUT} value: {raw!r}') from e
    if timeout <= 0:
        raise BadConfigurationError(f'{ENV.Redis.SOCKET_TIMEOUT} must be positive (given value: {raw!r})')
    return timeout


@require_environment(ENV.Redis.URL)
def load_settings(secrets_client: Optional[SecretsManagerClient] = None) -> Settings:
    """Read and validate the settings shared by all Lambda handlers.

    Args:
        secrets_client (Optional[BaseClient]):
            Optional boto3 Secrets Manager client used to resolve the API token.

    Returns:
        Settings: validated settings.

    Raises:
        MissingEnvironmentVariableError:
            If `REDIS_URL` or the API token configuration is missing.
        BadConfigurationError:
            If a configured value is invalid.
    """
    settings = Settings(
        api_token=resolve_api_token(secrets_client),
        redis_url=os.environ[ENV.Redis.URL],
        redis_socket_timeout=_redis_socket_timeout(),
    )
    logger.debug('Loaded settings.', extra={'settings': repr(settings)})
    return settings
