class URLAliasError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:urlalias_error'


class ConfigurationError(URLAliasError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class RequestError(URLAliasError):
    """Base exception for errors surfaced to API clients as HTTP responses.

    Subclasses set the HTTP status code and the default client-facing message.
    """

    status_code = 500
    error_code = 'INTERNAL_SERVER_ERROR'
    default_message = 'Internal Server Error'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(RequestError):
    """Raised when the bearer token is missing or does not match."""

    status_code = 401
    error_code = 'UNAUTHORIZED'
    default_message = 'Invalid or missing token'


class BadRequest(RequestError):
    """Raised when the request payload or path is malformed."""

    status_code = 400
    error_code = 'BAD_REQUEST'
    default_message = 'Invalid request'


class NotFound(RequestError):
    """Raised when an alias was never created."""

    status_code = 404
    error_code = 'SHORT_URL_NOT_FOUND'
    default_message = 'URL not found'


class Gone(RequestError):
    """Raised when an alias exists but its expiry has passed."""

    status_code = 410
    error_code = 'SHORT_URL_EXPIRED'
    default_message = 'URL has expired'


class InternalError(RequestError):
    """Raised when the data store cannot be read from or written to."""

    status_code = 500
    error_code = 'INTERNAL_SERVER_ERROR'
    default_message = 'Internal Server Error'
