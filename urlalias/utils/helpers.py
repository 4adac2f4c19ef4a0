"""Helper utilities for AWS lambda functions.

Functions:
    get_header(event, name) -> str | None
        Case-insensitive header lookup in an API Gateway event
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    respond_to_request_errors(handler) -> Callable
        Decorator: Turn raised RequestError exceptions into HTTP error responses
    guarantee_500_response(handler) -> Callable
        Decorator: Turn any unexpected exception into an HTTP 500 response

Example:
    Typical usage on a Lambda handler:

        >>> @guarantee_500_response
        ... @respond_to_request_errors
        ... def lambda_handler(event, context):
        ...     raise NotFound()
        ...
        >>> lambda_handler({}, None)['statusCode']
        404
"""

import os
import functools
import logging
from typing import Any
from collections.abc import Callable

from urlalias.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from urlalias.exceptions import MissingEnvironmentVariableError, RequestError
from urlalias.types import LambdaEvent, LambdaContext, LambdaResponse
from urlalias.utils.responses import response_error, response_json
from urlalias.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def get_header(event: LambdaEvent, name: str) -> str | None:
    """Look up a request header by name, ignoring case

    Args:
        event (dict): API Gateway event object passed to Lambda handler
        name (str): header name, e.g. 'Authorization'

    Returns:
        str | None: header value, None if the header is absent
    """
    headers = event.get('headers') or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('API_TOKEN', 'REDIS_URL')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'API_TOKEN', 'REDIS_URL'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def respond_to_request_errors(handler: Callable[[LambdaEvent, LambdaContext], LambdaResponse]) -> Callable:
    """Decorator: respond with the HTTP error described by a raised RequestError.

    Handlers raise Unauthorized, BadRequest, NotFound, Gone or InternalError;
    this decorator renders them as `{"error": ..., "error_code": ...}` responses
    with the matching status code. Other exceptions propagate.
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return handler(event, context)
        except RequestError as e:
            return response_error(e)

    return wrapper


def guarantee_500_response(handler: Callable[[LambdaEvent, LambdaContext], LambdaResponse]) -> Callable:
    """Decorator: respond with HTTP 500 when a handler raises unexpectedly.

    When running locally, the original exception is re-raised so that it shows
    up in the SAM console.
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: Any) -> LambdaResponse:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.', extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR})
            return response_json(500, {'error': 'Internal Server Error', 'error_code': UNKNOWN_INTERNAL_SERVER_ERROR})

    return wrapper
