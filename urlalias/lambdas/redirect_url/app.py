import functools
import logging
import time

from urlalias.dao.base import ShortURLBaseDAO
from urlalias.dao.redis import ShortURLRedisDAO
from urlalias.dao.exceptions import DataStoreError, ShortURLNotFoundError
from urlalias.exceptions import BadRequest, Gone, InternalError, NotFound
from urlalias.types import LambdaContext, LambdaEvent, LambdaHandler, LambdaResponse
from urlalias.utils import load_settings, app_prefix
from urlalias.utils.helpers import guarantee_500_response, respond_to_request_errors
from urlalias.utils.responses import response_301
from urlalias.lambdas.redirect_url.constants import (
    MISSING_SHORT_URL,
    SHORT_URL_NOT_FOUND,
    SHORT_URL_EXPIRED,
    STORE_READ_FAILED,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


def build_handler(*, short_url_dao: ShortURLBaseDAO) -> LambdaHandler:
    """Build the GET /{short_url} Lambda handler around its dependencies.

    This handler follows this procedure to redirect clients:
    - Step 1: Extract the alias from the request path
    - Step 2: Get the URL record from the database
    - Step 3: Reject expired aliases
    - Step 4: Redirect client to the long URL

    Reads have no side effects: no hit counting and no expiry refresh.

    HTTP responses:
        301: Successful redirect
            headers:
                Location: long URL
        400: Bad client request
            error: missing alias in path parameters
        404: Not found
            error: the alias was never created
        410: Gone
            error: the alias exists but has expired
        500: Internal server error
            error: the data store could not be read

    Args:
        short_url_dao (ShortURLBaseDAO):
            DAO used to look up URL records. Shared by all invocations.

    Returns:
        Callable[[dict, Any], dict]:
            Lambda handler returning API Gateway Lambda Proxy responses.

    Example:
        >>> handler = build_handler(short_url_dao=dao)
        >>> response = handler({'pathParameters': {'short_url': 'abc123'}}, None)
        >>> response['statusCode']
        301
        >>> response['headers']['Location']
        'https://example.com'
    """

    @guarantee_500_response
    @respond_to_request_errors
    def handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        # 1- Extract alias from request's path
        short_url = (event.get('pathParameters') or {}).get('short_url')
        if not short_url:
            logger.info('Missing "short_url" in path. Responding with 400.', extra={'event': MISSING_SHORT_URL})
            raise BadRequest("Invalid request (missing 'short_url' in path)")

        # 2- Get URL record from database
        try:
            record = short_url_dao.get(short_url=short_url)
        except ShortURLNotFoundError as e:
            logger.info(
                'URL record not found in database. Responding with 404.',
                extra={'short_url': short_url, 'event': SHORT_URL_NOT_FOUND},
            )
            raise NotFound() from e
        except DataStoreError as e:
            logger.exception(
                'Failed to read URL record. Responding with 500.',
                extra={'short_url': short_url, 'event': STORE_READ_FAILED},
            )
            raise InternalError() from e

        # 3- Expired aliases are gone, not missing
        if record.expired(int(time.time())):
            logger.info(
                'URL record has expired. Responding with 410.',
                extra={'short_url': short_url, 'exp': record.exp, 'event': SHORT_URL_EXPIRED},
            )
            raise Gone()

        # 4- Redirect client to long URL
        logger.info(
            'Redirecting client to long URL. Responding with 301.',
            extra={'short_url': short_url, 'event': REDIRECT_SUCCESS},
        )
        return response_301(location=record.long_url)

    return handler


@functools.cache
def default_handler() -> LambdaHandler:
    """Bootstrap the handler once per execution environment.

    The API token is validated here too, so that a misconfigured deployment
    fails the same way for both functions.
    """
    settings = load_settings()
    short_url_dao = ShortURLRedisDAO(
        redis_url=settings.redis_url,
        redis_socket_timeout=settings.redis_socket_timeout,
        prefix=app_prefix(),
    )
    return build_handler(short_url_dao=short_url_dao)


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway GET /{short_url} requests."""
    return default_handler()(event, context)
