import base64
import binascii
import functools
import json
import logging
import time
from typing import Any

from urlalias.constants import BEARER_SCHEME
from urlalias.models import URLRecordModel
from urlalias.dao.base import ShortURLBaseDAO
from urlalias.dao.redis import ShortURLRedisDAO
from urlalias.dao.exceptions import DataStoreError
from urlalias.exceptions import BadRequest, InternalError, Unauthorized
from urlalias.types import LambdaContext, LambdaEvent, LambdaHandler, LambdaResponse
from urlalias.utils import generate_alias, load_settings, app_prefix, get_header
from urlalias.utils.helpers import guarantee_500_response, respond_to_request_errors
from urlalias.utils.responses import response_json
from urlalias.lambdas.shorten_url.constants import (
    UNAUTHORIZED,
    INVALID_REQUEST_BODY,
    STORE_WRITE_FAILED,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


def authorize(event: LambdaEvent, api_token: str) -> None:
    """Raise Unauthorized unless the Authorization header carries the API token.

    The header value is compared verbatim after trimming surrounding whitespace.
    """
    header = get_header(event, 'Authorization')
    if header is None or header.strip() != f'{BEARER_SCHEME} {api_token}':
        raise Unauthorized()


def parse_body(event: LambdaEvent) -> dict[str, Any]:
    body = event.get('body') or ''
    if event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise BadRequest('Invalid request (undecodable body)') from e

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise BadRequest('Invalid request (invalid JSON body)') from e

    if not isinstance(payload, dict):
        raise BadRequest('Invalid request (JSON body must be an object)')
    return payload


def parse_request(event: LambdaEvent) -> tuple[str, str | None, int | None]:
    """Extract and validate (long_url, short_url, exp) from the request body.

    Raises:
        BadRequest: If the body is malformed or a field has the wrong type.
    """
    payload = parse_body(event)

    long_url = payload.get('long_url')
    if not isinstance(long_url, str) or not long_url:
        raise BadRequest("Invalid request (missing 'long_url' in JSON body)")

    short_url = payload.get('short_url')
    if short_url is not None and not isinstance(short_url, str):
        raise BadRequest("Invalid request ('short_url' must be a string)")

    exp = payload.get('exp')
    if exp is not None and (isinstance(exp, bool) or not isinstance(exp, int)):
        raise BadRequest("Invalid request ('exp' must be an integer number of minutes)")

    return long_url, short_url or None, exp


def expires_at(exp_minutes: int | None, now: int) -> int | None:
    """Convert a relative expiry in minutes into an absolute Unix timestamp."""
    if exp_minutes is None:
        return None
    return now + exp_minutes * 60


def build_handler(*, short_url_dao: ShortURLBaseDAO, api_token: str) -> LambdaHandler:
    """Build the POST /shorten Lambda handler around its dependencies.

    This handler follows this procedure to create or overwrite an alias:
    - Step 1: Check the bearer token in the Authorization header
    - Step 2: Validate the JSON body
    - Step 3: Pick the alias (client-supplied or randomly generated)
    - Step 4: Compute the absolute expiry timestamp
    - Step 5: Upsert the URL record keyed by alias (via DAO)
    - Step 6: Respond to client with 200 success

    HTTP responses:
        200: Alias created or overwritten
            long_url: redirect target, as stored
            short_url: alias, as stored
            exp: absolute Unix expiry timestamp, null if the alias never expires
        400: Bad client request
            error: malformed JSON, missing 'long_url' or badly typed field
        401: Unauthorized
            error: missing or wrong bearer token
        500: Internal server error
            error: the data store could not be written to

    Args:
        short_url_dao (ShortURLBaseDAO):
            DAO used to persist URL records. Shared by all invocations.
        api_token (str):
            Shared secret expected after 'Bearer ' in the Authorization header.

    Returns:
        Callable[[dict, Any], dict]:
            Lambda handler returning API Gateway Lambda Proxy responses.

    Example:
        >>> handler = build_handler(short_url_dao=dao, api_token='s3cret')
        >>> event = {
        ...     'headers': {'Authorization': 'Bearer s3cret'},
        ...     'body': '{"long_url": "https://example.com", "short_url": "abc123"}',
        ... }
        >>> response = handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])
        {'long_url': 'https://example.com', 'short_url': 'abc123', 'exp': None}
    """

    @guarantee_500_response
    @respond_to_request_errors
    def handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        # 1- Check bearer token before touching anything else
        try:
            authorize(event, api_token)
        except Unauthorized:
            logger.info('Invalid or missing token. Responding with 401.', extra={'event': UNAUTHORIZED})
            raise

        # 2- Validate request body
        try:
            long_url, short_url, exp_minutes = parse_request(event)
        except BadRequest as e:
            logger.info('Invalid request body. Responding with 400.', extra={'event': INVALID_REQUEST_BODY, 'reason': e.message})
            raise

        # 3- Use the client's alias verbatim, otherwise generate one
        if short_url is None:
            short_url = generate_alias()
            logger.debug('Generated random alias %s.', short_url)

        # 4- Compute absolute expiry
        exp = expires_at(exp_minutes, int(time.time()))

        # 5- Upsert URL record (last write wins)
        try:
            record = short_url_dao.upsert(URLRecordModel(long_url=long_url, short_url=short_url, exp=exp))
        except DataStoreError as e:
            logger.exception(
                'Failed to save URL record. Responding with 500.',
                extra={'short_url': short_url, 'event': STORE_WRITE_FAILED},
            )
            raise InternalError('Failed to save URL') from e

        # 6- Respond with the stored record
        logger.info(
            'Saved URL record. Responding with 200.',
            extra={'short_url': record.short_url, 'exp': record.exp, 'event': SHORTEN_SUCCESS},
        )
        return response_json(
            200,
            {
                'long_url': record.long_url,
                'short_url': record.short_url,
                'exp': record.exp,
            },
        )

    return handler


@functools.cache
def default_handler() -> LambdaHandler:
    """Bootstrap the handler once per execution environment.

    Configuration errors and an unreachable Redis propagate and fail the
    invocation: the function is unusable until it is reconfigured.
    """
    settings = load_settings()
    short_url_dao = ShortURLRedisDAO(
        redis_url=settings.redis_url,
        redis_socket_timeout=settings.redis_socket_timeout,
        prefix=app_prefix(),
    )
    return build_handler(short_url_dao=short_url_dao, api_token=settings.api_token)


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway POST /shorten requests."""
    return default_handler()(event, context)
