"""API Gateway (Lambda proxy integration) response builders.

Functions:
    response_json(status_code, body) -> LambdaResponse
        JSON response with the given status code and body
    response_error(error) -> LambdaResponse
        JSON error response built from a RequestError
    response_301(location) -> LambdaResponse
        Permanent redirect to `location`

Example:
    >>> from urlalias.exceptions import NotFound
    >>> response_error(NotFound())
    {'statusCode': 404, 'headers': {'Content-Type': 'application/json'}, 'body': '{"error": "URL not found", "error_code": "SHORT_URL_NOT_FOUND"}'}
"""

import json
from typing import Any

from urlalias.exceptions import RequestError
from urlalias.types import LambdaResponse


JSON_HEADERS = {'Content-Type': 'application/json'}


def response_json(status_code: int, body: dict[str, Any]) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def response_error(error: RequestError) -> LambdaResponse:
    return response_json(error.status_code, {'error': error.message, 'error_code': error.error_code})


def response_301(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 301,
        'headers': {'Location': location},
        'body': '',  # no body needed for redirects
    }
