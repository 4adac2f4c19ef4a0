"""Unit tests for API Gateway response builders in responses.py."""

import json

import pytest

from urlalias.exceptions import BadRequest, Gone, InternalError, NotFound, Unauthorized
from urlalias.utils.responses import response_301, response_error, response_json


def test_response_json():
    response = response_json(200, {'short_url': 'abc123', 'exp': None})

    assert response['statusCode'] == 200
    assert response['headers'] == {'Content-Type': 'application/json'}
    assert json.loads(response['body']) == {'short_url': 'abc123', 'exp': None}


def test_response_json_headers_are_not_shared():
    first = response_json(200, {})
    first['headers']['X-Test'] = '1'

    assert 'X-Test' not in response_json(200, {})['headers']


@pytest.mark.parametrize(
    'error, status_code, body',
    [
        (Unauthorized(), 401, {'error': 'Invalid or missing token', 'error_code': 'UNAUTHORIZED'}),
        (BadRequest(), 400, {'error': 'Invalid request', 'error_code': 'BAD_REQUEST'}),
        (NotFound(), 404, {'error': 'URL not found', 'error_code': 'SHORT_URL_NOT_FOUND'}),
        (Gone(), 410, {'error': 'URL has expired', 'error_code': 'SHORT_URL_EXPIRED'}),
        (InternalError('Failed to save URL'), 500, {'error': 'Failed to save URL', 'error_code': 'INTERNAL_SERVER_ERROR'}),
    ],
)
def test_response_error(error, status_code, body):
    response = response_error(error)

    assert response['statusCode'] == status_code
    assert json.loads(response['body']) == body


def test_response_301():
    response = response_301(location='https://example.com/path?q=1')

    assert response['statusCode'] == 301
    assert response['headers'] == {'Location': 'https://example.com/path?q=1'}
    assert response['body'] == ''
