"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the lambda handler's `__init__.py` file
before any other logging is done.

Every line written to stdout (and therefore to CloudWatch) is one JSON object:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "urlalias.lambdas.redirect_url.app",
    "message": "Redirecting client to long URL. Responding with 301.",
    "short_url": "abc123",
    "event": "REDIRECT_SUCCESS"
}

Keys passed through `extra=` are copied to the top level. Tracebacks go under
"exception" and stack traces under "stack".
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from urlalias.constants import ENV


# Attributes every LogRecord carries, i.e. everything that is not an `extra`
_RESERVED_ATTRS = frozenset(logging.LogRecord('', logging.NOTSET, '', 0, '', None, None).__dict__) | {'message', 'asctime'}

# AWS SDK loggers are chatty at DEBUG and log request payloads
_QUIET_LOGGERS = ('boto3', 'botocore', 'urllib3')


class JsonFormatter(logging.Formatter):
    """Render LogRecords, including their extras, as single-line JSON"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            log['stack'] = self.formatStack(record.stack_info)

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {'()': JsonFormatter},
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'loggers': {name: {'level': 'WARNING'} for name in _QUIET_LOGGERS},
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
