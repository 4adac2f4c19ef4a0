"""Detect where the Lambda code is executing.

`sam local invoke` and `sam local start-api` export AWS_SAM_LOCAL=true, and
local development sets APP_ENV=local. Either one means the code is not
running in AWS, so AWS endpoints are swapped for LocalStack and
unexpected exceptions are re-raised instead of being turned into HTTP 500.
"""

import os

from urlalias.constants import ENV


def running_locally() -> bool:
    app_env = os.getenv(ENV.App.APP_ENV, '').lower()
    return app_env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'
