from typing import Any
from collections.abc import Callable

from botocore.client import BaseClient


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type LambdaHandler = Callable[[LambdaEvent, LambdaContext], LambdaResponse]

# Type aliases for boto3 clients
type SecretsManagerClient = BaseClient
