from urlalias.utils.config import app_env, app_name, app_prefix, load_settings, Settings
from urlalias.utils.helpers import get_header, require_environment, respond_to_request_errors, guarantee_500_response
from urlalias.utils.shortener import generate_alias
from urlalias.utils.logging import initialize_logging


__all__ = [
    'generate_alias',
    'app_env',
    'app_name',
    'app_prefix',
    'load_settings',
    'Settings',
    'get_header',
    'require_environment',
    'respond_to_request_errors',
    'guarantee_500_response',
    'initialize_logging',
]
