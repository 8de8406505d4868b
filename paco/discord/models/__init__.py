from .command import ApplicationCommand, COMMAND_NAME_PATTERN, CONTEXT_MENU_NAME_PATTERN, parse_permission_bits
from .ratelimit import RateLimitResponse

__all__ = (
    'COMMAND_NAME_PATTERN',
    'CONTEXT_MENU_NAME_PATTERN',
    'ApplicationCommand',
    'RateLimitResponse',
    'parse_permission_bits',
)
