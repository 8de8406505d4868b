from .commands import CommandScope, Credentials, RegisteredSet, SlashCommandGroup, publish, slash_command, user_command, message_command
from .validation import Rule, Violation, validate, ensure_valid
from .catalog import CommandCatalog, CatalogEntry
from .http import BASE_URL, Route, request
from .types import Snowflake
from .models import *  # noqa: F403
from .enums import *  # noqa: F403

__all__ = (
    'BASE_URL',
    'CatalogEntry',
    'CommandCatalog',
    'CommandScope',
    'Credentials',
    'RegisteredSet',
    'Route',
    'Rule',
    'SlashCommandGroup',
    'Snowflake',
    'Violation',
    'ensure_valid',
    'message_command',
    'publish',
    'request',
    'slash_command',
    'user_command',
    'validate',
)
