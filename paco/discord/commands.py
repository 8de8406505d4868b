from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal, TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError
import logfire

from paco.errors import ConfigurationError, HTTPException

from .models import ApplicationCommand
from .validation import ensure_valid
from .http import BASE_URL, Route, request
from .types import Snowflake
from .enums import (
    ApplicationIntegrationType,
    InteractionContextType,
    ApplicationCommandType,
    Permission
)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from .catalog import CommandCatalog


__all__ = (
    'CommandScope',
    'Credentials',
    'RegisteredSet',
    'SlashCommandGroup',
    'message_command',
    'publish',
    'slash_command',
    'user_command',
)


@dataclass(frozen=True, slots=True)
class CommandScope:
    GLOBAL: ClassVar[CommandScope]

    guild_id: int | None = None

    @classmethod
    def guild(cls, guild_id: int) -> CommandScope:
        return cls(guild_id=guild_id)

    @property
    def is_global(self) -> bool:
        return self.guild_id is None

    def route(
        self,
        application_id: int,
        base_url: str = BASE_URL
    ) -> Route:
        if self.guild_id is None:
            return Route(
                'PUT',
                '/applications/{application_id}/commands',
                base_url,
                application_id=application_id
            )

        return Route(
            'PUT',
            '/applications/{application_id}/guilds/{guild_id}/commands',
            base_url,
            application_id=application_id,
            guild_id=self.guild_id
        )

    def __str__(self) -> str:
        return 'global' if self.guild_id is None else f'guild {self.guild_id}'


CommandScope.GLOBAL = CommandScope()


class Credentials(BaseModel):
    application_id: Snowflake | None = None
    token: str | None = Field(None, repr=False)
    token_type: Literal['Bot', 'Bearer'] = 'Bot'

    @property
    def missing(self) -> list[str]:
        return [
            field
            for field in ('application_id', 'token')
            if not getattr(self, field)
        ]


@dataclass(frozen=True, slots=True)
class RegisteredSet:
    scope: CommandScope
    commands: list[ApplicationCommand]

    def __len__(self) -> int:
        return len(self.commands)

    @property
    def names(self) -> list[str]:
        return [command.name for command in self.commands]

    @property
    def ids(self) -> dict[str, int | None]:
        return {
            command.name: command.id
            for command in self.commands
        }


def _parse_registered(response: Any) -> list[ApplicationCommand]:  # noqa: ANN401
    # ? a 2xx body that isn't a command list is a transport failure
    if not isinstance(response, list):
        raise HTTPException(response)

    try:
        return [ApplicationCommand(**command) for command in response]
    except (TypeError, ValidationError) as e:
        raise HTTPException(response) from e


async def publish(
    catalog: CommandCatalog,
    scope: CommandScope,
    credentials: Credentials,
    *,
    api_url: str = BASE_URL,
    session: ClientSession | None = None
) -> RegisteredSet:
    """Replace every command registered in `scope` with `catalog`.

    Commands missing from the catalog are removed by the registry, matching
    ones keep their ids. Concurrent publishes to the same scope are resolved
    by the registry, the last write wins.
    """
    if missing := credentials.missing:
        raise ConfigurationError(missing)

    ensure_valid(catalog)

    # ? guarded by ConfigurationError above
    assert credentials.application_id is not None
    assert credentials.token is not None

    with logfire.span(
        'publish {command_count} commands to {scope}',
        command_count=len(catalog),
        scope=str(scope)
    ):
        response = await request(
            scope.route(credentials.application_id, api_url),
            token=credentials.token,
            token_type=credentials.token_type,
            json=catalog.as_payload(),
            session=session
        )

        registered = RegisteredSet(scope, _parse_registered(response))

        logfire.info(
            'registry accepted {command_count} commands',
            command_count=len(registered),
            commands=registered.names
        )

    return registered


def _base_command(
    type: ApplicationCommandType,
    name: str,
    **kwargs  # noqa: ANN003
) -> ApplicationCommand:
    return ApplicationCommand(
        type=type,
        name=name,
        **{
            key: value
            for key, value in kwargs.items()
            if value is not None
        }
    )


def slash_command(
    name: str,
    description: str,
    options: list[ApplicationCommand.Option] | None = None,
    default_member_permissions: Permission | int | str | None = None,
    dm_permission: bool | None = None,
    nsfw: bool = False,
    integration_types: list[ApplicationIntegrationType] | None = None,
    contexts: list[InteractionContextType] | None = None
) -> ApplicationCommand:
    return _base_command(
        ApplicationCommandType.CHAT_INPUT,
        name=name,
        description=description,
        options=options,
        default_member_permissions=default_member_permissions,
        dm_permission=dm_permission,
        nsfw=nsfw,
        integration_types=integration_types,
        contexts=contexts
    )


def SlashCommandGroup(
    name: str,
    description: str,
    default_member_permissions: Permission | int | str | None = None,
    dm_permission: bool | None = None,
    nsfw: bool = False,
    integration_types: list[ApplicationIntegrationType] | None = None,
    contexts: list[InteractionContextType] | None = None
) -> ApplicationCommand:
    return slash_command(
        name=name,
        description=description,
        default_member_permissions=default_member_permissions,
        dm_permission=dm_permission,
        nsfw=nsfw,
        integration_types=integration_types,
        contexts=contexts
    )


def user_command(
    name: str,
    default_member_permissions: Permission | int | str | None = None,
    dm_permission: bool | None = None
) -> ApplicationCommand:
    return _base_command(
        ApplicationCommandType.USER,
        name=name,
        default_member_permissions=default_member_permissions,
        dm_permission=dm_permission
    )


def message_command(
    name: str,
    default_member_permissions: Permission | int | str | None = None,
    dm_permission: bool | None = None
) -> ApplicationCommand:
    return _base_command(
        ApplicationCommandType.MESSAGE,
        name=name,
        default_member_permissions=default_member_permissions,
        dm_permission=dm_permission
    )
