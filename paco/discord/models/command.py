from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, StrictBool, StrictInt, field_validator
from regex import fullmatch

from paco.discord.types import Snowflake
from paco.discord.enums import (
    ApplicationCommandOptionType,
    ApplicationIntegrationType,
    ApplicationCommandType,
    InteractionContextType,
    ChannelType,
    Permission
)

if TYPE_CHECKING:
    from collections.abc import Iterator


__all__ = (
    'COMMAND_NAME_PATTERN',
    'CONTEXT_MENU_NAME_PATTERN',
    'ApplicationCommand',
    'parse_permission_bits',
)


COMMAND_NAME_PATTERN = r'^[-_\p{L}\p{N}\p{sc=Deva}\p{sc=Thai}]{1,32}$'
CONTEXT_MENU_NAME_PATTERN = r'^[-_ \'.,!?()\p{L}\p{N}\p{sc=Deva}\p{sc=Thai}]{1,32}$'


def parse_permission_bits(value: int | str) -> int:
    if isinstance(value, bool):
        raise ValueError(f'permission bits cannot be a boolean ({value!r})')

    if isinstance(value, int):
        if value < 0:
            raise ValueError(f'permission bits cannot be negative ({value})')
        return int(value)

    if fullmatch(r'[0-9]+', value) is None:
        raise ValueError(f'permission bits must be a decimal integer ({value!r})')

    return int(value)


class CommandMixin:
    if TYPE_CHECKING:
        options: list[ApplicationCommand.Option] | None

    def command(
        self,
        name: str,
        description: str,
        options: list[ApplicationCommand.Option] | None = None
    ) -> ApplicationCommand.Option:
        subcommand = ApplicationCommand.Option(
            type=ApplicationCommandOptionType.SUB_COMMAND,
            name=name,
            description=description,
            options=options
        )

        self.options = self.options or []
        self.options.append(subcommand)

        return subcommand


class ApplicationCommand(BaseModel, CommandMixin):
    class Option(BaseModel, CommandMixin):
        class Choice(BaseModel):
            name: str
            name_localizations: dict[str, str] | None = None
            value: str | int | float

        type: ApplicationCommandOptionType
        """Type of option"""
        name: str
        """1-32 character name"""
        name_localizations: dict[str, str] | None = None
        description: str = ''
        """1-100 character description"""
        description_localizations: dict[str, str] | None = None
        required: bool = False
        """Whether the parameter is required or optional, default `false`"""
        choices: list[ApplicationCommand.Option.Choice] | None = None
        """Choices for the user to pick from, max 25"""
        options: list[ApplicationCommand.Option] | None = None
        """Sub-command parameters or group sub-commands, max 25"""
        channel_types: list[ChannelType] | None = None
        min_value: int | float | None = None
        max_value: int | float | None = None
        min_length: int | None = None
        max_length: int | None = None
        autocomplete: bool = False
        """If autocomplete interactions are enabled for this option"""

        def __eq__(self, value: object) -> bool:
            return (
                isinstance(value, ApplicationCommand.Option) and
                value.type == self.type and
                value.name == self.name and
                value.name_localizations == self.name_localizations and
                value.description == self.description and
                value.description_localizations == self.description_localizations and
                value.required == self.required and
                value.choices == self.choices and
                (value.options or []) == (self.options or []) and
                value.channel_types == self.channel_types and
                value.min_value == self.min_value and
                value.max_value == self.max_value and
                value.min_length == self.min_length and
                value.max_length == self.max_length and
                value.autocomplete == self.autocomplete
            )

        def walk(self, parent: str) -> Iterator[tuple[str, ApplicationCommand.Option]]:
            path = f'{parent}.{self.name}'

            yield path, self

            for option in self.options or []:
                yield from option.walk(path)

        def as_payload(self) -> dict[str, Any]:
            return self.model_dump(mode='json', exclude_defaults=True)

    id: Snowflake | None = None
    """Registry-assigned id, never set locally"""
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    application_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    name: str
    """1-32 characters; lowercase for `CHAT_INPUT`"""
    name_localizations: dict[str, str] | None = None
    description: str = ''
    """1-100 characters for `CHAT_INPUT`, empty for `USER` and `MESSAGE`"""
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommand.Option] | None = None
    """Parameters for the command, max of 25"""
    default_member_permissions: StrictBool | StrictInt | str | None = None
    """Set of permissions represented as a bit set, stored as a decimal string"""
    dm_permission: bool | None = None
    """Whether the command can be used outside of a guild, defaults to `true`"""
    nsfw: bool = False
    integration_types: list[ApplicationIntegrationType] | None = None
    contexts: list[InteractionContextType] | None = None
    version: Snowflake | None = None

    @field_validator('default_member_permissions', mode='before')
    @classmethod
    def _normalize_permissions(cls, value: Any) -> Any:  # noqa: ANN401
        # ? malformed values are kept as-is and reported by the validator
        if isinstance(value, Permission):
            return str(int(value))

        if (
            isinstance(value, int) and
            not isinstance(value, bool) and
            value >= 0
        ):
            return str(value)

        return value

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, ApplicationCommand) and
            value.type == self.type and
            value.name == self.name and
            value.name_localizations == self.name_localizations and
            value.description == self.description and
            value.description_localizations == self.description_localizations and
            (value.options or []) == (self.options or []) and
            value.default_member_permissions == self.default_member_permissions and
            value.allow_in_dm == self.allow_in_dm and
            value.nsfw == self.nsfw and
            value.integration_types == self.integration_types and
            value.contexts == self.contexts
        )

    @property
    def key(self) -> tuple[str, ApplicationCommandType]:
        return self.name, self.type

    @property
    def allow_in_dm(self) -> bool:
        return self.dm_permission is not False

    @property
    def permission_bits(self) -> int | None:
        if self.default_member_permissions is None:
            return None

        return parse_permission_bits(self.default_member_permissions)

    def walk(self) -> Iterator[tuple[str, ApplicationCommand.Option]]:
        for option in self.options or []:
            yield from option.walk(self.name)

    def create_subgroup(
        self,
        name: str,
        description: str,
    ) -> ApplicationCommand.Option:
        subgroup = ApplicationCommand.Option(
            type=ApplicationCommandOptionType.SUB_COMMAND_GROUP,
            name=name,
            description=description
        )

        self.options = self.options or []
        self.options.append(subgroup)

        return subgroup

    def as_payload(self) -> dict[str, Any]:
        json: dict[str, Any] = {
            'name': self.name,
            'type': self.type.value,
            'description': (
                ''
                if self.type.is_context_menu else
                self.description
            ),
        }

        if self.type == ApplicationCommandType.CHAT_INPUT:
            json['options'] = [
                option.as_payload()
                for option in self.options or []
            ]

        if self.name_localizations is not None:
            json['name_localizations'] = self.name_localizations

        if (
            self.description_localizations is not None and
            not self.type.is_context_menu
        ):
            json['description_localizations'] = self.description_localizations

        if (permission_bits := self.permission_bits) is not None:
            json['default_member_permissions'] = str(permission_bits)

        contexts = self.contexts

        # ? dm_permission is deprecated upstream, express it through contexts
        if contexts is None and self.dm_permission is False:
            contexts = [InteractionContextType.GUILD]

        if self.nsfw:
            json['nsfw'] = self.nsfw

        if self.integration_types is not None:
            json['integration_types'] = [
                integration_type.value
                for integration_type in self.integration_types
            ]

        if contexts is not None:
            json['contexts'] = [
                context.value
                for context in contexts
            ]

        return json


ApplicationCommand.Option.Choice.model_rebuild()
ApplicationCommand.Option.model_rebuild()
ApplicationCommand.model_rebuild()
