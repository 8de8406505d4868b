from __future__ import annotations

from typing import Self, TYPE_CHECKING
from os import environ as os_environ

from pydantic import BaseModel, ValidationError

from paco.discord.commands import Credentials, CommandScope
from paco.discord.http import BASE_URL
from paco.discord.types import Snowflake
from paco.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping


ENVIRONMENT_KEYS = {
    'bot_token': 'DISCORD_TOKEN',
    'application_id': 'DISCORD_APP_ID',
    'guild_id': 'DISCORD_GUILD_ID',
    'api_url': 'DISCORD_API_URL',
    'logfire_token': 'LOGFIRE_TOKEN',
    'dev': 'DEV'
}


class Env(BaseModel):
    bot_token: str | None = None
    application_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    api_url: str = BASE_URL
    logfire_token: str | None = None
    dev: bool = True

    @classmethod
    def new(cls, environ: Mapping[str, str] | None = None) -> Self:
        environ = os_environ if environ is None else environ

        # ? empty values are treated the same as unset ones
        values = {
            field: value.strip()
            for field, key in ENVIRONMENT_KEYS.items()
            if (value := environ.get(key, '')).strip()
        }

        if 'dev' in values:
            values['dev'] = values['dev'] != '0'

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            invalid = [
                ENVIRONMENT_KEYS[str(error['loc'][0])]
                for error in e.errors()
                if error['loc']
            ]
            raise ConfigurationError(
                invalid,
                f'invalid configuration value(s): {', '.join(invalid)}'
            ) from e

    def credentials(self) -> Credentials:
        missing = [
            ENVIRONMENT_KEYS[field]
            for field in ('bot_token', 'application_id')
            if getattr(self, field) is None
        ]

        if missing:
            raise ConfigurationError(missing)

        return Credentials(
            application_id=self.application_id,
            token=self.bot_token
        )

    def scope(self, global_scope: bool = False) -> CommandScope:
        if global_scope:
            return CommandScope.GLOBAL

        if self.guild_id is None:
            raise ConfigurationError([ENVIRONMENT_KEYS['guild_id']])

        return CommandScope.guild(self.guild_id)
