"""Shared fixtures: a fake command registry and an isolated environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any

import logfire
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from paco.discord import (
    ApplicationCommandOptionType,
    ApplicationCommand,
    CommandCatalog,
    SlashCommandGroup,
    slash_command,
)
from paco.env import ENVIRONMENT_KEYS


logfire.configure(send_to_logfire=False, console=False)


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: dict[str, str]
    body: Any


@dataclass
class FakeRegistry:
    """Stand-in for the bulk-overwrite endpoints of the command registry."""

    application_id: str = '100000000000000001'
    requests: list[RecordedRequest] = field(default_factory=list)
    scopes: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    failure: tuple[int, Any] | None = None
    plain_text: str | None = None
    api_url: str = ''
    _ids: Any = field(default_factory=lambda: count(900000000000000000))

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_put(
            '/api/v10/applications/{application_id}/commands',
            self.put_commands)
        app.router.add_put(
            '/api/v10/applications/{application_id}/guilds/{guild_id}/commands',
            self.put_commands)
        return app

    async def put_commands(self, request: web.Request) -> web.Response:
        body = await request.json()
        self.requests.append(RecordedRequest(
            request.method,
            request.path,
            dict(request.headers),
            body))

        if self.failure is not None:
            status, payload = self.failure
            return web.json_response(payload, status=status)

        if self.plain_text is not None:
            return web.Response(text=self.plain_text, content_type='text/plain')

        guild_id = request.match_info.get('guild_id')
        scope = guild_id or 'global'

        previous = {
            (command['name'], command['type']): command['id']
            for command in self.scopes.get(scope, [])
        }

        commands = []
        for command in body:
            registered = {
                **command,
                'id': (
                    previous.get((command['name'], command['type'])) or
                    str(next(self._ids))),
                'application_id': request.match_info['application_id'],
                'version': str(next(self._ids)),
            }
            if guild_id is not None:
                registered['guild_id'] = guild_id
            commands.append(registered)

        self.scopes[scope] = commands
        return web.json_response(commands)


@pytest_asyncio.fixture
async def registry():
    registry = FakeRegistry()
    async with TestServer(registry.app()) as server:
        registry.api_url = str(server.make_url('/api/v10'))
        yield registry


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's real credentials out of every test."""
    for key in ENVIRONMENT_KEYS.values():
        monkeypatch.delenv(key, raising=False)
    yield


def catalog_of(*commands: ApplicationCommand, source: str = 'test') -> CommandCatalog:
    return CommandCatalog.from_sources((source, commands))


def option(
    name: str,
    type: ApplicationCommandOptionType = ApplicationCommandOptionType.STRING,
    description: str = 'An option',
    **kwargs,
) -> ApplicationCommand.Option:
    return ApplicationCommand.Option(
        type=type,
        name=name,
        description=description,
        **kwargs)


def kb_and_ping() -> CommandCatalog:
    ping = slash_command(name='ping', description='Health check')

    kb = SlashCommandGroup(name='kb', description='Knowledge base commands')
    kb.command(
        name='search',
        description='Search KB documents',
        options=[option('query', description='Search query', required=True)])
    kb.command(
        name='list',
        description='List all documents or by section',
        options=[option('section', description='Filter by section')])

    return catalog_of(ping, kb)
