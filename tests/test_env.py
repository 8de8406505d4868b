from __future__ import annotations

import pytest

from paco.discord import BASE_URL, CommandScope
from paco.errors import ConfigurationError
from paco.env import Env


def test_defaults() -> None:
    env = Env.new({})

    assert env.bot_token is None
    assert env.application_id is None
    assert env.api_url == BASE_URL
    assert env.dev is True


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('DISCORD_TOKEN', 'fake-token')
    monkeypatch.setenv('DISCORD_APP_ID', '100000000000000001')
    monkeypatch.setenv('DISCORD_GUILD_ID', '200000000000000002')
    monkeypatch.setenv('DEV', '0')

    env = Env.new()

    assert env.application_id == 100000000000000001
    assert env.guild_id == 200000000000000002
    assert env.dev is False


def test_empty_values_count_as_unset() -> None:
    env = Env.new({'DISCORD_TOKEN': '  ', 'DISCORD_APP_ID': ''})

    with pytest.raises(ConfigurationError) as e:
        env.credentials()

    assert e.value.missing == ['DISCORD_TOKEN', 'DISCORD_APP_ID']


def test_credentials_name_only_missing_variables() -> None:
    env = Env.new({'DISCORD_TOKEN': 'fake-token'})

    with pytest.raises(ConfigurationError) as e:
        env.credentials()

    assert e.value.missing == ['DISCORD_APP_ID']
    assert 'DISCORD_APP_ID' in str(e.value)


def test_credentials() -> None:
    credentials = Env.new({
        'DISCORD_TOKEN': 'fake-token',
        'DISCORD_APP_ID': '100000000000000001',
    }).credentials()

    assert credentials.token == 'fake-token'
    assert credentials.application_id == 100000000000000001
    assert credentials.missing == []
    assert 'fake-token' not in repr(credentials)


def test_malformed_id_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as e:
        Env.new({'DISCORD_APP_ID': 'not-a-snowflake'})

    assert e.value.missing == ['DISCORD_APP_ID']


def test_guild_scope_requires_guild_id() -> None:
    with pytest.raises(ConfigurationError) as e:
        Env.new({}).scope()

    assert e.value.missing == ['DISCORD_GUILD_ID']


def test_scopes() -> None:
    env = Env.new({'DISCORD_GUILD_ID': '200000000000000002'})

    assert env.scope() == CommandScope.guild(200000000000000002)
    assert env.scope(global_scope=True) is CommandScope.GLOBAL
