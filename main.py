from dotenv import load_dotenv
import logfire
import uvloop
import click

from paco.errors import BasePacoException, CatalogValidationError
from paco.discord import CommandCatalog, RegisteredSet, publish, validate
from paco.commands import build_catalog
from paco.version import VERSION
from paco.env import Env


def configure_logfire(env: Env) -> None:
    logfire.configure(
        send_to_logfire='if-token-present',
        service_name='paco-commands' + ('-dev' if env.dev else ''),
        service_version=VERSION,
        token=env.logfire_token,
        environment='development' if env.dev else 'production',
        scrubbing=False if env.dev else None,
        console=False
    )

    if env.logfire_token:
        logfire.instrument_aiohttp_client()


def fail(error: BasePacoException) -> None:
    logfire.error(
        '{error_type}: {error}',
        error_type=error.__class__.__name__,
        error=str(error)
    )

    click.echo(f'{error.__class__.__name__}: {error}', err=True)
    raise SystemExit(1)


def dry_run(catalog: CommandCatalog) -> None:
    if violations := validate(catalog):
        fail(CatalogValidationError(violations))

    for entry in catalog.entries:
        click.echo(
            f'{entry.source:<20} {entry.command.type.name:<10} {entry.command.name}'
        )

    click.echo(f'{len(catalog)} commands valid, nothing published')


async def register(
    env: Env,
    catalog: CommandCatalog,
    global_scope: bool
) -> RegisteredSet:
    return await publish(
        catalog,
        env.scope(global_scope),
        env.credentials(),
        api_url=env.api_url
    )


@click.command()
@click.option(
    '--global', 'global_scope',
    is_flag=True,
    help='Register application-wide instead of to DISCORD_GUILD_ID.')
@click.option(
    '--dry-run', 'dry',
    is_flag=True,
    help='Validate the catalog and list it without publishing.')
@click.version_option(VERSION, prog_name='paco-commands')
def main(global_scope: bool, dry: bool) -> None:
    """Publish the bot's command catalog to the Discord registry."""
    load_dotenv()

    try:
        env = Env.new()
    except BasePacoException as e:
        fail(e)
        return

    configure_logfire(env)

    catalog = build_catalog()

    logfire.debug(
        'built catalog of {command_count} commands',
        command_count=len(catalog)
    )

    if dry:
        dry_run(catalog)
        return

    try:
        registered = uvloop.run(register(env, catalog, global_scope))
    except BasePacoException as e:
        fail(e)
        return

    click.echo(
        f'registered {len(registered)} commands to {registered.scope}'
    )


if __name__ == '__main__':
    main()
