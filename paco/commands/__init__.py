from paco.discord import CommandCatalog

from . import context_menu, extended, general


SOURCES = (
    ('general', general.COMMANDS),
    ('extended', extended.COMMANDS),
    ('context_menu', context_menu.COMMANDS),
)


def build_catalog() -> CommandCatalog:
    return CommandCatalog.from_sources(*SOURCES)
