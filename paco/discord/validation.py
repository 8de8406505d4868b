from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from enum import StrEnum

from regex import fullmatch

from paco.errors import CatalogValidationError

from .enums import ApplicationCommandOptionType, ApplicationCommandType
from .models import (
    CONTEXT_MENU_NAME_PATTERN,
    COMMAND_NAME_PATTERN,
    ApplicationCommand,
    parse_permission_bits
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .catalog import CommandCatalog, CatalogEntry


__all__ = (
    'MAX_CHOICES',
    'MAX_OPTIONS',
    'Rule',
    'Violation',
    'ensure_valid',
    'validate',
)


MAX_OPTIONS = 25
MAX_CHOICES = 25
MAX_NAME_LENGTH = 32
MAX_DESCRIPTION_LENGTH = 100

Option = ApplicationCommand.Option


class Rule(StrEnum):
    UNIQUE_NAME = 'unique-name'
    NAME_FORMAT = 'name-format'
    DESCRIPTION = 'description'
    OPTION_ORDER = 'option-order'
    NESTING = 'nesting'
    CHOICES = 'choices'
    CARDINALITY = 'cardinality'
    PERMISSIONS = 'permissions'


@dataclass(frozen=True, slots=True)
class Violation:
    rule: Rule
    path: str
    message: str
    related: tuple[str, ...] = ()

    def __str__(self) -> str:
        related = (
            f' (conflicts with {', '.join(self.related)})'
            if self.related else ''
        )

        return f'[{self.rule}] {self.path}: {self.message}{related}'


def _path(entry: CatalogEntry, option_path: str | None = None) -> str:
    return f'{entry.source}/{option_path or entry.command.name}'


def _valid_description(description: str) -> bool:
    return 0 < len(description.strip()) and len(description) <= MAX_DESCRIPTION_LENGTH


def _valid_chat_input_name(name: str) -> bool:
    return (
        fullmatch(COMMAND_NAME_PATTERN, name) is not None and
        name == name.lower()
    )


def _valid_context_menu_name(name: str) -> bool:
    return (
        fullmatch(CONTEXT_MENU_NAME_PATTERN, name) is not None and
        name == name.strip()
    )


def _check_unique_names(catalog: CommandCatalog) -> Iterator[Violation]:
    seen: dict[tuple[str, ApplicationCommandType], str] = {}

    for entry in catalog.entries:
        path = _path(entry)

        if (first := seen.get(entry.command.key)) is not None:
            yield Violation(
                Rule.UNIQUE_NAME,
                path,
                f'{entry.command.type.name} command `{entry.command.name}` is declared more than once',
                (first,)
            )
            continue

        seen[entry.command.key] = path


def _check_name_format(entry: CatalogEntry) -> Iterator[Violation]:
    command = entry.command

    valid_name = (
        _valid_context_menu_name
        if command.type.is_context_menu else
        _valid_chat_input_name
    )

    for locale, name in [
        (None, command.name),
        *(command.name_localizations or {}).items()
    ]:
        if not valid_name(name):
            yield Violation(
                Rule.NAME_FORMAT,
                _path(entry),
                f'invalid {command.type.name} command name {name!r}' + (
                    f' for locale {locale}' if locale else ''
                )
            )

    for path, option in command.walk():
        for locale, name in [
            (None, option.name),
            *(option.name_localizations or {}).items()
        ]:
            if not _valid_chat_input_name(name):
                yield Violation(
                    Rule.NAME_FORMAT,
                    _path(entry, path),
                    f'invalid option name {name!r}' + (
                        f' for locale {locale}' if locale else ''
                    )
                )


def _check_descriptions(entry: CatalogEntry) -> Iterator[Violation]:
    command = entry.command

    if command.type.is_context_menu:
        if command.description or command.description_localizations:
            yield Violation(
                Rule.DESCRIPTION,
                _path(entry),
                'context menu commands cannot have a description'
            )
        return

    for locale, description in [
        (None, command.description),
        *(command.description_localizations or {}).items()
    ]:
        if not _valid_description(description):
            yield Violation(
                Rule.DESCRIPTION,
                _path(entry),
                f'description must be 1-{MAX_DESCRIPTION_LENGTH} characters' + (
                    f' for locale {locale}' if locale else ''
                )
            )

    for path, option in command.walk():
        for locale, description in [
            (None, option.description),
            *(option.description_localizations or {}).items()
        ]:
            if not _valid_description(description):
                yield Violation(
                    Rule.DESCRIPTION,
                    _path(entry, path),
                    f'description must be 1-{MAX_DESCRIPTION_LENGTH} characters' + (
                        f' for locale {locale}' if locale else ''
                    )
                )


def _option_sequences(
    command: ApplicationCommand
) -> Iterator[tuple[str, list[Option]]]:
    yield command.name, command.options or []

    for path, option in command.walk():
        if option.options:
            yield path, option.options


def _check_unique_option_names(entry: CatalogEntry) -> Iterator[Violation]:
    for parent, options in _option_sequences(entry.command):
        seen: dict[str, str] = {}

        for option in options:
            path = _path(entry, f'{parent}.{option.name}')

            if (first := seen.get(option.name)) is not None:
                yield Violation(
                    Rule.UNIQUE_NAME,
                    path,
                    f'option `{option.name}` is declared more than once in `{parent}`',
                    (first,)
                )
                continue

            seen[option.name] = path


def _check_option_order(entry: CatalogEntry) -> Iterator[Violation]:
    for parent, options in _option_sequences(entry.command):
        optional_seen: str | None = None

        for option in options:
            if option.type.is_subcommand:
                continue

            if not option.required:
                optional_seen = optional_seen or option.name
                continue

            if optional_seen is not None:
                yield Violation(
                    Rule.OPTION_ORDER,
                    _path(entry, f'{parent}.{option.name}'),
                    f'required option `{option.name}` is declared after optional option `{optional_seen}`'
                )


def _check_nesting_level(
    entry: CatalogEntry,
    parent_path: str,
    parent: ApplicationCommandOptionType | None,
    options: list[Option]
) -> Iterator[Violation]:
    subcommands = [option for option in options if option.type.is_subcommand]

    if parent != ApplicationCommandOptionType.SUB_COMMAND_GROUP and 0 < len(subcommands) < len(options):
        yield Violation(
            Rule.NESTING,
            _path(entry, parent_path),
            'sub-commands and sub-command groups cannot be mixed with regular options'
        )

    for option in options:
        path = f'{parent_path}.{option.name}'

        match option.type, parent:
            case ApplicationCommandOptionType.SUB_COMMAND_GROUP, None:
                pass
            case ApplicationCommandOptionType.SUB_COMMAND_GROUP, _:
                yield Violation(
                    Rule.NESTING,
                    _path(entry, path),
                    'sub-command groups can only be declared directly on a command'
                )
            case ApplicationCommandOptionType.SUB_COMMAND, (
                None | ApplicationCommandOptionType.SUB_COMMAND_GROUP
            ):
                pass
            case ApplicationCommandOptionType.SUB_COMMAND, _:
                yield Violation(
                    Rule.NESTING,
                    _path(entry, path),
                    'sub-commands can only be declared on a command or a sub-command group'
                )
            case _, ApplicationCommandOptionType.SUB_COMMAND_GROUP:
                yield Violation(
                    Rule.NESTING,
                    _path(entry, path),
                    f'sub-command groups can only contain sub-commands, not {option.type.name} options'
                )
            case _, _ if option.options:
                yield Violation(
                    Rule.NESTING,
                    _path(entry, path),
                    f'{option.type.name} options cannot have nested options'
                )

        if option.type.is_subcommand and option.options:
            yield from _check_nesting_level(
                entry,
                path,
                option.type,
                option.options
            )


def _check_nesting(entry: CatalogEntry) -> Iterator[Violation]:
    command = entry.command

    match command.type:
        case ApplicationCommandType.CHAT_INPUT:
            yield from _check_nesting_level(
                entry,
                command.name,
                None,
                command.options or []
            )
        case ApplicationCommandType.USER | ApplicationCommandType.MESSAGE:
            if command.options:
                yield Violation(
                    Rule.NESTING,
                    _path(entry),
                    'context menu commands cannot have options'
                )
        case ApplicationCommandType.PRIMARY_ENTRY_POINT:
            yield Violation(
                Rule.NESTING,
                _path(entry),
                'entry point commands cannot be declared in a catalog'
            )


def _valid_choice_value(
    option_type: ApplicationCommandOptionType,
    value: str | int | float
) -> bool:
    match option_type:
        case ApplicationCommandOptionType.STRING:
            return isinstance(value, str) and 0 < len(value) <= MAX_DESCRIPTION_LENGTH
        case ApplicationCommandOptionType.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        case ApplicationCommandOptionType.NUMBER:
            return isinstance(value, int | float) and not isinstance(value, bool)
        case _:
            return False


def _check_choices(entry: CatalogEntry) -> Iterator[Violation]:
    for path, option in entry.command.walk():
        if option.choices and option.autocomplete:
            yield Violation(
                Rule.CHOICES,
                _path(entry, path),
                'choices and autocomplete cannot both be set'
            )

        if (
            (option.choices or option.autocomplete) and
            not option.type.supports_choices
        ):
            yield Violation(
                Rule.CHOICES,
                _path(entry, path),
                f'{option.type.name} options cannot have choices or autocomplete'
            )
            continue

        for choice in option.choices or []:
            if not _valid_description(choice.name):
                yield Violation(
                    Rule.CHOICES,
                    _path(entry, path),
                    f'choice name {choice.name!r} must be 1-{MAX_DESCRIPTION_LENGTH} characters'
                )

            if not _valid_choice_value(option.type, choice.value):
                yield Violation(
                    Rule.CHOICES,
                    _path(entry, path),
                    f'choice value {choice.value!r} is not a valid {option.type.name} value'
                )


def _check_cardinality(entry: CatalogEntry) -> Iterator[Violation]:
    for parent, options in _option_sequences(entry.command):
        if len(options) > MAX_OPTIONS:
            yield Violation(
                Rule.CARDINALITY,
                _path(entry, parent),
                f'{len(options)} options declared, max {MAX_OPTIONS}'
            )

    for path, option in entry.command.walk():
        if option.choices and len(option.choices) > MAX_CHOICES:
            yield Violation(
                Rule.CARDINALITY,
                _path(entry, path),
                f'{len(option.choices)} choices declared, max {MAX_CHOICES}'
            )


def _check_permissions(entry: CatalogEntry) -> Iterator[Violation]:
    if entry.command.default_member_permissions is None:
        return

    try:
        parse_permission_bits(entry.command.default_member_permissions)
    except ValueError as e:
        yield Violation(
            Rule.PERMISSIONS,
            _path(entry),
            str(e)
        )


COMMAND_RULES: dict[Rule, Callable[[CatalogEntry], Iterator[Violation]]] = {
    Rule.UNIQUE_NAME: _check_unique_option_names,
    Rule.NAME_FORMAT: _check_name_format,
    Rule.DESCRIPTION: _check_descriptions,
    Rule.OPTION_ORDER: _check_option_order,
    Rule.NESTING: _check_nesting,
    Rule.CHOICES: _check_choices,
    Rule.CARDINALITY: _check_cardinality,
    Rule.PERMISSIONS: _check_permissions,
}


def validate(
    catalog: CommandCatalog,
    rules: set[Rule] | None = None
) -> list[Violation]:
    rules = set(Rule) if rules is None else rules
    violations: list[Violation] = []

    if Rule.UNIQUE_NAME in rules:
        violations.extend(_check_unique_names(catalog))

    for entry in catalog.entries:
        for rule, check in COMMAND_RULES.items():
            if rule in rules:
                violations.extend(check(entry))

    return violations


def ensure_valid(catalog: CommandCatalog) -> None:
    if violations := validate(catalog):
        raise CatalogValidationError(violations)
