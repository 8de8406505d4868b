from __future__ import annotations

import pytest

from paco.discord import (
    ApplicationCommandOptionType,
    ApplicationCommandType,
    ApplicationCommand,
    SlashCommandGroup,
    message_command,
    slash_command,
    user_command,
    ensure_valid,
    validate,
    Permission,
    Rule,
)
from paco.errors import CatalogValidationError

from conftest import catalog_of, kb_and_ping, option


OptionType = ApplicationCommandOptionType
Choice = ApplicationCommand.Option.Choice


def rules_of(catalog) -> set[Rule]:  # noqa: ANN001
    return {violation.rule for violation in validate(catalog)}


def test_kb_and_ping_are_valid() -> None:
    assert validate(kb_and_ping()) == []


def test_ensure_valid_reports_every_violation() -> None:
    catalog = catalog_of(
        slash_command(name='Ping', description='Health check'),
        slash_command(name='status', description=''))

    with pytest.raises(CatalogValidationError) as e:
        ensure_valid(catalog)

    assert {v.rule for v in e.value.violations} == {Rule.NAME_FORMAT, Rule.DESCRIPTION}
    assert '2 catalog violation(s)' in str(e.value)
    assert 'test[0]/Ping' in str(e.value)
    assert 'test[1]/status' in str(e.value)


def test_rule_subset() -> None:
    catalog = catalog_of(slash_command(name='Ping', description=''))

    assert {v.rule for v in validate(catalog, {Rule.DESCRIPTION})} == {Rule.DESCRIPTION}


class TestUniqueNames:
    def test_duplicate_is_reported_with_both_paths(self) -> None:
        catalog = catalog_of(
            slash_command(name='ping', description='Health check'),
            slash_command(name='ping', description='Another health check'))

        [violation] = validate(catalog)

        assert violation.rule == Rule.UNIQUE_NAME
        assert violation.path == 'test[1]/ping'
        assert violation.related == ('test[0]/ping',)

    def test_same_name_different_type_is_allowed(self) -> None:
        catalog = catalog_of(
            slash_command(name='report', description='Report something'),
            message_command(name='report'),
            user_command(name='report'))

        assert validate(catalog) == []

    def test_duplicate_option_names(self) -> None:
        [violation] = validate(catalog_of(slash_command(
            name='note',
            description='Save a note',
            options=[option('text', required=True), option('text')])))

        assert violation.rule == Rule.UNIQUE_NAME
        assert violation.path == 'test[0]/note.text'
        assert violation.related == ('test[0]/note.text',)

    def test_duplicate_sub_commands(self) -> None:
        kb = SlashCommandGroup(name='kb', description='Knowledge base commands')
        kb.command(name='search', description='Search KB documents')
        kb.command(name='search', description='Search KB documents again')

        [violation] = validate(catalog_of(kb))

        assert violation.rule == Rule.UNIQUE_NAME
        assert violation.path == 'test[0]/kb.search'
        assert violation.related == ('test[0]/kb.search',)

    def test_duplicate_options_in_sub_command(self) -> None:
        todo = SlashCommandGroup(name='todo', description='Todo list management')
        todo.command(
            name='add',
            description='Add a todo item',
            options=[option('task', required=True), option('task', required=True)])

        assert rules_of(catalog_of(todo)) == {Rule.UNIQUE_NAME}

    def test_same_option_name_under_different_parents(self) -> None:
        todo = SlashCommandGroup(name='todo', description='Todo list management')
        todo.command(name='add', description='Add a todo item', options=[option('task')])
        todo.command(name='done', description='Complete a todo', options=[option('task')])

        assert validate(catalog_of(todo)) == []


class TestNameFormat:
    @pytest.mark.parametrize('name', [
        'Ping',
        'has space',
        'a' * 33,
        '',
        'emoji-\N{ROCKET}',
    ])
    def test_invalid_chat_input_names(self, name: str) -> None:
        assert rules_of(catalog_of(
            slash_command(name=name, description='A command'))) == {Rule.NAME_FORMAT}

    @pytest.mark.parametrize('name', ['ping', '8ball', 'go-live', 'kb_sync', 'café', 'a' * 32])
    def test_valid_chat_input_names(self, name: str) -> None:
        assert validate(catalog_of(slash_command(name=name, description='A command'))) == []

    def test_option_names_are_checked(self) -> None:
        [violation] = validate(catalog_of(slash_command(
            name='note',
            description='Save a note',
            options=[option('Note Text')])))

        assert violation.rule == Rule.NAME_FORMAT
        assert violation.path == 'test[0]/note.Note Text'

    def test_localized_names_are_checked(self) -> None:
        [violation] = validate(catalog_of(slash_command(
            name='ping',
            description='Health check').model_copy(
                update={'name_localizations': {'de': 'Hallo Welt'}})))

        assert violation.rule == Rule.NAME_FORMAT
        assert 'for locale de' in violation.message

    @pytest.mark.parametrize('name', ['View Profile', 'Ask Paco About This', 'Report (spam)'])
    def test_context_menu_names_allow_spaces_and_case(self, name: str) -> None:
        assert validate(catalog_of(message_command(name=name))) == []

    @pytest.mark.parametrize('name', [' View Profile', 'View Profile ', 'a' * 33, ''])
    def test_invalid_context_menu_names(self, name: str) -> None:
        assert rules_of(catalog_of(user_command(name=name))) == {Rule.NAME_FORMAT}


class TestDescriptions:
    @pytest.mark.parametrize('description', ['', '   ', 'x' * 101])
    def test_invalid_chat_input_description(self, description: str) -> None:
        assert rules_of(catalog_of(
            slash_command(name='ping', description=description))) == {Rule.DESCRIPTION}

    def test_hundred_characters_is_allowed(self) -> None:
        assert validate(catalog_of(slash_command(name='ping', description='x' * 100))) == []

    def test_option_description_is_required(self) -> None:
        [violation] = validate(catalog_of(slash_command(
            name='note',
            description='Save a note',
            options=[option('text', description='')])))

        assert violation.rule == Rule.DESCRIPTION
        assert violation.path == 'test[0]/note.text'

    def test_context_menu_cannot_have_description(self) -> None:
        command = ApplicationCommand(
            type=ApplicationCommandType.USER,
            name='View Profile',
            description='Shows a profile')

        assert rules_of(catalog_of(command)) == {Rule.DESCRIPTION}


class TestOptionOrder:
    def test_required_after_optional(self) -> None:
        [violation] = validate(catalog_of(slash_command(
            name='purge',
            description='Delete messages',
            options=[
                option('count', type=OptionType.INTEGER, required=False),
                option('user', type=OptionType.USER, required=True)])))

        assert violation.rule == Rule.OPTION_ORDER
        assert violation.path == 'test[0]/purge.user'

    def test_required_first_is_valid(self) -> None:
        assert validate(catalog_of(slash_command(
            name='purge',
            description='Delete messages',
            options=[
                option('count', type=OptionType.INTEGER, required=True),
                option('user', type=OptionType.USER, required=False)]))) == []

    def test_sub_command_options_are_checked(self) -> None:
        todo = SlashCommandGroup(name='todo', description='Todo list management')
        todo.command(
            name='add',
            description='Add a todo item',
            options=[option('priority'), option('task', required=True)])

        [violation] = validate(catalog_of(todo))

        assert violation.rule == Rule.OPTION_ORDER
        assert violation.path == 'test[0]/todo.add.task'


class TestNesting:
    def test_sub_commands_cannot_mix_with_options(self) -> None:
        command = slash_command(
            name='kb',
            description='Knowledge base',
            options=[option('query')])
        command.command(name='search', description='Search KB documents')

        assert rules_of(catalog_of(command)) == {Rule.NESTING}

    def test_group_inside_group(self) -> None:
        command = slash_command(name='org', description='Org tools')
        group = command.create_subgroup(name='team', description='Team tools')
        group.options = [option('inner', type=OptionType.SUB_COMMAND_GROUP)]

        [violation] = validate(catalog_of(command))

        assert violation.rule == Rule.NESTING
        assert violation.path == 'test[0]/org.team.inner'

    def test_sub_command_inside_sub_command(self) -> None:
        command = SlashCommandGroup(name='agent', description='Agent commands')
        outer = command.command(name='chat', description='Chat with an agent')
        outer.command(name='reply', description='Reply to an agent')

        [violation] = validate(catalog_of(command))

        assert violation.rule == Rule.NESTING
        assert violation.path == 'test[0]/agent.chat.reply'

    def test_group_holds_only_sub_commands(self) -> None:
        command = slash_command(name='org', description='Org tools')
        group = command.create_subgroup(name='team', description='Team tools')
        group.options = [option('name')]

        assert rules_of(catalog_of(command)) == {Rule.NESTING}

    def test_value_options_cannot_nest(self) -> None:
        command = slash_command(
            name='note',
            description='Save a note',
            options=[option('text', options=[option('inner')])])

        assert rules_of(catalog_of(command)) == {Rule.NESTING}

    def test_context_menu_cannot_have_options(self) -> None:
        command = ApplicationCommand(
            type=ApplicationCommandType.MESSAGE,
            name='Search in KB',
            options=[option('query')])

        assert Rule.NESTING in rules_of(catalog_of(command))

    def test_entry_point_is_rejected(self) -> None:
        command = ApplicationCommand(
            type=ApplicationCommandType.PRIMARY_ENTRY_POINT,
            name='launch',
            description='Launch the activity')

        assert rules_of(catalog_of(command)) == {Rule.NESTING}

    def test_valid_group_tree(self) -> None:
        command = slash_command(name='org', description='Org tools')
        group = command.create_subgroup(name='team', description='Team tools')
        group.command(
            name='list',
            description='List teams',
            options=[option('org', required=True)])
        command.command(name='status', description='Org status')

        assert validate(catalog_of(command)) == []


class TestChoices:
    def test_choices_and_autocomplete_are_exclusive(self) -> None:
        command = slash_command(
            name='helpme',
            description='Get help',
            options=[option(
                'command',
                autocomplete=True,
                choices=[Choice(name='Ping', value='ping')])])

        assert rules_of(catalog_of(command)) == {Rule.CHOICES}

    def test_choices_on_unsupported_type(self) -> None:
        command = slash_command(
            name='rps',
            description='Rock paper scissors',
            options=[option(
                'extended',
                type=OptionType.BOOLEAN,
                choices=[Choice(name='Yes', value='yes')])])

        assert rules_of(catalog_of(command)) == {Rule.CHOICES}

    def test_choice_value_must_match_option_type(self) -> None:
        command = slash_command(
            name='quiz',
            description='Start a quiz',
            options=[option(
                'rounds',
                type=OptionType.INTEGER,
                choices=[Choice(name='Five', value='five')])])

        assert rules_of(catalog_of(command)) == {Rule.CHOICES}

    def test_choice_name_is_required(self) -> None:
        command = slash_command(
            name='quiz',
            description='Start a quiz',
            options=[option('level', choices=[Choice(name='', value='easy')])])

        assert rules_of(catalog_of(command)) == {Rule.CHOICES}

    def test_number_accepts_integer_values(self) -> None:
        command = slash_command(
            name='tip',
            description='Leave a tip',
            options=[option(
                'amount',
                type=OptionType.NUMBER,
                choices=[Choice(name='One', value=1), Choice(name='Half', value=0.5)])])

        assert validate(catalog_of(command)) == []


class TestCardinality:
    def _with_choices(self, count: int) -> ApplicationCommand:
        return slash_command(
            name='pick',
            description='Pick something',
            options=[option('item', choices=[
                Choice(name=f'Choice {i}', value=f'choice-{i}')
                for i in range(count)])])

    def test_twenty_five_choices_pass(self) -> None:
        assert validate(catalog_of(self._with_choices(25))) == []

    def test_twenty_six_choices_fail(self) -> None:
        [violation] = validate(catalog_of(self._with_choices(26)))

        assert violation.rule == Rule.CARDINALITY
        assert violation.path == 'test[0]/pick.item'

    def test_twenty_six_options_fail(self) -> None:
        command = slash_command(
            name='wide',
            description='Too many options',
            options=[option(f'option-{i}') for i in range(26)])

        [violation] = validate(catalog_of(command))

        assert violation.rule == Rule.CARDINALITY
        assert violation.path == 'test[0]/wide'

    def test_twenty_five_options_pass(self) -> None:
        command = slash_command(
            name='wide',
            description='Many options',
            options=[option(f'option-{i}') for i in range(25)])

        assert validate(catalog_of(command)) == []


class TestPermissions:
    @pytest.mark.parametrize('value', ['abc', '-8', '0x8', -8, True, False])
    def test_malformed_permissions(self, value: str | int | bool) -> None:
        command = slash_command(
            name='admin',
            description='Admin commands',
            default_member_permissions=value)

        assert rules_of(catalog_of(command)) == {Rule.PERMISSIONS}

    @pytest.mark.parametrize('value', ['8', 0, Permission.ADMINISTRATOR | Permission.MANAGE_ROLES])
    def test_valid_permissions(self, value: str | int) -> None:
        command = slash_command(
            name='admin',
            description='Admin commands',
            default_member_permissions=value)

        assert validate(catalog_of(command)) == []


def _flat() -> ApplicationCommand:
    return slash_command(
        name='note',
        description='Save a note',
        options=[
            option('text', required=True),
            option('tags')])


def _group() -> ApplicationCommand:
    kb = SlashCommandGroup(name='kb', description='Knowledge base commands')
    kb.command(
        name='search',
        description='Search KB documents',
        options=[option('query', required=True)])
    kb.command(
        name='list',
        description='List all documents or by section',
        options=[option('section', choices=[
            Choice(name='Product', value='product'),
            Choice(name='Security', value='security')])])
    return kb


def _subgroup() -> ApplicationCommand:
    command = slash_command(name='org', description='Org tools')
    team = command.create_subgroup(name='team', description='Team tools')
    team.command(
        name='list',
        description='List teams',
        options=[
            option('org', required=True),
            option('limit', type=OptionType.INTEGER)])
    return command


def _leaf_parent(command: ApplicationCommand) -> ApplicationCommand | ApplicationCommand.Option:
    sub_commands = [
        option
        for _, option in command.walk()
        if option.type == OptionType.SUB_COMMAND
    ]
    return sub_commands[-1] if sub_commands else command


def _first_leaf(command: ApplicationCommand) -> ApplicationCommand.Option:
    return next(
        option
        for _, option in command.walk()
        if option.type == OptionType.STRING
    )


def _duplicate(command: ApplicationCommand) -> list[ApplicationCommand]:
    return [command, command.model_copy(deep=True)]


def _uppercase_name(command: ApplicationCommand) -> list[ApplicationCommand]:
    command.name = command.name.upper()
    return [command]


def _drop_description(command: ApplicationCommand) -> list[ApplicationCommand]:
    command.description = ''
    return [command]


def _required_last(command: ApplicationCommand) -> list[ApplicationCommand]:
    _leaf_parent(command).options.append(option('late', required=True))
    return [command]


def _mix_sub_command(command: ApplicationCommand) -> list[ApplicationCommand]:
    _leaf_parent(command).options.append(option('inner', type=OptionType.SUB_COMMAND))
    return [command]


def _choices_with_autocomplete(command: ApplicationCommand) -> list[ApplicationCommand]:
    leaf = _first_leaf(command)
    leaf.choices = [Choice(name='Only', value='only')]
    leaf.autocomplete = True
    return [command]


def _too_many_options(command: ApplicationCommand) -> list[ApplicationCommand]:
    _leaf_parent(command).options.extend(option(f'extra-{i}') for i in range(25))
    return [command]


def _bad_permissions(command: ApplicationCommand) -> list[ApplicationCommand]:
    command.default_member_permissions = 'not-bits'
    return [command]


BASES = {
    'flat': _flat,
    'group': _group,
    'subgroup': _subgroup,
}

BREAKERS = {
    Rule.UNIQUE_NAME: _duplicate,
    Rule.NAME_FORMAT: _uppercase_name,
    Rule.DESCRIPTION: _drop_description,
    Rule.OPTION_ORDER: _required_last,
    Rule.NESTING: _mix_sub_command,
    Rule.CHOICES: _choices_with_autocomplete,
    Rule.CARDINALITY: _too_many_options,
    Rule.PERMISSIONS: _bad_permissions,
}


def test_every_rule_has_a_breaker() -> None:
    assert set(BREAKERS) == set(Rule)


@pytest.mark.parametrize('base', list(BASES.values()), ids=list(BASES))
def test_generated_bases_are_valid(base) -> None:  # noqa: ANN001
    assert validate(catalog_of(base())) == []


@pytest.mark.parametrize(
    'base, rule',
    [
        (base, rule)
        for base in BASES.values()
        for rule in BREAKERS
    ],
    ids=[
        f'{name}-{rule}'
        for name in BASES
        for rule in BREAKERS
    ]
)
def test_breaking_one_rule_reports_only_that_rule(base, rule: Rule) -> None:  # noqa: ANN001
    catalog = catalog_of(*BREAKERS[rule](base()))

    assert rules_of(catalog) == {rule}
