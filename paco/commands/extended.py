from paco.discord import (
    ApplicationCommandOptionType,
    ApplicationCommand,
    SlashCommandGroup,
    slash_command,
    Permission
)

from .helpers import WORD_CATEGORY_CHOICES, choices


Option = ApplicationCommand.Option
OptionType = ApplicationCommandOptionType


# ? community stats & leaderboard
stats = slash_command(
    name='stats',
    description='Show community statistics',
    options=[
        Option(
            type=OptionType.STRING,
            name='type',
            description='What stats to show',
            required=False,
            choices=choices(
                ('Community Overview', 'community'),
                ('Server Stats', 'server'),
                ('My Activity', 'personal'),
                ('Agent Activity', 'agents')))])

leaderboard = slash_command(
    name='leaderboard',
    description='Show activity leaderboards',
    options=[
        Option(
            type=OptionType.STRING,
            name='type',
            description='Leaderboard type',
            required=False,
            choices=choices(
                ('Overall Activity', 'activity'),
                ('Trivia Games', 'trivia'),
                ('Word Games', 'wordscramble'),
                ('RPS Games', 'rps'),
                ('Quiz Competitions', 'quiz'),
                ('All Games', 'games'))),
        Option(
            type=OptionType.INTEGER,
            name='limit',
            description='Number of entries to show (default: 10)',
            required=False)])

profile = slash_command(
    name='profile',
    description='View user profile with badges and stats',
    options=[
        Option(
            type=OptionType.USER,
            name='user',
            description='User to view (leave empty for your own)',
            required=False)])


# ? games
trivia = slash_command(
    name='trivia',
    description='Start a trivia game',
    options=[
        Option(
            type=OptionType.STRING,
            name='category',
            description='Trivia category',
            required=False,
            choices=choices(
                ('Tech & Computing', 'tech'),
                ('Artificial Intelligence', 'ai'),
                ('Programming', 'programming'),
                ('Crypto & Web3', 'crypto'),
                ('General Knowledge', 'general'))),
        Option(
            type=OptionType.INTEGER,
            name='rounds',
            description='Number of rounds (1-10, default: 5)',
            required=False,
            min_value=1,
            max_value=10)])

wordscramble = slash_command(
    name='wordscramble',
    description='Start a word scramble game',
    options=[
        Option(
            type=OptionType.STRING,
            name='category',
            description='Word category',
            required=False,
            choices=choices(*WORD_CATEGORY_CHOICES)),
        Option(
            type=OptionType.STRING,
            name='difficulty',
            description='Difficulty level',
            required=False,
            choices=choices(
                ('Easy (short words)', 'easy'),
                ('Medium', 'medium'),
                ('Hard (long words)', 'hard')))])

hangman = slash_command(
    name='hangman',
    description='Start a hangman game',
    options=[
        Option(
            type=OptionType.STRING,
            name='category',
            description='Word category',
            required=False,
            choices=choices(*WORD_CATEGORY_CHOICES))])

rps = slash_command(
    name='rps',
    description='Play Rock Paper Scissors',
    options=[
        Option(
            type=OptionType.USER,
            name='opponent',
            description='Challenge another user (leave empty to play vs bot)',
            required=False),
        Option(
            type=OptionType.BOOLEAN,
            name='extended',
            description='Play Rock Paper Scissors Lizard Spock',
            required=False)])

numberguess = slash_command(
    name='numberguess',
    description='Play the number guessing game',
    options=[
        Option(
            type=OptionType.INTEGER,
            name='max',
            description='Maximum number (default: 100)',
            required=False),
        Option(
            type=OptionType.INTEGER,
            name='attempts',
            description='Number of attempts (default: 7)',
            required=False)])

quiz = slash_command(
    name='quiz',
    description='Start a quiz competition',
    options=[
        Option(
            type=OptionType.INTEGER,
            name='rounds',
            description='Number of questions (default: 5)',
            required=False)])

hint = slash_command(
    name='hint',
    description='Get a hint for the current word game')

endgame = slash_command(
    name='endgame',
    description='End the current game in this channel (admin only)',
    default_member_permissions=Permission.MANAGE_MESSAGES,
    dm_permission=False)


# ? suggestions & reports
suggest = slash_command(
    name='suggest',
    description='Submit a suggestion or idea',
    options=[
        Option(
            type=OptionType.STRING,
            name='title',
            description='Brief title for your suggestion',
            required=True),
        Option(
            type=OptionType.STRING,
            name='description',
            description='Detailed description of your idea',
            required=True),
        Option(
            type=OptionType.STRING,
            name='category',
            description='Category of suggestion',
            required=False,
            choices=choices(
                ('New Feature', 'feature'),
                ('Improvement', 'improvement'),
                ('Content Idea', 'content'),
                ('Stream Topic', 'stream'),
                ('Other', 'other')))])

# ? `report` is taken by the team report in general
report_issue = slash_command(
    name='report-issue',
    description='Report an issue or problem',
    options=[
        Option(
            type=OptionType.STRING,
            name='type',
            description='Type of report',
            required=True,
            choices=choices(
                ('Bug Report', 'bug'),
                ('User Report', 'user'),
                ('Spam/Scam', 'spam'),
                ('Other Issue', 'other'))),
        Option(
            type=OptionType.STRING,
            name='description',
            description='Describe the issue',
            required=True),
        Option(
            type=OptionType.STRING,
            name='evidence',
            description='Any evidence (message links, etc)',
            required=False)])


# ? admin
admin = SlashCommandGroup(
    name='admin',
    description='Admin commands',
    default_member_permissions=Permission.ADMINISTRATOR,
    dm_permission=False)

admin.command(
    name='stats',
    description='View server analytics')

admin.command(
    name='announce',
    description='Send an announcement',
    options=[
        Option(
            type=OptionType.CHANNEL,
            name='channel',
            description='Channel to send announcement to',
            required=True),
        Option(
            type=OptionType.STRING,
            name='message',
            description='Announcement message',
            required=True),
        Option(
            type=OptionType.STRING,
            name='mention',
            description='Mention everyone/here',
            required=False,
            choices=choices(
                ('No mention', 'none'),
                ('@here', 'here'),
                ('@everyone', 'everyone')))])

admin.command(
    name='role',
    description='Manage user roles',
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Action to perform',
            required=True,
            choices=choices(
                ('Add Role', 'add'),
                ('Remove Role', 'remove'))),
        Option(
            type=OptionType.USER,
            name='user',
            description='Target user',
            required=True),
        Option(
            type=OptionType.ROLE,
            name='role',
            description='Role to add/remove',
            required=True)])

admin.command(
    name='warn',
    description='Warn a user with logging',
    options=[
        Option(
            type=OptionType.USER,
            name='user',
            description='User to warn',
            required=True),
        Option(
            type=OptionType.STRING,
            name='reason',
            description='Reason for warning',
            required=True)])

admin.command(
    name='mute',
    description='Temporarily mute a user',
    options=[
        Option(
            type=OptionType.USER,
            name='user',
            description='User to mute',
            required=True),
        Option(
            type=OptionType.STRING,
            name='duration',
            description='Duration (e.g., "10m", "1h", "1d")',
            required=True),
        Option(
            type=OptionType.STRING,
            name='reason',
            description='Reason for mute',
            required=False)])

admin.command(
    name='clean',
    description='Bulk delete messages',
    options=[
        Option(
            type=OptionType.INTEGER,
            name='count',
            description='Number of messages to delete (max 100)',
            required=True,
            min_value=1,
            max_value=100),
        Option(
            type=OptionType.USER,
            name='user',
            description='Only delete messages from this user',
            required=False),
        Option(
            type=OptionType.STRING,
            name='filter',
            description='Filter type',
            required=False,
            choices=choices(
                ('All Messages', 'all'),
                ('Bot Messages Only', 'bots'),
                ('User Messages Only', 'humans'),
                ('Contains Links', 'links'),
                ('Contains Attachments', 'attachments')))])

admin.command(
    name='lockdown',
    description='Toggle channel lockdown',
    options=[
        Option(
            type=OptionType.CHANNEL,
            name='channel',
            description='Channel to lock (default: current)',
            required=False),
        Option(
            type=OptionType.STRING,
            name='reason',
            description='Reason for lockdown',
            required=False)])


# ? hub integration
community = slash_command(
    name='community',
    description='View community resources and links',
    options=[
        Option(
            type=OptionType.STRING,
            name='view',
            description='What to view',
            required=False,
            choices=choices(
                ('All Links', 'links'),
                ('Community Stats', 'stats'),
                ('Agent Directory', 'agents'),
                ('Streaming Info', 'streaming')))])


# ? help
helpme = slash_command(
    name='helpme',
    description='Get detailed help for a specific command',
    options=[
        Option(
            type=OptionType.STRING,
            name='command',
            description='Command to get help for',
            required=False,
            autocomplete=True),
        Option(
            type=OptionType.STRING,
            name='category',
            description='Browse commands by category',
            required=False,
            choices=choices(
                ('Core Commands', 'core'),
                ('Agent Commands', 'agents'),
                ('Knowledge Base', 'kb'),
                ('Games', 'games'),
                ('Moderation', 'moderation'),
                ('Streaming', 'streaming'),
                ('Utilities', 'utilities'),
                ('Admin', 'admin')))])


# ? quick actions
quickpoll = slash_command(
    name='quickpoll',
    description='Create a quick yes/no poll',
    options=[
        Option(
            type=OptionType.STRING,
            name='question',
            description='Poll question',
            required=True)])

feedback = slash_command(
    name='feedback',
    description='Submit quick feedback',
    options=[
        Option(
            type=OptionType.STRING,
            name='type',
            description='Type of feedback',
            required=True,
            choices=choices(
                ('Positive Feedback', 'positive'),
                ('Bug Report', 'bug'),
                ('Suggestion', 'suggestion'),
                ('Question', 'question'))),
        Option(
            type=OptionType.STRING,
            name='message',
            description='Your feedback',
            required=True)])


COMMANDS: list[ApplicationCommand] = [
    stats, leaderboard, profile,
    trivia, wordscramble, hangman, rps, numberguess, quiz, hint, endgame,
    suggest, report_issue,
    admin,
    community,
    helpme,
    quickpoll, feedback,
]
