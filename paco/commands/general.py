from paco.discord import (
    ApplicationCommandOptionType,
    ApplicationCommand,
    SlashCommandGroup,
    slash_command,
    Permission
)

from .helpers import (
    TICKET_PRIORITY_CHOICES,
    PRIORITY_CHOICES,
    PROJECT_CHOICES,
    ORG_CHOICES,
    choices
)


Option = ApplicationCommand.Option
OptionType = ApplicationCommandOptionType


# ? core
ping = slash_command(
    name='ping',
    description='Health check - Paco responds with uptime and mood')

status = slash_command(
    name='status',
    description='Show system service status across all orgs')

hub = slash_command(
    name='hub',
    description='Get link to Paco Hub dashboard')

daily = slash_command(
    name='daily',
    description='Get today\'s daily standup summary')

help_ = slash_command(
    name='help',
    description='Show all available commands and features')


# ? knowledge base
kb = SlashCommandGroup(
    name='kb',
    description='Knowledge base commands')

kb.command(
    name='search',
    description='Search KB documents',
    options=[
        Option(
            type=OptionType.STRING,
            name='query',
            description='Search query',
            required=True)])

kb.command(
    name='doc',
    description='Get a specific document by name',
    options=[
        Option(
            type=OptionType.STRING,
            name='name',
            description='Document name or partial match',
            required=True)])

kb.command(
    name='list',
    description='List all documents or by section',
    options=[
        Option(
            type=OptionType.STRING,
            name='section',
            description='Filter by section',
            required=False,
            choices=choices(
                ('Getting Started', 'start-here'),
                ('Product', 'product'),
                ('Architecture', 'architecture'),
                ('Operations', 'operations'),
                ('Projects', 'projects'),
                ('Security', 'security'),
                ('Finance', 'finance'),
                ('Streaming', 'streaming'),
                ('Workflows', 'workflows'),
                ('API Reference', 'api')))])

kb.command(
    name='random',
    description='Get a random KB tip or document')

kb.command(
    name='ask',
    description='Ask a question using KB context (AI-powered)',
    options=[
        Option(
            type=OptionType.STRING,
            name='question',
            description='Your question',
            required=True)])


# ? agents
agent = SlashCommandGroup(
    name='agent',
    description='Agent interaction commands')

agent.command(
    name='chat',
    description='Chat with a specific agent',
    options=[
        Option(
            type=OptionType.STRING,
            name='agent-id',
            description='Agent ID (e.g., main, coder, writer)',
            required=True),
        Option(
            type=OptionType.STRING,
            name='message',
            description='Your message to the agent',
            required=True)])

agent.command(
    name='task',
    description='Assign a task to an agent',
    options=[
        Option(
            type=OptionType.STRING,
            name='agent-id',
            description='Agent ID to assign task to',
            required=True),
        Option(
            type=OptionType.STRING,
            name='task',
            description='Task description',
            required=True),
        Option(
            type=OptionType.STRING,
            name='priority',
            description='Task priority',
            required=False,
            choices=choices(*PRIORITY_CHOICES))])

agent.command(
    name='status',
    description='Get all agent statuses')

agent.command(
    name='summon',
    description='Bring an agent to this channel',
    options=[
        Option(
            type=OptionType.STRING,
            name='agent-id',
            description='Agent ID to summon',
            required=True)])

agent.command(
    name='info',
    description='Get detailed info about an agent',
    options=[
        Option(
            type=OptionType.STRING,
            name='agent-id',
            description='Agent ID',
            required=True)])


# ? projects
project = SlashCommandGroup(
    name='project',
    description='Project management commands')

project.command(
    name='list',
    description='List all projects')

project.command(
    name='status',
    description='Get project status',
    options=[
        Option(
            type=OptionType.STRING,
            name='name',
            description='Project name or ID',
            required=True,
            choices=choices(
                *PROJECT_CHOICES,
                ('Jacobo Streaming', 'jacobo-streaming'),
                ('BELIVEITMAKEIT', 'beliveitmakeit'),
                ('Jacobo CV Pipeline', 'jacobo-cv'),
                ('Agentic Org System', 'agentic-org')))])

project.command(
    name='build',
    description='Trigger a project build',
    options=[
        Option(
            type=OptionType.STRING,
            name='name',
            description='Project name',
            required=True,
            choices=choices(*PROJECT_CHOICES))])

project.command(
    name='deploy',
    description='Trigger a project deployment',
    options=[
        Option(
            type=OptionType.STRING,
            name='name',
            description='Project name',
            required=True,
            choices=choices(*PROJECT_CHOICES)),
        Option(
            type=OptionType.STRING,
            name='environment',
            description='Deployment environment',
            required=False,
            choices=choices(
                ('Development', 'dev'),
                ('Staging', 'staging'),
                ('Production', 'prod')))])


# ? utilities
remind = slash_command(
    name='remind',
    description='Set a reminder',
    options=[
        Option(
            type=OptionType.STRING,
            name='time',
            description='When to remind (e.g., "30m", "2h", "1d")',
            required=True),
        Option(
            type=OptionType.STRING,
            name='message',
            description='Reminder message',
            required=True)])

note = slash_command(
    name='note',
    description='Save a note to memory',
    options=[
        Option(
            type=OptionType.STRING,
            name='text',
            description='Note content',
            required=True),
        Option(
            type=OptionType.STRING,
            name='tags',
            description='Optional tags (comma-separated)',
            required=False)])

notes = slash_command(
    name='notes',
    description='List your saved notes',
    options=[
        Option(
            type=OptionType.STRING,
            name='filter',
            description='Filter by tag or search term',
            required=False)])

todo = SlashCommandGroup(
    name='todo',
    description='Todo list management')

todo.command(
    name='add',
    description='Add a todo item',
    options=[
        Option(
            type=OptionType.STRING,
            name='task',
            description='Task description',
            required=True),
        Option(
            type=OptionType.STRING,
            name='priority',
            description='Task priority',
            required=False,
            choices=choices(*PRIORITY_CHOICES))])

todo.command(
    name='list',
    description='List all todos')

todo.command(
    name='done',
    description='Mark a todo as complete',
    options=[
        Option(
            type=OptionType.STRING,
            name='id',
            description='Todo ID to complete',
            required=True)])


# ? fun
eight_ball = slash_command(
    name='8ball',
    description='Ask the magic 8 ball a question',
    options=[
        Option(
            type=OptionType.STRING,
            name='question',
            description='Your yes/no question',
            required=True)])

quote = slash_command(
    name='quote',
    description='Get a random inspirational quote')

fact = slash_command(
    name='fact',
    description='Get a random tech fact')

meme = slash_command(
    name='meme',
    description='Generate a meme text',
    options=[
        Option(
            type=OptionType.STRING,
            name='topic',
            description='Meme topic (optional)',
            required=False)])

fortune = slash_command(
    name='fortune',
    description='Get your daily fortune')


# ? moderation
warn = slash_command(
    name='warn',
    description='Warn a user (Mod only)',
    default_member_permissions=Permission.BAN_MEMBERS,
    dm_permission=False,
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

timeout = slash_command(
    name='timeout',
    description='Timeout a user (Mod only)',
    default_member_permissions=Permission.MODERATE_MEMBERS,
    dm_permission=False,
    options=[
        Option(
            type=OptionType.USER,
            name='user',
            description='User to timeout',
            required=True),
        Option(
            type=OptionType.STRING,
            name='duration',
            description='Duration (e.g., "10m", "1h", "1d")',
            required=True),
        Option(
            type=OptionType.STRING,
            name='reason',
            description='Reason for timeout',
            required=False)])

clear = slash_command(
    name='clear',
    description='Clear messages in channel (Mod only)',
    default_member_permissions=Permission.MANAGE_MESSAGES,
    dm_permission=False,
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
            required=False)])

slowmode = slash_command(
    name='slowmode',
    description='Set slowmode for channel (Mod only)',
    default_member_permissions=Permission.MANAGE_CHANNELS,
    dm_permission=False,
    options=[
        Option(
            type=OptionType.INTEGER,
            name='seconds',
            description='Slowmode duration in seconds (0 to disable)',
            required=True,
            min_value=0,
            max_value=21600)])


# ? roles & org structure
role = slash_command(
    name='role',
    description='View or manage Discord role mappings',
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Action to perform',
            required=True,
            choices=choices(
                ('View My Roles', 'view'),
                ('Role Overview', 'overview'),
                ('Leadership Hierarchy', 'hierarchy')))])

setup_roles = slash_command(
    name='setup-roles',
    description='Create all org hierarchy roles (Admin only)',
    default_member_permissions=Permission.ADMINISTRATOR,
    dm_permission=False)

assign_role = slash_command(
    name='assign-role',
    description='Assign a role to a member (Mod only)',
    default_member_permissions=Permission.MANAGE_ROLES,
    dm_permission=False,
    options=[
        Option(
            type=OptionType.USER,
            name='member',
            description='Member to assign role to',
            required=True),
        Option(
            type=OptionType.STRING,
            name='role',
            description='Role to assign',
            required=True,
            choices=choices(
                ('Verified', 'Verified'),
                ('Guest', 'Guest'),
                ('VIP', 'VIP'),
                ('Subscriber', 'Subscriber'),
                ('CommunityOS', 'CommunityOS'),
                ('BELIVEITMAKEIT', 'BELIVEITMAKEIT'),
                ('JacoboStreaming', 'JacoboStreaming'),
                ('Agent', 'Agent'),
                ('Team Lead', 'Team Lead')))])

setup_org = slash_command(
    name='setup-org',
    description='Create org channel structure (Admin only)',
    default_member_permissions=Permission.ADMINISTRATOR,
    dm_permission=False)

create_team_channel = slash_command(
    name='create-team-channel',
    description='Create a team-specific channel (Admin only)',
    default_member_permissions=Permission.ADMINISTRATOR,
    dm_permission=False,
    options=[
        Option(
            type=OptionType.STRING,
            name='team-id',
            description='Team ID (e.g., core-ops, platform-eng)',
            required=True),
        Option(
            type=OptionType.STRING,
            name='team-name',
            description='Display name for the team',
            required=False)])

channel_overview = slash_command(
    name='channel-overview',
    description='View current channel structure')

orgs = slash_command(
    name='orgs',
    description='List all organizations in the umbrella system')

org = slash_command(
    name='org',
    description='Show org chart overview for a specific organization',
    options=[
        Option(
            type=OptionType.STRING,
            name='name',
            description='Organization to view',
            required=False,
            choices=choices(
                ('All Organizations', 'all'),
                *ORG_CHOICES))])

teams = slash_command(
    name='teams',
    description='List teams within an organization',
    options=[
        Option(
            type=OptionType.STRING,
            name='org',
            description='Organization to list teams for',
            required=True,
            choices=choices(
                *ORG_CHOICES,
                ('All Orgs', 'all')))])

agents = slash_command(
    name='agents',
    description='List agents within a team',
    options=[
        Option(
            type=OptionType.STRING,
            name='team',
            description='Team to list agents for',
            required=True,
            choices=choices(
                ('Core Ops', 'core-ops'),
                ('Platform Engineering', 'platform-eng'),
                ('Product & Design', 'product-design'),
                ('Knowledge & Docs', 'knowledge'),
                ('Growth & Sales', 'growth-team'),
                ('Support Team', 'support-team'),
                ('Creator Ops', 'creator-ops'),
                ('Security & Finance', 'security-finance'),
                ('Data & Analytics', 'data-team'),
                ('Automation & Workflows', 'automation-team'),
                ('BIM Leadership', 'bim-leadership'),
                ('BIM Product', 'bim-product'),
                ('Streaming Leadership', 'streaming-leadership'),
                ('Stream Production', 'stream-production'),
                ('Content Team', 'content-team'),
                ('Social Team', 'social-team')))])


# ? ai & support
ask = slash_command(
    name='ask',
    description='Ask a question to an AI agent',
    options=[
        Option(
            type=OptionType.STRING,
            name='agent',
            description='Which agent to ask',
            required=True,
            choices=choices(
                ('Paco (Orchestrator)', 'main'),
                ('MUFASA (CEO)', 'chief-of-staff'),
                ('MAXIMUS (BIM CEO)', 'bim-ceo'),
                ('STEFANO (Streaming CEO)', 'streaming-ceo'),
                ('Coder Prime', 'coder'),
                ('Writer', 'writer'),
                ('Researcher', 'researcher'),
                ('Career Agent', 'career-agent'),
                ('QA Guardian', 'qa-guardian'),
                ('Product Manager', 'product-manager'),
                ('Growth Marketer', 'growth-marketer'),
                ('Demo Producer', 'demo-producer'),
                ('UX Friend', 'ux-friend'),
                ('Stream Producer', 'stream-producer'),
                ('Content Director', 'content-director'))),
        Option(
            type=OptionType.STRING,
            name='question',
            description='Your question',
            required=True)])

ticket = slash_command(
    name='ticket',
    description='Create a support ticket',
    options=[
        Option(
            type=OptionType.STRING,
            name='description',
            description='Describe your issue or request',
            required=True),
        Option(
            type=OptionType.STRING,
            name='priority',
            description='Ticket priority',
            required=False,
            choices=choices(*TICKET_PRIORITY_CHOICES))])

support = slash_command(
    name='support',
    description='View or manage support tickets',
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Action to perform',
            required=True,
            choices=choices(
                ('New Ticket', 'new'),
                ('View Recent', 'recent'),
                ('Critical Issues', 'critical'))),
        Option(
            type=OptionType.STRING,
            name='title',
            description='Ticket title (for new tickets)',
            required=False),
        Option(
            type=OptionType.STRING,
            name='description',
            description='Ticket description (for new tickets)',
            required=False),
        Option(
            type=OptionType.STRING,
            name='priority',
            description='Ticket priority',
            required=False,
            choices=choices(*TICKET_PRIORITY_CHOICES))])


# ? announcements
ship = slash_command(
    name='ship',
    description='Post a shipped update to #ship-log',
    options=[
        Option(
            type=OptionType.STRING,
            name='text',
            description='What shipped / what changed',
            required=True),
        Option(
            type=OptionType.STRING,
            name='org',
            description='Organization this update is for',
            required=False,
            choices=choices(*ORG_CHOICES))])

swarm = slash_command(
    name='swarm',
    description='Post a swarm update to #build-swarm',
    options=[
        Option(
            type=OptionType.STRING,
            name='text',
            description='Swarm update',
            required=True)])

report = slash_command(
    name='report',
    description='Get a report from an agent team',
    options=[
        Option(
            type=OptionType.STRING,
            name='team',
            description='Which team',
            required=True,
            choices=choices(
                ('Core Ops', 'core-ops'),
                ('Platform Engineering', 'platform-eng'),
                ('Product & Design', 'product-design'),
                ('Knowledge & Docs', 'knowledge'),
                ('Growth & Sales', 'growth-team'),
                ('Creator Ops', 'creator-ops'),
                ('BIM Leadership', 'bim-leadership'),
                ('Streaming Leadership', 'streaming-leadership')))])


# ? streaming
go_live = slash_command(
    name='go-live',
    description='Announce you are going live on stream',
    options=[
        Option(
            type=OptionType.STRING,
            name='title',
            description='Stream title / what you are working on',
            required=True),
        Option(
            type=OptionType.STRING,
            name='platform',
            description='Streaming platform',
            required=False,
            choices=choices(
                ('YouTube', 'youtube'),
                ('Twitch', 'twitch'),
                ('Both', 'both')))])

end_stream = slash_command(
    name='end-stream',
    description='Announce stream has ended')

schedule = slash_command(
    name='schedule',
    description='Post a stream schedule update',
    options=[
        Option(
            type=OptionType.STRING,
            name='text',
            description='Schedule details (date, time, topic)',
            required=True)])

idea = slash_command(
    name='idea',
    description='Submit a stream/content idea',
    options=[
        Option(
            type=OptionType.STRING,
            name='text',
            description='Your idea',
            required=True)])


# ? workflows
jobs = slash_command(
    name='jobs',
    description='List current job pipeline status')

workflow = slash_command(
    name='workflow',
    description='View workflow status or trigger workflows',
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Action to perform',
            required=True,
            choices=choices(
                ('List Active', 'list'),
                ('View Status', 'status'),
                ('Recent Completions', 'completed')))])

milestone = slash_command(
    name='milestone',
    description='Announce a milestone achievement',
    options=[
        Option(
            type=OptionType.STRING,
            name='text',
            description='Milestone description',
            required=True),
        Option(
            type=OptionType.STRING,
            name='org',
            description='Organization this milestone is for',
            required=False,
            choices=choices(*ORG_CHOICES))])

link = slash_command(
    name='link',
    description='Link your Discord account to Paco Hub profile',
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Action to perform',
            required=True,
            choices=choices(
                ('Link Account', 'create'),
                ('View Link Status', 'status'),
                ('Unlink Account', 'unlink'),
                ('Sync Profile', 'sync')))])


# ? admin
mod = slash_command(
    name='mod',
    description='Moderation commands (Mod only)',
    default_member_permissions=Permission.MANAGE_MESSAGES,
    dm_permission=False,
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Moderation action',
            required=True,
            choices=choices(
                ('View Mod Log', 'log'),
                ('Clear Messages', 'clear'),
                ('Lockdown Toggle', 'lockdown'))),
        Option(
            type=OptionType.INTEGER,
            name='count',
            description='Number of messages (for clear)',
            required=False)])

sync_org = slash_command(
    name='sync-org',
    description='Sync Discord server with org.json structure (Admin only)',
    default_member_permissions=Permission.ADMINISTRATOR,
    dm_permission=False,
    options=[
        Option(
            type=OptionType.STRING,
            name='what',
            description='What to sync',
            required=True,
            choices=choices(
                ('All (roles + channels)', 'all'),
                ('Roles Only', 'roles'),
                ('Channels Only', 'channels'),
                ('Team Channels Only', 'teams')))])

list_agents = slash_command(
    name='list-agents',
    description='List all agents and their status',
    options=[
        Option(
            type=OptionType.STRING,
            name='filter',
            description='Filter agents by section/org',
            required=False,
            choices=choices(
                ('All Agents', 'all'),
                *ORG_CHOICES,
                ('Operations', 'ops'),
                ('Engineering', 'eng'),
                ('Product', 'product'),
                ('Growth', 'growth')))])

agent_info = slash_command(
    name='agent-info',
    description='Get detailed info about a specific agent',
    options=[
        Option(
            type=OptionType.STRING,
            name='agent-id',
            description='Agent ID (e.g., main, coder, writer)',
            required=True)])

kb_sync = slash_command(
    name='kb-sync',
    description='Sync knowledge base to Discord (Admin only)',
    default_member_permissions=Permission.ADMINISTRATOR,
    dm_permission=False,
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Sync action',
            required=True,
            choices=choices(
                ('Full Sync', 'full'),
                ('Post Index', 'index'),
                ('Status', 'status')))])


# ? polls (trivia lives in extended)
poll = slash_command(
    name='poll',
    description='Create a quick poll',
    options=[
        Option(
            type=OptionType.STRING,
            name='question',
            description='Poll question',
            required=True),
        Option(
            type=OptionType.STRING,
            name='options',
            description='Options (comma-separated)',
            required=True),
        Option(
            type=OptionType.STRING,
            name='duration',
            description='Poll duration (e.g., "1h", "1d")',
            required=False)])


# ? chatbot
chatbot = slash_command(
    name='chatbot',
    description='Control the chatbot settings',
    options=[
        Option(
            type=OptionType.STRING,
            name='action',
            description='Action to perform',
            required=True,
            choices=choices(
                ('Enable in Channel', 'enable'),
                ('Disable in Channel', 'disable'),
                ('Assign Agent', 'assign'),
                ('Clear Memory', 'clear-memory'),
                ('View Status', 'status'),
                ('Set Personality', 'personality'))),
        Option(
            type=OptionType.CHANNEL,
            name='channel',
            description='Target channel (for enable/disable/assign/clear)',
            required=False),
        Option(
            type=OptionType.STRING,
            name='agent',
            description='Agent ID to assign (for assign action)',
            required=False,
            choices=choices(
                ('Paco (Orchestrator)', 'main'),
                ('Coder Prime', 'coder'),
                ('QA Guardian', 'qa-guardian'),
                ('Docs Librarian', 'docs-librarian'),
                ('Product Manager', 'product-manager'),
                ('Support Sheriff', 'support-sheriff'),
                ('Growth Marketer', 'growth-marketer'),
                ('Chat Host', 'chat-host'),
                ('Content Creator', 'content-creator'),
                ('Demo Producer', 'demo-producer'))),
        Option(
            type=OptionType.STRING,
            name='setting',
            description='Personality setting to adjust',
            required=False,
            choices=choices(
                ('More Humorous', 'humor-up'),
                ('Less Humorous', 'humor-down'),
                ('More Formal', 'formal-up'),
                ('Less Formal', 'formal-down'),
                ('More Verbose', 'verbose-up'),
                ('Less Verbose', 'verbose-down'),
                ('Reset to Default', 'reset')))])


COMMANDS: list[ApplicationCommand] = [
    ping, status, hub, daily, help_,
    kb,
    agent,
    project,
    remind, note, notes, todo,
    eight_ball, quote, fact, meme, fortune,
    warn, timeout, clear, slowmode,
    role, setup_roles, assign_role, setup_org, create_team_channel,
    channel_overview, orgs, org, teams, agents,
    ask, ticket, support,
    ship, swarm, report,
    go_live, end_stream, schedule, idea,
    jobs, workflow, milestone, link,
    mod, sync_org, list_agents, agent_info, kb_sync,
    poll,
    chatbot,
]
