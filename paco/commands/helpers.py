from paco.discord import ApplicationCommand


Choice = ApplicationCommand.Option.Choice


def choices(*pairs: tuple[str, str | int | float]) -> list[Choice]:
    return [
        Choice(name=name, value=value)
        for name, value in pairs
    ]


PRIORITY_CHOICES = (
    ('High', 'high'),
    ('Medium', 'medium'),
    ('Low', 'low'),
)

TICKET_PRIORITY_CHOICES = (
    ('Critical', 'critical'),
    *PRIORITY_CHOICES,
)

ORG_CHOICES = (
    ('CommunityOS', 'communityos'),
    ('BELIVEITMAKEIT', 'bim'),
    ('Jacobo Streaming', 'streaming'),
)

PROJECT_CHOICES = (
    ('CommunityOS', 'communityos'),
    ('Paco Hub', 'paco-hub'),
)

WORD_CATEGORY_CHOICES = (
    ('Tech Terms', 'tech'),
    ('Programming', 'programming'),
    ('AI & ML', 'ai'),
    ('General Words', 'general'),
)
