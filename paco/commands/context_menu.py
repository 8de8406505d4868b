from paco.discord import ApplicationCommand, message_command, user_command


# ? user context menu
view_profile = user_command(name='View Profile')
report_user = user_command(name='Report User')

# ? message context menu
search_in_kb = message_command(name='Search in KB')
report_message = message_command(name='Report Message')
ask_paco = message_command(name='Ask Paco About This')


COMMANDS: list[ApplicationCommand] = [
    view_profile,
    report_user,
    search_in_kb,
    report_message,
    ask_paco,
]
