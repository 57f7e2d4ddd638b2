"""BotStatus command-line app and chat command glue."""
