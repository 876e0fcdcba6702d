"""jiri subcommands."""
