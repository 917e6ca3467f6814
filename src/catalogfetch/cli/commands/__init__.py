"""CLI subcommands for catalogfetch."""
