"""CLI subcommands for feedstamp."""
