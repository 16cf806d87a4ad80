"""Command implementations behind the trawl CLI."""
