"""Command implementations behind the ftsbench CLI."""
