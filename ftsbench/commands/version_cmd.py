"""
Version command - displays ftsbench version information
"""

import click

from ftsbench.version import FTSBENCH_VERSION, REPORT_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display ftsbench version information.

    Args:
        verbose: If True, also show the release date and report schema version
    """
    if verbose:
        click.echo(f"ftsbench version {FTSBENCH_VERSION.full_version()}")
        click.echo(f"  Report schema: {REPORT_VERSION}")
    else:
        click.echo(f"ftsbench {FTSBENCH_VERSION}")
