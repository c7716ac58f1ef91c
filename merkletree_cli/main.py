"""merkle CLI entry point - assembles all commands."""
import logging

import click

from merkletree.config import TreeConfig
from merkletree.constants import LOG_FORMAT

from . import __version__
from .tree_cmd import hash_cmd, prove, root, verify


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log tree construction at DEBUG level')
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """merkle: Merkle tree roots and inclusion proofs."""
    try:
        config = TreeConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e))

    logging.basicConfig(level="DEBUG" if verbose else config.log_level, format=LOG_FORMAT)
    ctx.obj = config


cli.add_command(hash_cmd)
cli.add_command(root)
cli.add_command(prove)
cli.add_command(verify)


if __name__ == "__main__":
    cli()
