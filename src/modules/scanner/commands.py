import sys

import click

from .command.scan import ScanCommand


def create_scan_commands() -> click.Group:
    """Create the scan command group."""

    @click.group(name='scan')
    @click.option('--format', '-f', 'output_format',
                  type=click.Choice(ScanCommand.SUPPORTED_FORMATS),
                  default='json',
                  help='Serialization of generated documents',
                  envvar='RESTSCOPE_FORMAT')
    @click.pass_context
    def scan(ctx, output_format: str):
        """Generate API specifications of the host."""
        ctx.obj.output_format = output_format

    def _command(ctx) -> ScanCommand:
        return ScanCommand(
            logger=ctx.obj.logger,
            scanner=ctx.obj.create_scanner(),
            output_format=ctx.obj.output_format
        )

    @scan.command(name='core')
    @click.pass_context
    def core(ctx):
        """Print the specification of the host core."""
        if not _command(ctx).run_core():
            sys.exit(1)

    @scan.command(name='plugin')
    @click.argument('plugin_id')
    @click.pass_context
    def plugin(ctx, plugin_id: str):
        """Print the specification of one plugin."""
        if not _command(ctx).run_plugin(plugin_id):
            sys.exit(1)

    @scan.command(name='plugins')
    @click.pass_context
    def plugins(ctx):
        """Print the specifications of all active plugins."""
        if not _command(ctx).run_plugins():
            sys.exit(1)

    @scan.command(name='list')
    @click.pass_context
    def api_list(ctx):
        """List the available specifications and their URLs."""
        if not _command(ctx).run_list():
            sys.exit(1)

    @scan.command(name='versions')
    @click.argument('namespace', required=False)
    @click.pass_context
    def versions(ctx, namespace: str | None = None):
        """List registered API versions, for one namespace or all of them."""
        if not _command(ctx).run_versions(namespace):
            sys.exit(1)

    return scan
