import sys

import click
from src.modules.host import ConfigLoader, ConfiguredHost, ScannerConfig
from src.modules.logging import create_logger, BaseLogger, LOGGERS, LOG_LEVELS
from src.modules.scanner import ApiScanner, ModuleIntrospector
from src.modules.scanner.commands import create_scan_commands
from src.modules.versions import VersionRegistry


class RestscopeContext:
    """Context object to store CLI state."""
    def __init__(self):
        self.logger: BaseLogger | None = None
        self.config = ScannerConfig()
        self.registry: VersionRegistry | None = None
        self.output_format = 'json'

    def create_scanner(self) -> ApiScanner:
        return ApiScanner(
            host=ConfiguredHost(self.config),
            introspector=ModuleIntrospector(self.logger),
            logger=self.logger,
            registry=self.registry,
            config=self.config
        )

pass_context = click.make_pass_decorator(RestscopeContext, ensure=True)

@click.group()
@click.option('--output', '-o',
              type=click.Choice(list(LOGGERS.keys())),
              default='colorful',
              help='Log format (colorful for CLI, plain for CI/file, json for machine parsing)',
              envvar='RESTSCOPE_OUTPUT')
@click.option('--log-level', '-l',
              type=click.Choice(LOG_LEVELS),
              default='INFO',
              help='Set the logging level',
              envvar='RESTSCOPE_LOG_LEVEL')
@click.option('--config', '-c', 'config_file',
              type=click.Path(exists=True, dir_okay=False),
              help='YAML file describing the host core and its plugins',
              envvar='RESTSCOPE_CONFIG')
@click.option('--root-url',
              help='Base URL of the running host, overrides the configuration',
              envvar='RESTSCOPE_ROOT_URL')
@pass_context
def cli(ctx, output, log_level, config_file, root_url):
    """RestScope CLI Tool: OpenAPI documents from a running host's exported API."""
    ctx.logger = create_logger(output, log_level)
    ctx.registry = VersionRegistry(ctx.logger)
    try:
        if config_file:
            ctx.config = ConfigLoader.from_file(config_file)
        if root_url:
            ctx.config = ScannerConfig.model_validate({**ctx.config.model_dump(), 'root_url': root_url})
    except ValueError as e:
        ctx.logger.log_error(f"Invalid configuration: {e}")
        sys.exit(2)

# Add commands
cli.add_command(create_scan_commands())

def main():
    cli()

if __name__ == '__main__':
    main()
