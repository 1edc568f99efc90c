"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from deprecated_after.infrastructure.di.container import DeprecatedAfterContainer
from deprecated_after.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = DeprecatedAfterContainer()
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        validate_use_case=container.get_validate_use_case(),
        reporter=container.get_reporter(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
