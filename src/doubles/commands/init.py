"""Init command implementation."""

from pathlib import Path

from doubles.config import CONFIG_DIR, CONFIG_FILE, save_example_config
from doubles.display import console, print_error, print_info, print_success


def init_command(project_root: Path | None = None) -> None:
    """Write an example .doubles/config.yaml.

    This function contains the business logic for the init command.
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / CONFIG_DIR / CONFIG_FILE
    if config_path.exists():
        print_info(f"Config already exists at {config_path}")
        return

    try:
        save_example_config(config_path)
    except OSError as e:
        print_error(f"Failed to write config: {e}")
        raise SystemExit(1) from None

    print_success(f"Created {config_path}")
    console.print("  Edit [cyan]output.format[/] to change the default output")
