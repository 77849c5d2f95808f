from importlib.resources import files
from pathlib import Path
from typing import TypedDict, cast

import endstone
import yaml

CONFIG_FILENAME = "config.yaml"


class HydraConfig(TypedDict):
    broadcast_block_break: bool
    broadcast_block_place: bool
    log_to_console: bool


DEFAULTS: HydraConfig = {
    "broadcast_block_break": True,
    "broadcast_block_place": True,
    "log_to_console": False,
}


def default_config() -> HydraConfig:
    return cast(HydraConfig, dict(DEFAULTS))


def install_default_config(path: Path, logger: endstone.Logger) -> Path:
    """
    Writes the bundled config.yaml into the plugin's data folder unless one is already there.

    Args:
        path (Path): The plugin's data folder
        logger (endstone.Logger): Logger for install progress and failures
    Returns:
        Path: Where the config file lives
    """
    path = Path(path).resolve()
    config_output_path = path / CONFIG_FILENAME

    if config_output_path.is_file():
        return config_output_path

    try:
        path.mkdir(parents=True, exist_ok=True)
        default_config_content = (
            files("endstone_hydramc")
            .joinpath("resources")
            .joinpath(CONFIG_FILENAME)
            .read_text()
        )

        with open(config_output_path, "w") as f:
            f.write(default_config_content)

        logger.info(f"[HydraConfig] Installed config at {config_output_path}")
    except Exception as e:
        logger.error(f"[HydraConfig] Failed to install config: {e}")

    return config_output_path


def load_config(path: Path, logger: endstone.Logger | None = None) -> HydraConfig:
    """Reads config.yaml, filling in defaults for anything missing or unreadable."""
    path = Path(path)
    if path.is_dir():
        path = path / CONFIG_FILENAME

    if not path.is_file():
        if logger is not None:
            logger.warning(f"[HydraConfig] {path} not found, using defaults")
        return default_config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        if logger is not None:
            logger.error(f"[HydraConfig] Could not parse {path}: {e}")
        return default_config()
    except (OSError, UnicodeDecodeError) as e:
        if logger is not None:
            logger.error(f"[HydraConfig] Could not read {path}: {e}")
        return default_config()

    if config is None:
        return default_config()

    if not isinstance(config, dict):
        if logger is not None:
            logger.warning(
                f"[HydraConfig] {path} does not contain a mapping, using defaults"
            )
        return default_config()

    merged = {**DEFAULTS, **config}
    for key, default in DEFAULTS.items():
        if not isinstance(merged[key], bool):
            if logger is not None:
                logger.warning(
                    f"[HydraConfig] '{key}' must be true or false, got {merged[key]!r}, using {default}"
                )
            merged[key] = default

    return cast(HydraConfig, merged)
