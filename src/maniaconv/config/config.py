"""Configuration management for maniaconv."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from maniaconv.config.file_ops import write_text_file
from maniaconv.config.paths import default_config_path
from maniaconv.platform.logging import logger

MAX_WORKERS_DEFAULT = 0
OVERALL_DIFFICULTY_DEFAULT = 8.0
PLACEHOLDER_ENTRY_NAME_DEFAULT = "invalid_utf8_name"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Thread pool size for container and chart fan-out (0 lets the interpreter decide)
    max_workers: int = MAX_WORKERS_DEFAULT

    # Print the conversion summary after a run
    print_summary: bool = True

    # OverallDifficulty written into every converted chart
    overall_difficulty: float = OVERALL_DIFFICULTY_DEFAULT

    # Name used for container entries whose names are not valid UTF-8
    placeholder_entry_name: str = PLACEHOLDER_ENTRY_NAME_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# maniaconv Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/maniaconv.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Worker threads used for containers and charts (0 = automatic)")
        lines.append(f"max_workers = {self._format_toml_value(config['max_workers'])}")
        lines.append("")

        lines.append("# Print a summary of converted charts after each run")
        lines.append(f"print_summary = {self._format_toml_value(config['print_summary'])}")
        lines.append("")

        lines.append("# OverallDifficulty written into converted charts")
        lines.append(
            f"overall_difficulty = {self._format_toml_value(config['overall_difficulty'])}"
        )
        lines.append("")

        lines.append("# Fallback name for archive entries whose names are not valid UTF-8")
        lines.append(
            f"placeholder_entry_name = {self._format_toml_value(config['placeholder_entry_name'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                for key in unknown:
                    logger.warning("Ignoring unknown configuration key '%s'", key)
                    del config_dict[key]

                if not config_dict.get("log_file"):
                    config_dict["log_file"] = None

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
