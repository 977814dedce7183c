"""Configuration management for qbexport.

Reads configuration from ~/.config/qbexport.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

# Number of top level categories to display on a page.
QUESTION_PAGE_LENGTH = 25


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    output_dir: Path
    page_length: int = QUESTION_PAGE_LENGTH
    page_param_name: str = "cpage"
    page_url: str = "/question/export.php"
    lang: str = "en"

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "qbexport"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="qbexport.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
            output_dir=base_dir / "exports",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "qbexport.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def get_lang_dir() -> Path:
    """Get the path to the language pack directory."""
    return Path(__file__).parent / "rendering" / "lang"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "qbexport"))

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "qbexport.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    export_config = data.get("export", {})
    output_dir = Path(export_config.get("output_dir", base_dir / "exports"))
    page_length = int(export_config.get("page_length", QUESTION_PAGE_LENGTH))
    page_param_name = export_config.get("page_param_name", "cpage")
    page_url = export_config.get("page_url", "/question/export.php")
    lang = export_config.get("lang", "en")

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        output_dir=output_dir,
        page_length=page_length,
        page_param_name=page_param_name,
        page_url=page_url,
        lang=lang,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "export": {
            "output_dir": str(config.output_dir),
            "page_length": config.page_length,
            "page_param_name": config.page_param_name,
            "page_url": config.page_url,
            "lang": config.lang,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
