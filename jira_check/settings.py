"""Settings resolution: JIRA_* env vars, .env, then the project TOML config file."""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

import tomlkit
import typer
from pydantic import SecretStr
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict
from tomlkit.exceptions import ParseError

CONFIG_PATH = Path(".jira-check.toml")
CONFIG_TABLE = "jira-check"

DEFAULT_ALLOWED_STATUSES = ["Ready For Release", "Ready For Test", "In Progress"]


class JiraCheckSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JIRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Jira Cloud site is https://{org}.atlassian.net
    org: str | None = None
    username: str | None = None
    api_token: SecretStr | None = None

    allowed_statuses: list[str] = DEFAULT_ALLOWED_STATUSES
    timeout: float = 30.0  # seconds, per request
    dedupe_keys: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # init kwargs carry the TOML file, which env vars and .env override
        return env_settings, dotenv_settings, init_settings, file_secret_settings


@lru_cache(maxsize=4)
def _load_toml(path: Path) -> tomlkit.TOMLDocument:
    """Load the config file, returning an empty document if missing."""
    if not path.exists():
        return tomlkit.document()
    with path.open() as fh:
        return tomlkit.load(fh)


def _config_defaults(config: Mapping) -> dict:
    """Use the [jira-check] table if present, else the top-level scalar keys."""
    section = config.get(CONFIG_TABLE)
    if isinstance(section, Mapping):
        return dict(section)
    # tomlkit Table implements MutableMapping but not dict, so check Mapping
    return {k: v for k, v in config.items() if not isinstance(v, Mapping)}


def get_settings(config_path: Path | None = None, require_credentials: bool = True) -> JiraCheckSettings:
    """Return fully populated settings.

    Precedence (highest to lowest):
    1. JIRA_* environment variables
    2. JIRA_* entries in .env in cwd
    3. --config file, else .jira-check.toml in cwd
    4. Field defaults
    """
    path = config_path or CONFIG_PATH
    if config_path is not None and not config_path.exists():
        typer.echo(f"Config file {config_path} not found")
        raise typer.Exit(1)

    try:
        document = _load_toml(path)
    except ParseError as exc:
        typer.echo(f"Could not parse {path}: {exc}")
        raise typer.Exit(1)

    settings = JiraCheckSettings(**_config_defaults(document.unwrap()))

    if not require_credentials:
        return settings

    missing = []
    if not settings.org:
        missing.append("JIRA_ORG")
    if not settings.username:
        missing.append("JIRA_USERNAME")
    if not settings.api_token or not settings.api_token.get_secret_value():
        missing.append("JIRA_API_TOKEN")
    if missing:
        typer.echo(
            f"Missing Jira credentials: {', '.join(missing)}. Set them in the environment "
            f"or in the [{CONFIG_TABLE}] section of {path}"
        )
        raise typer.Exit(1)

    return settings
