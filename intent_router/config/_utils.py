import os
from pathlib import Path

ENV_FILE_VAR = "INTENT_ROUTER_ENV_FILE"

# Relative to the project root; local overrides come before the deployed file
ENV_FILE_CANDIDATES = ("config/.env.dev", "config/.env")


def find_project_root() -> Path:
    """Directory holding pyproject.toml, or /app inside the container image."""
    here = Path(__file__).resolve()
    for directory in here.parents:
        if (directory / "pyproject.toml").is_file() or directory == Path("/app"):
            return directory
    return here.parents[2]


def resolve_env_file_path() -> Path | None:
    """Pick the .env file that settings are read from.

    ``INTENT_ROUTER_ENV_FILE`` (absolute, or relative to the project root) wins
    when it names an existing file. Otherwise the first existing entry of
    ``ENV_FILE_CANDIDATES`` is used, or None to rely on the environment alone.
    """
    root = find_project_root()
    candidates = [root / name for name in ENV_FILE_CANDIDATES]

    explicit = os.environ.get(ENV_FILE_VAR)
    if explicit:
        candidates.insert(0, root / explicit)

    return next((path for path in candidates if path.is_file()), None)
