"""Environment variable loading utilities."""

from pathlib import Path

from dotenv import load_dotenv


def load_env(env_path: str | Path | None = None) -> bool:
    """Load environment variables from a .env file.

    When ``env_path`` is given only that file is considered, otherwise the
    standard dotenv search from the working directory is used. Variables
    already present in the process environment win over the file.

    Args:
        env_path: Optional explicit path to a .env file

    Returns:
        True if a file was found and loaded, False otherwise
    """
    if env_path is not None:
        path = Path(env_path)
        if not path.exists():
            return False
        return load_dotenv(path)
    return load_dotenv()
