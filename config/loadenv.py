import os
from pathlib import Path

from dotenv import load_dotenv


ENV_DIR = Path(__file__).resolve().parent.parent / "envs"


def loadenv(env_dir: Path | None = None) -> None:
    """Load .env files from the repository's envs directory."""
    env_dir = Path(env_dir or os.environ.get("ADMIN_NOTICES_ENV_DIR") or ENV_DIR)
    if not env_dir.exists():
        return
    for env_file in sorted(env_dir.glob("*.env")):
        load_dotenv(env_file, override=False)
