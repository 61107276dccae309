# hcs2/config.py
"""
Operator settings, read from the environment.

A ``.env`` file is loaded first when present; variables already set in the
process environment win over the file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from hcs2.errors import ConfigurationError, MissingEnvironmentError

REQUIRED_ENV_VARS: Tuple[str, ...] = ("OPERATOR_ID", "OPERATOR_PRIVATE_KEY", "HEDERA_NETWORK")
SUPPORTED_NETWORKS: Tuple[str, ...] = ("mainnet", "testnet", "previewnet")


def load_env_file(path: Optional[Path] = None) -> bool:
    """Load KEY=VALUE pairs from ``path`` (default: ./.env). Returns False if there is no file."""
    env_path = Path(path) if path else Path.cwd() / ".env"
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=False)


@dataclass(frozen=True)
class Settings:
    operator_id: str
    operator_private_key: str = field(repr=False)
    network: str

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Every missing variable is reported at once, before anything else happens."""
        env = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
        if missing:
            raise MissingEnvironmentError(missing)

        network = env["HEDERA_NETWORK"].strip().lower()
        if network not in SUPPORTED_NETWORKS:
            raise ConfigurationError(
                f"Unsupported HEDERA_NETWORK '{env['HEDERA_NETWORK']}' "
                f"(expected one of: {', '.join(SUPPORTED_NETWORKS)})"
            )

        return cls(
            operator_id=env["OPERATOR_ID"].strip(),
            operator_private_key=env["OPERATOR_PRIVATE_KEY"].strip(),
            network=network,
        )
