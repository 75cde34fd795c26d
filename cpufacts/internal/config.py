"""
Runtime settings resolved from the environment.
"""
import os
from dataclasses import dataclass
from pathlib import Path

from cpufacts.internal import constants
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    proc_root: Path = Path(constants.DEFAULT_PROC_ROOT)
    command_timeout: float = constants.DEFAULT_COMMAND_TIMEOUT
    log_level: str = constants.DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.command_timeout <= 0:
            raise ValueError("command_timeout must be positive")


def load_settings(environ=None) -> Settings:
    """
    Build Settings from CPUFACTS_* environment variables.
    Unparseable values fall back to the defaults with a warning.
    """
    env = os.environ if environ is None else environ

    timeout = constants.DEFAULT_COMMAND_TIMEOUT
    raw_timeout = env.get(constants.ENV_COMMAND_TIMEOUT)
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning("Ignoring invalid command timeout", value=raw_timeout)
        else:
            if timeout <= 0:
                logger.warning("Ignoring non-positive command timeout", value=raw_timeout)
                timeout = constants.DEFAULT_COMMAND_TIMEOUT

    return Settings(
        proc_root=Path(env.get(constants.ENV_PROC_ROOT, constants.DEFAULT_PROC_ROOT)),
        command_timeout=timeout,
        log_level=env.get(constants.ENV_LOG_LEVEL, constants.DEFAULT_LOG_LEVEL).upper(),
    )
