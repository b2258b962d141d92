"""Configuration models for the recovery pipeline.

Settings live in ``configs/config.json``, one section per concern, and are
validated into the pydantic models below. Missing sections or a missing file
fall back to the model defaults.

The default path is the ``configs`` directory of a source checkout. Installed
deployments point ``CLAIMS_RECOVERY_CONFIG`` at their config file instead.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from .schemas.common import UNKNOWN_PATIENT_NAME

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "CLAIMS_RECOVERY_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "config.json"


class RecoverySettings(BaseModel):
    """Settings for the bill ledger views."""

    unknown_patient_name: str = UNKNOWN_PATIENT_NAME
    page_size: int = Field(default=20, gt=0)


class RecoveryAppConfig(BaseModel):
    """All configuration sections."""

    recovery: RecoverySettings = RecoverySettings()


def load_config(path: str | Path | None = None) -> RecoveryAppConfig:
    """Load and validate the config file; defaults apply when it is missing.

    The file is ``path`` if given, else ``$CLAIMS_RECOVERY_CONFIG``, else the
    checkout's ``configs/config.json``.
    """
    if path is None:
        path = os.getenv(CONFIG_PATH_ENV) or None
    explicit = path is not None
    config_path = Path(path) if explicit else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if explicit:
            logger.warning("Config file %s not found, using defaults", config_path)
        else:
            logger.info("No config file at %s, using defaults", config_path)
        return RecoveryAppConfig()

    return RecoveryAppConfig.model_validate(json.loads(config_path.read_text()))
