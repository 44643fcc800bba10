"""Settings selection.

``APP_ENV`` picks one of the modules in this package; ``load_settings`` reads
it into a ``Settings`` value the rest of the app consumes.
"""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from typing import Optional

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}
DEFAULT_SETTINGS_MODULE = "config.development"


@dataclass(frozen=True)
class Settings:
    module: str
    class_capacity: int
    absence_limit: int
    log_level: str
    debug: bool


def get_settings_module(env: Optional[str] = None) -> str:
    # Valores desconhecidos de APP_ENV caem em desenvolvimento
    key = (env if env is not None else os.getenv("APP_ENV", "development")).strip().lower()
    return _ENV_MODULES.get(key, DEFAULT_SETTINGS_MODULE)


def load_settings(env: Optional[str] = None) -> Settings:
    module_name = get_settings_module(env)
    module = importlib.import_module(module_name)
    return Settings(
        module=module_name,
        class_capacity=int(module.CLASS_CAPACITY),
        absence_limit=int(module.ABSENCE_LIMIT),
        log_level=str(getattr(module, "LOG_LEVEL", "WARNING")),
        debug=bool(getattr(module, "DEBUG", False)),
    )
