from __future__ import annotations

import logging
from typing import Optional

from .config import AppConfig
from .di import AppContainer


def create_app(config: Optional[AppConfig] = None) -> AppContainer:
    config = config or AppConfig()
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.INFO))
    return AppContainer.build(config)
