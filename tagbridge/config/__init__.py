# tagbridge/config/__init__.py
from tagbridge.config.schema import BridgeConfig, KindConfig

__all__ = ["BridgeConfig", "KindConfig"]
