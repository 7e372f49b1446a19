"""
Runtime Configuration Module

Manages runtime-configurable settings for SVG export.
Loads default values from config.py and allows runtime modifications.
"""
from dataclasses import dataclass, asdict
from typing import Optional

# Import defaults from config.py
from config import DEFAULT_WIDTH, DEFAULT_HEIGHT


@dataclass
class RuntimeConfig:
    """
    Runtime configuration read by exporters when they are created.

    Changing it afterwards does not affect exporters that already exist.
    """
    # Canvas settings
    canvas_width: int = DEFAULT_WIDTH
    canvas_height: int = DEFAULT_HEIGHT

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "RuntimeConfig":
        """Create from dictionary."""
        # Filter only known fields to avoid errors with old/new config versions
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}
        return cls(**filtered_data)

    def reset_to_defaults(self):
        """Reset all settings to default values from config.py."""
        self.canvas_width = DEFAULT_WIDTH
        self.canvas_height = DEFAULT_HEIGHT


# Global singleton instance
_runtime_config: Optional[RuntimeConfig] = None


def get_config() -> RuntimeConfig:
    """Get the global runtime configuration instance."""
    global _runtime_config
    if _runtime_config is None:
        _runtime_config = RuntimeConfig()
    return _runtime_config


def set_config(config: Optional[RuntimeConfig]):
    """Set the global runtime configuration instance (None restores defaults)."""
    global _runtime_config
    _runtime_config = config
