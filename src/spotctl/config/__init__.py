from spotctl.config.loader import (
    default_config_candidates,
    load_config,
    locate_config,
    resolve_config,
    save_config,
)
from spotctl.config.models import OUTPUT_FORMATS, ClientConfig, OutputFormat, ResolvedConfig

__all__ = [
    "OUTPUT_FORMATS",
    "ClientConfig",
    "OutputFormat",
    "ResolvedConfig",
    "default_config_candidates",
    "load_config",
    "locate_config",
    "resolve_config",
    "save_config",
]
