from spotctl.auth import TokenManager
from spotctl.client import AsyncSpotClient, SpotClient, connect
from spotctl.config import ClientConfig, load_config, resolve_config, save_config
from spotctl.errors import (
    APIError,
    ConfigError,
    ErrorKind,
    InternalError,
    PatchFileError,
    SpotctlError,
    TransportError,
    ValidationError,
)
from spotctl.http import APIVersion
from spotctl.patch import PatchOperation, load_patch_operations
from spotctl.version import __version__

__all__ = [
    "__version__",
    "APIError",
    "APIVersion",
    "AsyncSpotClient",
    "ClientConfig",
    "ConfigError",
    "ErrorKind",
    "InternalError",
    "PatchFileError",
    "PatchOperation",
    "SpotClient",
    "SpotctlError",
    "TokenManager",
    "TransportError",
    "ValidationError",
    "connect",
    "load_config",
    "load_patch_operations",
    "resolve_config",
    "save_config",
]
