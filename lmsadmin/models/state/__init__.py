"""Application state: settings persistence and policy stores."""

from lmsadmin.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from lmsadmin.models.state.config_manager import ConfigManager
from lmsadmin.models.state.policy_store import (
    FilePolicyStore,
    InMemoryPolicyStore,
    PolicyLoadError,
    PolicySaveError,
    PolicyStore,
    PolicyStoreError,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "FilePolicyStore",
    "InMemoryPolicyStore",
    "PolicyLoadError",
    "PolicySaveError",
    "PolicyStore",
    "PolicyStoreError",
]
