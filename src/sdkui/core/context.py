"""Application context with dependency injection."""

import logging
import os
from dataclasses import dataclass

from sdkui.core.global_config import (
    ConfigStore,
    FilesystemConfigStore,
    GlobalConfig,
    Settings,
    resolve_settings,
)
from sdkui.core.local_candidates import FilesystemLocalCandidates, LocalCandidates
from sdkui.core.sdkman_api import RealSdkmanApi, SdkmanApi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SdkuiContext:
    """Immutable context holding all dependencies for sdkui operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    config_error carries the message of a malformed config file. Settings
    then fall back to environment and defaults, and commands that depend
    on them refuse to run until the file is repaired.
    """

    sdkman_api: SdkmanApi
    local_candidates: LocalCandidates
    config_store: ConfigStore
    global_config: GlobalConfig
    settings: Settings
    config_error: str | None = None


def create_context(*, config_store: ConfigStore | None = None) -> SdkuiContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution. A malformed config file does not raise; it is
    recorded in config_error so the config commands can still repair it.
    """
    # 1. Load config file (defaults when missing or malformed)
    if config_store is None:
        config_store = FilesystemConfigStore()
    config_error: str | None = None
    try:
        global_config = config_store.load()
    except ValueError as e:
        logger.debug("Ignoring config file: %s", e)
        global_config = GlobalConfig()
        config_error = str(e)

    # 2. Resolve effective settings against the environment
    settings = resolve_settings(global_config, os.environ)

    # 3. Create integrations from settings
    return SdkuiContext(
        sdkman_api=RealSdkmanApi(settings.api_base_url, timeout=settings.timeout),
        local_candidates=FilesystemLocalCandidates(settings.candidates_dir),
        config_store=config_store,
        global_config=global_config,
        settings=settings,
        config_error=config_error,
    )
