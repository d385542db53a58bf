"""Factory functions for creating test contexts."""

from pathlib import Path

from sdkui.core.context import SdkuiContext
from sdkui.core.global_config import ConfigStore, GlobalConfig, Settings
from sdkui.core.local_candidates.abc import LocalCandidates
from sdkui.core.sdkman_api.abc import SdkmanApi
from tests.fakes.config_store import InMemoryConfigStore
from tests.fakes.local_candidates import FakeLocalCandidates
from tests.fakes.sdkman_api import FakeSdkmanApi

TEST_API_BASE_URL = "https://api.test.sdkman.io/2"


def create_test_settings(
    *,
    api_base_url: str = TEST_API_BASE_URL,
    platform: str = "linuxx64",
    candidates_dir: Path | None = None,
    use_pager: bool = False,
    timeout: float = 10.0,
) -> Settings:
    return Settings(
        api_base_url=api_base_url,
        platform=platform,
        candidates_dir=candidates_dir,
        use_pager=use_pager,
        timeout=timeout,
    )


def create_test_context(
    sdkman_api: SdkmanApi | None = None,
    local_candidates: LocalCandidates | None = None,
    config_store: ConfigStore | None = None,
    settings: Settings | None = None,
) -> SdkuiContext:
    """Create test context with optional pre-configured fakes.

    Args:
        sdkman_api: If None, creates FakeSdkmanApi with an empty catalog
        local_candidates: If None, creates FakeLocalCandidates with nothing installed
        config_store: If None, creates an empty InMemoryConfigStore
        settings: If None, uses test defaults (pager disabled)

    Example:
        >>> api = FakeSdkmanApi(candidate_list=CATALOG)
        >>> ctx = create_test_context(sdkman_api=api)
    """
    if config_store is None:
        config_store = InMemoryConfigStore()
    global_config = GlobalConfig()
    config_error: str | None = None
    if config_store.exists():
        try:
            global_config = config_store.load()
        except ValueError as e:
            config_error = str(e)

    return SdkuiContext(
        sdkman_api=sdkman_api if sdkman_api is not None else FakeSdkmanApi(),
        local_candidates=(
            local_candidates if local_candidates is not None else FakeLocalCandidates()
        ),
        config_store=config_store,
        global_config=global_config,
        settings=settings if settings is not None else create_test_settings(),
        config_error=config_error,
    )
