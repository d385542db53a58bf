"""Helpers shared by CLI commands."""

import shutil

from sdkui.cli.ensure import Ensure
from sdkui.core.candidates import fetch_candidates
from sdkui.core.context import SdkuiContext
from sdkui.core.display_utils import DEFAULT_WIDTH
from sdkui.core.errors import SdkmanApiError
from sdkui.core.models import RemoteCandidate

MAX_WIDTH = 120


def terminal_width() -> int:
    """Width for rendering, bounded so long lines stay readable."""
    columns = shutil.get_terminal_size(fallback=(DEFAULT_WIDTH, 24)).columns
    return max(DEFAULT_WIDTH, min(columns, MAX_WIDTH))


def ensure_valid_config(ctx: SdkuiContext) -> None:
    """Exit with the config error when settings could not be read from the file."""
    if ctx.config_error is not None:
        Ensure.fail(
            f"{ctx.config_error}\n"
            "Repair it with `sdkui config set` or `sdkui config unset`, "
            f"or edit {ctx.config_store.path()}"
        )


def load_candidates(ctx: SdkuiContext) -> list[RemoteCandidate]:
    """Fetch the merged catalog, exiting with a styled error on API failure."""
    ensure_valid_config(ctx)
    try:
        return fetch_candidates(ctx)
    except SdkmanApiError as e:
        Ensure.fail(f"Could not fetch candidates from {ctx.settings.api_base_url}: {e}")
