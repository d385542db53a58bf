"""Access to the SDKMAN candidates API."""

from sdkui.core.sdkman_api.abc import SdkmanApi
from sdkui.core.sdkman_api.real import RealSdkmanApi

__all__ = ["RealSdkmanApi", "SdkmanApi"]
