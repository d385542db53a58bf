"""Discovery of locally installed SDKMAN candidates."""

from sdkui.core.local_candidates.abc import LocalCandidates
from sdkui.core.local_candidates.real import FilesystemLocalCandidates

__all__ = ["FilesystemLocalCandidates", "LocalCandidates"]
