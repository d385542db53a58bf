"""Global configuration data structures, loading and resolution.

Provides immutable config data loaded from ~/.sdkui/config.toml and the
effective Settings derived from it. Environment variables set by an SDKMAN
installation take precedence over the file; built-in defaults apply last.
"""

import platform
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

DEFAULT_API_BASE_URL = "https://api.sdkman.io/2"
DEFAULT_TIMEOUT = 10.0

API_ENV_VAR = "SDKMAN_CANDIDATES_API"
PLATFORM_ENV_VAR = "SDKMAN_PLATFORM"
CANDIDATES_DIR_ENV_VAR = "SDKMAN_CANDIDATES_DIR"

CONFIG_KEYS = ("api_base_url", "platform", "candidates_dir", "use_pager", "timeout")


@dataclass(frozen=True)
class GlobalConfig:
    """Values stored in the config file. None means "not set"."""

    api_base_url: str | None = None
    platform: str | None = None
    candidates_dir: Path | None = None
    use_pager: bool | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class Settings:
    """Effective settings after applying environment, config file and defaults."""

    api_base_url: str
    platform: str
    candidates_dir: Path | None
    use_pager: bool
    timeout: float


def detect_platform(system: str | None = None, machine: str | None = None) -> str:
    """Map the running OS and CPU to an SDKMAN platform identifier.

    Example:
        >>> detect_platform("Linux", "x86_64")
        'linuxx64'
        >>> detect_platform("Darwin", "arm64")
        'darwinarm64'
    """
    system = (system if system is not None else platform.system()).lower()
    machine = (machine if machine is not None else platform.machine()).lower()

    if system == "linux":
        if machine in ("x86_64", "amd64"):
            return "linuxx64"
        if machine in ("aarch64", "arm64"):
            return "linuxarm64"
        if machine in ("i386", "i686"):
            return "linuxx32"
        if machine.startswith("armv"):
            return "linuxarm32hf"
    elif system == "darwin":
        if machine in ("arm64", "aarch64"):
            return "darwinarm64"
        return "darwinx64"
    elif system == "windows" or system.startswith(("cygwin", "mingw", "msys")):
        return "windowsx64"
    return "exotic"


def default_candidates_dir() -> Path | None:
    path = Path.home() / ".sdkman" / "candidates"
    return path if path.is_dir() else None


def resolve_settings(config: GlobalConfig, environ: Mapping[str, str]) -> Settings:
    """Combine environment, config file and defaults into Settings."""
    candidates_dir: Path | None
    if environ.get(CANDIDATES_DIR_ENV_VAR):
        candidates_dir = Path(environ[CANDIDATES_DIR_ENV_VAR]).expanduser()
    elif config.candidates_dir is not None:
        candidates_dir = config.candidates_dir
    else:
        candidates_dir = default_candidates_dir()

    return Settings(
        api_base_url=environ.get(API_ENV_VAR) or config.api_base_url or DEFAULT_API_BASE_URL,
        platform=environ.get(PLATFORM_ENV_VAR) or config.platform or detect_platform(),
        candidates_dir=candidates_dir,
        use_pager=config.use_pager if config.use_pager is not None else True,
        timeout=config.timeout if config.timeout is not None else DEFAULT_TIMEOUT,
    )


def parse_config_data(data: Mapping[str, object], source: Path) -> GlobalConfig:
    """Build GlobalConfig from decoded TOML data.

    Raises:
        ValueError: If a value has the wrong type
    """
    api_base_url = data.get("api_base_url")
    if api_base_url is not None and not isinstance(api_base_url, str):
        raise ValueError(f"'api_base_url' must be a string in {source}")

    platform_name = data.get("platform")
    if platform_name is not None and not isinstance(platform_name, str):
        raise ValueError(f"'platform' must be a string in {source}")

    candidates_dir = data.get("candidates_dir")
    if candidates_dir is not None and not isinstance(candidates_dir, str):
        raise ValueError(f"'candidates_dir' must be a string in {source}")

    use_pager = data.get("use_pager")
    if use_pager is not None and not isinstance(use_pager, bool):
        raise ValueError(f"'use_pager' must be true or false in {source}")

    timeout = data.get("timeout")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int | float)):
        raise ValueError(f"'timeout' must be a number in {source}")

    return GlobalConfig(
        api_base_url=api_base_url,
        platform=platform_name,
        candidates_dir=Path(candidates_dir).expanduser() if candidates_dir else None,
        use_pager=use_pager,
        timeout=float(timeout) if timeout is not None else None,
    )


class ConfigStore(ABC):
    """Abstract interface for global config persistence.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config file exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load config, returning an empty GlobalConfig when none is stored.

        Raises:
            ValueError: If the stored config is malformed
        """
        ...

    @abstractmethod
    def update(self, key: str, value: object | None) -> None:
        """Store value under key, or remove key when value is None.

        Only the given key is touched, so a file with an invalid value under
        another key can still be repaired.

        Raises:
            ValueError: If the stored file is not valid TOML
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for messages)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.sdkui/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        if config_path is None:
            config_path = Path.home() / ".sdkui" / "config.toml"
        self._path = config_path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> GlobalConfig:
        if not self._path.exists():
            return GlobalConfig()
        try:
            data = tomllib.loads(self._path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {self._path}: {e}") from e
        return parse_config_data(data, self._path)

    def update(self, key: str, value: object | None) -> None:
        """Edit one key in place, keeping comments and other keys as written."""
        if self._path.exists():
            try:
                doc = tomlkit.parse(self._path.read_text(encoding="utf-8"))
            except TOMLKitError as e:
                raise ValueError(f"Invalid TOML in {self._path}: {e}") from e
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global sdkui configuration"))

        if value is None:
            if key in doc:
                del doc[key]
        else:
            doc[key] = str(value) if isinstance(value, Path) else value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        return self._path
