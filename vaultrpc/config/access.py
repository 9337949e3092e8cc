"""Process-wide configuration and the id source it selects.

Both are loaded lazily on first use and cached per config file, so every
`Request.from_params` call without an injected source shares one
`SequentialIdSource` counter when the configuration asks for one.
"""

from __future__ import annotations

import threading
from pathlib import Path

from vaultrpc.config.loader import build_id_source, get_config_path, load_config
from vaultrpc.config.schema import Config
from vaultrpc.messages.ids import IdSource

_lock = threading.RLock()
_configs: dict[Path, Config] = {}
_id_sources: dict[Path, IdSource] = {}


def _resolve(config_path: Path | None) -> Path:
    return Path(config_path or get_config_path()).expanduser().resolve()


def get_config(*, config_path: Path | None = None, force_reload: bool = False) -> Config:
    """Configuration for `config_path` (default file when omitted), loaded once."""
    path = _resolve(config_path)
    with _lock:
        if force_reload or path not in _configs:
            _configs[path] = load_config(path)
            _id_sources.pop(path, None)
        return _configs[path]


def get_id_source(*, config_path: Path | None = None) -> IdSource:
    """Id source selected by the cached configuration's `ids` section."""
    path = _resolve(config_path)
    with _lock:
        if path not in _id_sources:
            _id_sources[path] = build_id_source(get_config(config_path=path))
        return _id_sources[path]


def clear_config_cache(*, config_path: Path | None = None) -> None:
    """Forget cached configuration and id sources, for one file or all of them."""
    with _lock:
        if config_path is None:
            _configs.clear()
            _id_sources.clear()
            return
        path = _resolve(config_path)
        _configs.pop(path, None)
        _id_sources.pop(path, None)
