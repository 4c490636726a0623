"""
Front-end asset lookup.

The front-end build writes a Vite manifest that maps each entry point to
its hashed script and stylesheet files. The manifest also fingerprints the
deployed bundle: its MD5 is the asset version sent with every page.
"""

import hashlib
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ultrashots.core.logging_config import get_logger
from ultrashots.server.core.config import AssetsConfig

logger = get_logger(__name__)


@lru_cache(maxsize=8)
def _read_manifest(path: str, mtime: float) -> Tuple[Dict[str, Any], str]:
    raw = Path(path).read_bytes()
    logger.debug(f"Loaded asset manifest {path}")
    return json.loads(raw), hashlib.md5(raw).hexdigest()


def _manifest(config: AssetsConfig) -> Tuple[Dict[str, Any], Optional[str]]:
    path = Path(config.manifest_path)
    if not path.is_file():
        return {}, None
    return _read_manifest(str(path), path.stat().st_mtime)


def load_manifest(config: AssetsConfig) -> Dict[str, Any]:
    """Parsed manifest, or an empty dict when the bundle was not built."""
    return _manifest(config)[0]


def asset_version(config: AssetsConfig) -> Optional[str]:
    """Current asset version: the configured value or the manifest MD5."""
    if config.version:
        return config.version
    return _manifest(config)[1]


def _url(config: AssetsConfig, file: str) -> str:
    return f"{config.base_url.rstrip('/')}/{file.lstrip('/')}"


def entry_assets(config: AssetsConfig) -> Tuple[List[str], List[str]]:
    """Script and stylesheet URLs of the configured entry point.

    Without a manifest the entry is served unbuilt from ``base_url``.

    Returns:
        ``(scripts, styles)``
    """
    manifest = load_manifest(config)
    chunk = manifest.get(config.entry)
    if chunk is None:
        return [_url(config, config.entry)], []

    styles = [_url(config, css) for css in chunk.get("css", [])]
    for name in chunk.get("imports", []):
        styles.extend(_url(config, css) for css in manifest.get(name, {}).get("css", []))
    return [_url(config, chunk["file"])], styles


def preload_links(config: AssetsConfig) -> List[str]:
    """``Link`` header values preloading the entry assets."""
    manifest = load_manifest(config)
    if config.entry not in manifest:
        return []
    scripts, styles = entry_assets(config)
    links = [f'<{url}>; rel="preload"; as="style"' for url in styles]
    links.extend(f'<{url}>; rel="modulepreload"' for url in scripts)
    for name in manifest[config.entry].get("imports", []):
        imported = manifest.get(name)
        if imported and "file" in imported:
            links.append(f'<{_url(config, imported["file"])}>; rel="modulepreload"')
    return links
