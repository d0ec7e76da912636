"""Shared configuration defaults for classification and ordering."""

from __future__ import annotations

from typing import Dict

DEFAULT_CFG: Dict = {
    "messageLocale": "en",
    "ssDefaultRemark": "Shadowsocks Node",
    "previewMaxLen": 20,
    "collation": "locale",
    "priorityFlag": "D",
}

MESSAGE_LOCALES = {"en", "zh"}
COLLATIONS = {"locale", "codepoint"}


def merge_cfg(base_cfg: Dict | None, override_cfg: Dict | None = None) -> Dict:
    merged = dict(DEFAULT_CFG)
    if base_cfg:
        merged.update(base_cfg)
    if override_cfg:
        merged.update(override_cfg)
    _validate_cfg(merged)
    return merged


def _validate_cfg(cfg: Dict) -> None:
    locale = cfg.get("messageLocale")
    if locale not in MESSAGE_LOCALES:
        raise ValueError(f"Unknown messageLocale: {locale!r}")
    collation = cfg.get("collation")
    if collation not in COLLATIONS:
        raise ValueError(f"Unknown collation: {collation!r}")
    try:
        preview = int(cfg.get("previewMaxLen"))
    except (TypeError, ValueError):
        raise ValueError(f"previewMaxLen must be an integer: {cfg.get('previewMaxLen')!r}") from None
    if preview < 0:
        raise ValueError("previewMaxLen must not be negative")
