"""Configuration interchange: defaults, partial-document merge, and export.

Saved documents may come from older releases or from hand edits, so
incoming keys are accepted in camelCase or snake_case and a few legacy
key names are mapped onto the current ones before merging.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from pydantic.alias_generators import to_snake

from solar_app.schemas.document import DesignDocument
from solar_engine import presets

logger = logging.getLogger(__name__)

_LEGACY_KEYS: dict[str, str] = {
    "config": "system_config",
    "start_up_voltage": "startup_voltage",
    "tmy_data": "tmy_records",
}


def default_document() -> DesignDocument:
    """Factory defaults as a document."""
    return DesignDocument.model_validate({
        "module": asdict(presets.DEFAULT_MODULE),
        "inverter": asdict(presets.DEFAULT_INVERTER),
        "system_config": asdict(presets.DEFAULT_SYSTEM_CONFIG),
        "economic_config": asdict(presets.DEFAULT_ECONOMIC_CONFIG),
    })


def normalize_keys(data: Any) -> Any:
    """Recursively convert mapping keys to snake_case field names."""
    if isinstance(data, dict):
        out = {}
        for key, value in data.items():
            name = to_snake(key) if isinstance(key, str) else key
            out[_LEGACY_KEYS.get(name, name)] = normalize_keys(value)
        return out
    if isinstance(data, list):
        return [normalize_keys(v) for v in data]
    return data


def relocate_storage(data: dict[str, Any]) -> dict[str, Any]:
    """Move storage settings saved under ``economic_config.bess`` onto ``system_config.bess``.

    Older documents kept the battery with the economic assumptions.  An
    explicit ``system_config.bess`` wins when both are present.
    """
    econ = data.get("economic_config")
    system = data.get("system_config", {})
    if not isinstance(econ, dict) or "bess" not in econ or not isinstance(system, dict):
        return data

    econ = dict(econ)
    bess = econ.pop("bess")
    system = dict(system)
    if "bess" not in system:
        system["bess"] = bess
        logger.info("Moved legacy economicConfig.bess onto config.bess")
    return {**data, "economic_config": econ, "system_config": system}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge *override* onto *base*; nested dicts merge, everything else (lists included) replaces."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_document(data: dict[str, Any], base: DesignDocument | None = None) -> DesignDocument:
    """Apply a (possibly partial) document on top of *base* (factory defaults when omitted).

    Raises
    ------
    pydantic.ValidationError
        If the merged document violates a schema constraint.
    """
    base_doc = base if base is not None else default_document()
    merged = deep_merge(base_doc.model_dump(), relocate_storage(normalize_keys(data or {})))
    document = DesignDocument.model_validate(merged)
    logger.debug("Loaded design document (%d top-level keys supplied)", len(data or {}))
    return document


def dump_document(document: DesignDocument) -> dict[str, Any]:
    """Export with camelCase keys; hourly TMY records are not persisted."""
    return document.model_dump(
        mode="json",
        by_alias=True,
        exclude={"economic_config": {"tmy_records"}},
    )
