"""Pytest hooks tying property tests to the pipeline stage they cover."""

import pytest

from tests.properties import PROPERTIES


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "property(property_id): the pipeline invariant from tests/properties.py this test checks",
    )


def imports_stage(module, stage: str) -> bool:
    return any(getattr(obj, "__module__", None) == stage for obj in vars(module).values())


def pytest_collection_modifyitems(config, items):
    for item in items:
        for marker in item.iter_markers(name="property"):
            property_id = marker.args[0] if len(marker.args) == 1 else None
            prop = PROPERTIES.get(property_id)
            if prop is None:
                raise pytest.UsageError(f"{item.nodeid}: unknown property {marker.args!r}")
            if not imports_stage(item.module, prop.stage):
                raise pytest.UsageError(
                    f"{item.nodeid}: {property_id} covers {prop.stage}, which this test module never uses"
                )
