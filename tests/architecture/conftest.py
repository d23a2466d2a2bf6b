"""Shared fixtures for architecture tests."""

from pathlib import Path

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = Path(__file__).resolve().parents[2] / "src"
PACKAGE = "src.envstate"

# Layer name -> modules it contains, innermost first
LAYER_MODULES = {
    "domain": [f"{PACKAGE}.domain"],
    "application": [f"{PACKAGE}.application"],
    "infrastructure": [f"{PACKAGE}.infrastructure"],
    "schemas": [f"{PACKAGE}.schemas"],
    "entrypoint": [f"{PACKAGE}.cli", f"{PACKAGE}.__main__"],
}


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of src/envstate."""
    return get_evaluable_architecture(str(SRC_DIR), str(SRC_DIR / "envstate"))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Resolution engine layers.

    PyTestArch names modules relative to the source root, so the
    package shows up as 'src.envstate'.
    """
    architecture = LayeredArchitecture()
    for name, modules in LAYER_MODULES.items():
        architecture = architecture.layer(name).containing_modules(modules)
    return architecture
