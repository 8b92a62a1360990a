"""
Shared pytest fixtures for stackconf tests.

Loaded automatically by pytest; fixtures here are available to every test.
"""

import os as _os
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import stackconf.config.environment as environment

# =============================================================================
# Environment isolation
# =============================================================================


def clean_env() -> dict[str, str]:
    """Return the current environment without any STACKCONF_ variables."""
    return {
        key: value
        for key, value in _os.environ.items()
        if not key.startswith(environment.ENV_PREFIX)
    }


@_pytest.fixture(autouse=True)
def isolated_environment() -> _typing.Iterator[None]:
    """Keep a developer's STACKCONF_* variables out of every test."""
    with _mock.patch.dict(_os.environ, clean_env(), clear=True):
        yield


# =============================================================================
# Argument bags
# =============================================================================


@_pytest.fixture
def deploy_argv() -> dict[str, _typing.Any]:
    """Argument bag for `deploy` with a couple of context assignments."""
    return {
        "_": ["deploy"],
        "context": ["env=prod", "retries=3"],
        "outputsFile": "outputs.json",
    }
