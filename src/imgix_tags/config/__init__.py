# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Configuration Resolver

Validates the host application's imgix settings into an immutable
``ClientConfig``.
"""

from ._config import ClientConfig, resolve
from ._env import resolve_from_env, settings_from_env
from ._errors import SOURCE_NOT_CONFIGURED, SOURCE_WRONG_TYPE, ConfigurationError

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "SOURCE_NOT_CONFIGURED",
    "SOURCE_WRONG_TYPE",
    "resolve",
    "resolve_from_env",
    "settings_from_env",
]
