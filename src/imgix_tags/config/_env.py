# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Build the imgix settings mapping from ``IMGIX_*`` environment variables"""

from __future__ import annotations

import os
from typing import Dict, List, Mapping, Optional

from ._config import ClientConfig, resolve

ENV_SOURCE = "IMGIX_SOURCE"
ENV_SECURE_URL_TOKEN = "IMGIX_SECURE_URL_TOKEN"
ENV_INCLUDE_LIBRARY_PARAM = "IMGIX_INCLUDE_LIBRARY_PARAM"
ENV_HOSTNAMES_TO_REPLACE = "IMGIX_HOSTNAMES_TO_REPLACE"
ENV_USE_HTTPS = "IMGIX_USE_HTTPS"
ENV_RESPONSIVE_RESOLUTIONS = "IMGIX_RESPONSIVE_RESOLUTIONS"


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, object]:
    """Collect the ``IMGIX_*`` variables into a settings mapping.

    Unset variables are left out so the model defaults apply. Boolean
    strings ("true", "0", "no"...) are coerced by pydantic.
    """
    env = os.environ if environ is None else environ
    settings: Dict[str, object] = {}

    sources = _split(env.get(ENV_SOURCE, ""))
    if len(sources) == 1:
        settings["source"] = sources[0]
    elif sources:
        settings["source"] = sources

    if env.get(ENV_SECURE_URL_TOKEN):
        settings["secure_url_token"] = env[ENV_SECURE_URL_TOKEN]
    if env.get(ENV_INCLUDE_LIBRARY_PARAM):
        settings["include_library_param"] = env[ENV_INCLUDE_LIBRARY_PARAM]
    if env.get(ENV_HOSTNAMES_TO_REPLACE):
        settings["hostnames_to_replace"] = _split(env[ENV_HOSTNAMES_TO_REPLACE])
    if env.get(ENV_USE_HTTPS):
        settings["use_https"] = env[ENV_USE_HTTPS]
    if env.get(ENV_RESPONSIVE_RESOLUTIONS):
        settings["responsive_resolutions"] = _split(env[ENV_RESPONSIVE_RESOLUTIONS])
    return settings


def resolve_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
    """Resolve a ``ClientConfig`` from the process environment (or ``environ``)."""
    return resolve(settings_from_env(environ))
