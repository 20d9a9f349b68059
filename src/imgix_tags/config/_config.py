# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Client configuration model and resolver.

The host application exposes its imgix settings as a plain mapping. The
resolver validates that mapping into an immutable ``ClientConfig``; it is
called lazily on every tag build so a misconfigured application fails on
first use rather than at import.
"""

from __future__ import annotations

import logging
import zlib
from collections.abc import Mapping
from typing import Any, FrozenSet, Optional, Tuple, Union

from pydantic import (
    AliasChoices,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
    model_validator,
)

from ..primitives import Hostname, Model, Resolution
from ._errors import SOURCE_NOT_CONFIGURED, SOURCE_WRONG_TYPE, ConfigurationError

logger = logging.getLogger(__name__)

_SINGLE_HOSTNAME_KEYS = ("hostname_to_replace", "hostnameToReplace")
_MANY_HOSTNAME_KEYS = ("hostnames_to_replace", "hostnamesToReplace")


class ClientConfig(Model):
    """
    Normalized imgix client settings.

    Attributes:
        sources: One or more CDN hostnames. A single ``source`` string is
            normalized to a one-element tuple.
        secure_url_token: Shared secret used to sign generated URLs.
        include_library_param: Whether to report ``ixlib`` to the CDN.
        hostnames_to_replace: Origin hostnames stripped from fully-qualified
            input URLs before they are handed to the CDN client. Both the
            singular ``hostname_to_replace`` and the plural form are merged
            into this set.
        use_https: Emit ``https://`` URLs instead of ``http://``.
        responsive_resolutions: Ordered pixel densities for ``srcset``.

    Example:
        >>> config = ClientConfig(source="assets.imgix.net", hostname_to_replace="s3.amazonaws.com")
        >>> config.sources
        ('assets.imgix.net',)
        >>> sorted(config.hostnames_to_replace)
        ['s3.amazonaws.com']
    """

    # Host settings may carry keys this library does not use
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sources: Tuple[Hostname, ...] = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("source", "sources"),
    )
    secure_url_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("secure_url_token", "secureUrlToken"),
    )
    include_library_param: bool = Field(
        default=True,
        validation_alias=AliasChoices("include_library_param", "includeLibraryParam"),
    )
    hostnames_to_replace: FrozenSet[Hostname] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices(*_MANY_HOSTNAME_KEYS),
    )
    use_https: bool = Field(
        default=False,
        validation_alias=AliasChoices("use_https", "useHttps"),
    )
    responsive_resolutions: Tuple[Resolution, ...] = Field(
        default=(1.0, 2.0),
        min_length=1,
        validation_alias=AliasChoices("responsive_resolutions", "responsiveResolutions"),
    )

    @model_validator(mode="before")
    @classmethod
    def merge_hostnames(cls, data: Any) -> Any:
        """Fold the singular and plural hostname settings into one list."""
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        merged = []
        for key in _SINGLE_HOSTNAME_KEYS:
            value = data.pop(key, None)
            if value is not None:
                merged.append(value)
        for key in _MANY_HOSTNAME_KEYS:
            value = data.pop(key, None)
            if isinstance(value, str):
                merged.append(value)
            elif value is not None:
                merged.extend(value)
        if merged:
            data["hostnames_to_replace"] = merged
        return data

    @field_validator("sources", mode="before")
    @classmethod
    def normalize_sources(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("hostnames_to_replace", mode="after")
    @classmethod
    def lowercase_hostnames(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(hostname.lower() for hostname in value)

    @property
    def sign_key(self) -> Optional[str]:
        """Plain signing token, or ``None`` when URLs are left unsigned."""
        if self.secure_url_token is None:
            return None
        return self.secure_url_token.get_secret_value() or None

    def source_for(self, path: str) -> str:
        """
        Pick the CDN host for a path.

        Several sources are sharded by CRC32 of the path so a given image
        always maps to the same host.
        """
        if len(self.sources) == 1:
            return self.sources[0]
        index = zlib.crc32(path.encode("utf-8")) % len(self.sources)
        logger.debug(f"Sharded {path} to source {index} of {len(self.sources)}")
        return self.sources[index]


def _is_valid_source(value: Any) -> bool:
    if isinstance(value, str):
        return True
    if isinstance(value, (list, tuple)):
        return all(isinstance(item, str) for item in value)
    return False


def resolve(raw_config: Union[Mapping, ClientConfig, None]) -> ClientConfig:
    """
    Validate the host application's imgix settings.

    Args:
        raw_config: The settings mapping, an already resolved
            ``ClientConfig``, or ``None`` when the host never configured imgix.

    Returns:
        The normalized ``ClientConfig``.

    Raises:
        ConfigurationError: If ``source`` is missing, is not a string or a
            list of strings, or any other setting fails validation.
    """
    if isinstance(raw_config, ClientConfig):
        return raw_config
    if not isinstance(raw_config, Mapping) or raw_config.get("source") is None:
        raise ConfigurationError(SOURCE_NOT_CONFIGURED)
    if not _is_valid_source(raw_config["source"]):
        raise ConfigurationError(SOURCE_WRONG_TYPE)

    try:
        return ClientConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid imgix configuration: {e}") from e
