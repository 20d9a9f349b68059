# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tag Builder

Turns an image path and a single options mapping into imgix ``<img>``,
responsive ``srcset`` and ``<picture>`` markup. URL construction and
signing are delegated to ``imgix.UrlBuilder``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from imgix import UrlBuilder

from ..config import ClientConfig, resolve
from ..primitives import DEFAULT_LIBRARY, LibraryInfo
from ._alt import default_alt
from ._hostname import replace_hostname
from ._markup import content_tag, tag
from ._options import TagRequest, partition_options
from ._result import ResolvedTag, SrcsetEntry, format_srcset

logger = logging.getLogger(__name__)

Settings = Union[Mapping[str, Any], ClientConfig, None]
SettingsSource = Union[Settings, Callable[[], Settings]]

LIBRARY_PARAM = "ixlib"
DPR_PARAM = "dpr"


def _format_resolution(resolution: float) -> str:
    return f"{resolution:g}"


def _merge_options(
    options: Optional[Mapping[str, Any]], kwargs: Mapping[str, Any]
) -> Dict[str, Any]:
    merged = dict(options or {})
    merged.update(kwargs)
    return merged


class TagBuilder:
    """
    Builds imgix tags from host application settings.

    Args:
        settings: The imgix settings mapping, a resolved ``ClientConfig``,
            or a zero-argument callable returning either (for settings that
            live on an application object and may change at runtime).
        library: Identity reported through ``ixlib`` and the fallback alt.
        cache_config: Resolve the settings once and reuse the result.
            By default they are re-read and re-validated on every call.

    Example:
        >>> builder = TagBuilder({"source": "assets.imgix.net"})
        >>> builder.image_tag("image.jpg").src
        'http://assets.imgix.net/image.jpg?ixlib=tags-0.1.0'
    """

    def __init__(
        self,
        settings: SettingsSource = None,
        *,
        library: LibraryInfo = DEFAULT_LIBRARY,
        cache_config: bool = False,
    ):
        self._settings = settings
        self.library = library
        self.cache_config = cache_config
        self._config: Optional[ClientConfig] = None

    @property
    def config(self) -> ClientConfig:
        """The resolved settings; raises ``ConfigurationError`` when invalid."""
        if self._config is not None:
            return self._config
        settings = self._settings() if callable(self._settings) else self._settings
        config = resolve(settings)
        if self.cache_config:
            self._config = config
        return config

    # --- public operations ---

    def url(self, path: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> str:
        """CDN URL for ``path``; attribute options are ignored."""
        config = self.config
        request = self._request(config, path, options, kwargs)
        return self._create_url(config, request.path, self._params(config, request))

    def image_tag(
        self, path: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> ResolvedTag:
        """
        Build a single-source ``<img>``.

        Options are split by key: ``alt`` and HTML attribute names go on the
        tag, everything else becomes a CDN parameter.
        """
        config = self.config
        request = self._request(config, path, options, kwargs)
        params = self._params(config, request)
        src = self._create_url(config, request.path, params)
        return self._resolve(src, request, params)

    def responsive_image_tag(
        self, path: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> ResolvedTag:
        """
        Build an ``<img>`` with a pixel-density ``srcset``.

        One entry per resolution (``1x`` and ``2x`` unless configured or
        overridden with a ``resolutions`` option); every entry other than
        ``1x`` adds ``dpr``.
        """
        config = self.config
        request = self._request(config, path, options, kwargs)
        params = self._params(config, request)
        srcset = self._srcset(config, request, params)
        src = self._create_url(config, request.path, params)
        return self._resolve(src, request, params, srcset=srcset)

    def picture_tag(
        self, path: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> str:
        """Markup for ``<picture>`` holding one ``<source>`` then one ``<img>``."""
        config = self.config
        request = self._request(config, path, options, kwargs)
        params = self._params(config, request)
        source = tag("source", {"srcset": format_srcset(self._srcset(config, request, params))})
        img = self._resolve(self._create_url(config, request.path, params), request, params)
        return content_tag("picture", source + img.to_html())

    # --- internals ---

    def _request(
        self,
        config: ClientConfig,
        path: str,
        options: Optional[Mapping[str, Any]],
        kwargs: Mapping[str, Any],
    ) -> TagRequest:
        path = replace_hostname(path, config.hostnames_to_replace)
        return partition_options(path, _merge_options(options, kwargs))

    def _params(self, config: ClientConfig, request: TagRequest) -> Dict[str, Any]:
        """Library parameter plus caller parameters; the client fixes the final query order."""
        params: Dict[str, Any] = {}
        if LIBRARY_PARAM in request.params:
            if request.params[LIBRARY_PARAM]:
                params[LIBRARY_PARAM] = request.params[LIBRARY_PARAM]
        elif config.include_library_param:
            params[LIBRARY_PARAM] = self.library.library_param
        for key in sorted(request.params):
            if key != LIBRARY_PARAM:
                params[key] = request.params[key]
        return params

    def _srcset(
        self, config: ClientConfig, request: TagRequest, params: Mapping[str, Any]
    ) -> Tuple[SrcsetEntry, ...]:
        resolutions: Sequence[float] = request.resolutions or config.responsive_resolutions
        entries = []
        for resolution in resolutions:
            variant = dict(params)
            if resolution != 1:
                variant[DPR_PARAM] = _format_resolution(resolution)
            url = self._create_url(config, request.path, variant)
            entries.append((url, f"{_format_resolution(resolution)}x"))
        return tuple(entries)

    def _create_url(self, config: ClientConfig, path: str, params: Mapping[str, Any]) -> str:
        sign_key = config.sign_key
        builder = UrlBuilder(
            config.source_for(path),
            use_https=config.use_https,
            sign_key=sign_key,
            include_library_param=False,
        )
        if sign_key:
            logger.debug(f"Signing URL for {path}")
        # UrlBuilder may add to the mapping it is given, so hand it a copy
        return builder.create_url(path, {key: str(value) for key, value in params.items()})

    def _resolve(
        self,
        src: str,
        request: TagRequest,
        params: Mapping[str, Any],
        srcset: Optional[Tuple[SrcsetEntry, ...]] = None,
    ) -> ResolvedTag:
        attributes = dict(request.html_attributes)
        alt = attributes.get("alt")
        if alt is None:
            library_param = params.get(LIBRARY_PARAM)
            alt = default_alt(src, str(library_param) if library_param else None)
        else:
            # Caller alt keeps its position among the attributes
            alt = attributes["alt"] = str(alt)
        attributes.pop("src", None)
        if srcset is not None:
            attributes.pop("srcset", None)
        return ResolvedTag(
            src=src,
            alt=alt,
            srcset=srcset,
            extra_attributes=attributes,
        )


def image_tag(
    path: str, settings: SettingsSource, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> ResolvedTag:
    return TagBuilder(settings).image_tag(path, options, **kwargs)


def responsive_image_tag(
    path: str, settings: SettingsSource, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> ResolvedTag:
    return TagBuilder(settings).responsive_image_tag(path, options, **kwargs)


def picture_tag(
    path: str, settings: SettingsSource, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> str:
    return TagBuilder(settings).picture_tag(path, options, **kwargs)


def imgix_url(
    path: str, settings: SettingsSource, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> str:
    return TagBuilder(settings).url(path, options, **kwargs)
