# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import AbstractSet
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def replace_hostname(path: str, hostnames: AbstractSet[str]) -> str:
    """
    Strip a configured origin host from a fully-qualified URL.

    ``https://s3.amazonaws.com/image.jpg`` becomes ``/image.jpg`` when
    ``s3.amazonaws.com`` is configured. Matching is on the exact hostname
    (case-insensitive, port ignored); anything else, including relative
    paths and URLs on other hosts, is returned untouched. The CDN client
    then percent-encodes an unmatched URL as a single path segment.
    """
    try:
        parts = urlsplit(path)
        hostname = parts.hostname
    except ValueError:
        logger.debug(f"Passing malformed URL through unchanged: {path}")
        return path
    if not parts.scheme or not parts.netloc:
        return path

    if hostname in hostnames:
        stripped = parts.path or "/"
        logger.debug(f"Stripped {hostname} from {path}")
        return stripped

    logger.debug(f"Passing fully-qualified URL through unchanged: {path}")
    return path
