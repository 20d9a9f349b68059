# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Configuration error raised by the resolver"""

SOURCE_NOT_CONFIGURED = (
    "imgix source is not configured. Please set config.imgix[:source]."
)
SOURCE_WRONG_TYPE = "imgix source must be a String or an Array."


class ConfigurationError(ValueError):
    """
    The imgix settings are missing or malformed.

    Operator misconfiguration: raised synchronously on first use and never
    recovered internally, so it surfaces at boot or on the first request.
    """
