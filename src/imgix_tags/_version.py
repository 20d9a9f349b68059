# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

__version__ = "0.1.0"

# Reported to the CDN as ``ixlib=<LIBRARY_NAME>-<__version__>``
LIBRARY_NAME = "tags"
