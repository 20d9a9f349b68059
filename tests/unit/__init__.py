# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for imgix-tags components.

Isolated tests for the primitives, the configuration resolver and the
tag builder helpers.
"""
