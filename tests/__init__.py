# imgix-tags Test Suite
# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
imgix-tags test suite.

Unit tests per package area plus integration tests that drive the real
imgix URL client end to end.
"""
