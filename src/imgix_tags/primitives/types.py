# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Common constrained types shared by the configuration and tag models"""

from pydantic import Field, StringConstraints
from typing_extensions import Annotated

# A bare hostname such as ``assets.imgix.net`` (no scheme, no path)
Hostname = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Pixel-density multiplier used for ``srcset`` descriptors (1x, 1.5x, 2x...)
Resolution = Annotated[float, Field(gt=0)]
