"""Shared schema types."""

from decimal import Decimal
from typing import Annotated

from pydantic import Field

# Signed money value with cent precision. Serialized as a decimal string.
Amount = Annotated[Decimal, Field(max_digits=14, decimal_places=2)]
