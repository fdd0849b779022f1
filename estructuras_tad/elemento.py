"""The element stored by every container in the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Elemento:
    """An integer key with an optional associated value."""

    clave: int
    valor: Any = None