"""Binary tree node used by the AVL tree."""

from __future__ import annotations

from dataclasses import dataclass

from .elemento import Elemento


@dataclass
class NodoArbol:
    """A tree node holding an element, two children and its height.

    A leaf has height 0; a missing child counts as height -1.
    """

    datos: Elemento
    hi: NodoArbol | None = None
    hd: NodoArbol | None = None
    altura: int = 0

    def altura_izquierda(self) -> int:
        return -1 if self.hi is None else self.hi.altura

    def altura_derecha(self) -> int:
        return -1 if self.hd is None else self.hd.altura