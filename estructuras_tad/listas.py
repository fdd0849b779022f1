"""Bounded lists of elements addressed by 1-based ordinal position."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .elemento import Elemento

TAMANIO_MAXIMO_LISTAS = 100


class Lista(ABC):
    """Common behaviour of all list implementations.

    Positions are ordinal and start at 1. A list holds at most ``capacidad``
    elements; operations that would exceed it return ``False``.
    """

    def __init__(self, capacidad: int = TAMANIO_MAXIMO_LISTAS) -> None:
        if capacidad < 1:
            raise ValueError("la capacidad debe ser positiva")
        self.capacidad = capacidad
        self._cantidad = 0

    def es_vacia(self) -> bool:
        return self._cantidad == 0

    def es_llena(self) -> bool:
        return self._cantidad == self.capacidad

    def __len__(self) -> int:
        return self._cantidad

    def __str__(self) -> str:
        return "Contenido de la lista: " + "".join(f"{e.clave} " for e in self)

    def mostrar(self) -> None:
        """Print the keys of the list in order."""
        print(self)

    @abstractmethod
    def agregar(self, elemento: Elemento) -> bool:
        """Append an element at the end."""

    @abstractmethod
    def borrar(self, clave: int) -> bool:
        """Remove every element with the given key."""

    @abstractmethod
    def buscar(self, clave: int) -> Elemento | None:
        """Return the first element with the given key."""

    @abstractmethod
    def insertar(self, elemento: Elemento, pos: int) -> bool:
        """Insert an element at an ordinal position."""

    @abstractmethod
    def eliminar(self, pos: int) -> bool:
        """Remove the element at an ordinal position."""

    @abstractmethod
    def recuperar(self, pos: int) -> Elemento | None:
        """Return the element at an ordinal position."""

    @abstractmethod
    def __iter__(self) -> Iterator[Elemento]:
        """Iterate over the elements in order."""


class ListaArreglo(Lista):
    """List backed by a contiguous array."""

    def __init__(self, capacidad: int = TAMANIO_MAXIMO_LISTAS) -> None:
        super().__init__(capacidad)
        self._valores: list[Elemento] = []

    def _sincronizar(self) -> None:
        self._cantidad = len(self._valores)

    def agregar(self, elemento: Elemento) -> bool:
        if self.es_llena():
            return False
        self._valores.append(elemento)
        self._sincronizar()
        return True

    def borrar(self, clave: int) -> bool:
        if self.es_vacia():
            return False
        restantes = [e for e in self._valores if e.clave != clave]
        borre = len(restantes) != len(self._valores)
        self._valores = restantes
        self._sincronizar()
        return borre

    def buscar(self, clave: int) -> Elemento | None:
        return next((e for e in self._valores if e.clave == clave), None)

    def insertar(self, elemento: Elemento, pos: int) -> bool:
        """Insert at ``pos``; beyond the end the element is appended and
        ``False`` is returned."""
        if self.es_llena():
            return False
        if pos > len(self):
            self.agregar(elemento)
            return False
        if pos < 1:
            raise IndexError(f"posicion invalida: {pos}")
        self._valores.insert(pos - 1, elemento)
        self._sincronizar()
        return True

    def eliminar(self, pos: int) -> bool:
        if not 1 <= pos <= len(self):
            return False
        del self._valores[pos - 1]
        self._sincronizar()
        return True

    def recuperar(self, pos: int) -> Elemento | None:
        if not 1 <= pos <= len(self):
            return None
        return self._valores[pos - 1]

    def __iter__(self) -> Iterator[Elemento]:
        return iter(list(self._valores))