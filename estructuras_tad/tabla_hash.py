"""Hash tables keyed by integer keys with two collision strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .elemento import Elemento
from .listas import ListaArreglo

FuncionHash = Callable[[int], int]


@dataclass
class _Registro:
    elemento: Elemento | None = None

    @property
    def ocupado(self) -> bool:
        return self.elemento is not None

    def liberar(self) -> None:
        self.elemento = None


@dataclass
class _RegistroConColisiones(_Registro):
    colisiones: ListaArreglo = field(default_factory=ListaArreglo)


class TablaHash(ABC):
    """A fixed-size hash table.

    ``funcion_hash`` maps a key to a slot in ``range(capacidad)``; a slot
    outside that range raises :class:`IndexError`.
    """

    def __init__(self, capacidad: int, funcion_hash: FuncionHash) -> None:
        if capacidad < 1:
            raise ValueError("la capacidad debe ser positiva")
        self.capacidad = capacidad
        self.funcion_hash = funcion_hash
        self._tabla = [self._nuevo_registro() for _ in range(capacidad)]

    def _nuevo_registro(self) -> _Registro:
        return _Registro()

    def _posicion(self, clave: int) -> int:
        pos = self.funcion_hash(clave)
        if not 0 <= pos < self.capacidad:
            raise IndexError(
                f"la funcion hash devolvio {pos} fuera de [0, {self.capacidad})"
            )
        return pos

    def __contains__(self, clave: int) -> bool:
        return self.recuperar(clave) is not None

    @abstractmethod
    def insertar(self, elemento: Elemento) -> bool:
        """Insert an element; return ``False`` if it was not stored."""

    @abstractmethod
    def eliminar(self, clave: int) -> bool:
        """Remove the element with ``clave``."""

    @abstractmethod
    def recuperar(self, clave: int) -> Elemento | None:
        """Return the element with ``clave``, or ``None``."""

    @abstractmethod
    def _lineas(self, solo_ocupados: bool) -> Iterator[str]:
        """Yield the body lines of the table listing."""

    def texto(self, solo_ocupados: bool = False) -> str:
        """Return the listing of the table, optionally only occupied slots."""
        lineas = ["Contenido de la tabla hash:", *self._lineas(solo_ocupados)]
        return "\n".join(lineas) + "\n\n"

    def __str__(self) -> str:
        return self.texto()

    def mostrar(self, solo_ocupados: bool = False) -> None:
        """Print the table, optionally only the occupied slots."""
        print(self.texto(solo_ocupados), end="")


class TablaHashColisiones(TablaHash):
    """Hash table resolving collisions with a list per slot."""

    _tabla: list[_RegistroConColisiones]

    def _nuevo_registro(self) -> _RegistroConColisiones:
        return _RegistroConColisiones()

    def insertar(self, elemento: Elemento) -> bool:
        registro = self._tabla[self._posicion(elemento.clave)]
        if registro.elemento is None:
            registro.elemento = elemento
            return True
        if (
            registro.elemento.clave != elemento.clave
            and registro.colisiones.buscar(elemento.clave) is None
        ):
            return registro.colisiones.agregar(elemento)
        return False

    def eliminar(self, clave: int) -> bool:
        """Remove ``clave``; an empty slot counts as a successful removal."""
        registro = self._tabla[self._posicion(clave)]
        if registro.elemento is None:
            return True
        if registro.elemento.clave == clave:
            if registro.colisiones.es_vacia():
                registro.liberar()
                return True
            registro.elemento = registro.colisiones.recuperar(1)
            return registro.colisiones.eliminar(1)
        return registro.colisiones.borrar(clave)

    def recuperar(self, clave: int) -> Elemento | None:
        registro = self._tabla[self._posicion(clave)]
        if registro.elemento is None:
            return None
        if registro.elemento.clave == clave:
            return registro.elemento
        return registro.colisiones.buscar(clave)

    def _lineas(self, solo_ocupados: bool) -> Iterator[str]:
        for i, registro in enumerate(self._tabla):
            if registro.elemento is not None:
                cadena = "".join(f" -> {e.clave} " for e in registro.colisiones)
                yield f"  tabla[{i}] [ocupado] {registro.elemento.clave}{cadena}"
            elif not solo_ocupados:
                yield f"  tabla[{i}] [ libre ]"


class TablaHashOverflow(TablaHash):
    """Hash table sending collisions to a separate overflow zone.

    The overflow zone has as many slots as the main table.
    """

    def __init__(self, capacidad: int, funcion_hash: FuncionHash) -> None:
        super().__init__(capacidad, funcion_hash)
        self._overflow = [_Registro() for _ in range(capacidad)]

    def insertar(self, elemento: Elemento) -> bool:
        registro = self._tabla[self._posicion(elemento.clave)]
        if registro.elemento is None:
            registro.elemento = elemento
            return True
        if registro.elemento.clave == elemento.clave:
            return False
        for zona in self._overflow:
            if zona.elemento is None:
                zona.elemento = elemento
                return True
            if zona.elemento.clave == elemento.clave:
                return False
        return False

    def _buscar(self, clave: int) -> _Registro | None:
        registro = self._tabla[self._posicion(clave)]
        if registro.elemento is not None and registro.elemento.clave == clave:
            return registro
        return next(
            (
                zona
                for zona in self._overflow
                if zona.elemento is not None and zona.elemento.clave == clave
            ),
            None,
        )

    def eliminar(self, clave: int) -> bool:
        registro = self._buscar(clave)
        if registro is None:
            return False
        registro.liberar()
        return True

    def recuperar(self, clave: int) -> Elemento | None:
        registro = self._buscar(clave)
        return None if registro is None else registro.elemento

    def _lineas(self, solo_ocupados: bool) -> Iterator[str]:
        for i, registro in enumerate(self._tabla):
            if registro.elemento is not None:
                yield f"  tabla[{i}] [ocupado] {registro.elemento.clave}"
            elif not solo_ocupados:
                yield f"  tabla[{i}] [ libre ]"
        yield " Zona de overflow:"
        for i, zona in enumerate(self._overflow):
            if zona.elemento is not None:
                yield f"  zo[{i}] [ocupado] {zona.elemento.clave}"
            elif not solo_ocupados:
                yield f"  zo[{i}] [ libre ]"