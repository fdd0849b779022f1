"""Self-balancing AVL binary search tree keyed by integer keys."""

from __future__ import annotations

from collections.abc import Iterator

from .elemento import Elemento
from .nodo import NodoArbol

TAMANIO_MAXIMO_ARBOL_AVL = 1000

_DESBALANCEADO_IZQUIERDA = 2
_APENAS_DESBALANCEADO_IZQUIERDA = 1
_BALANCEADO = 0
_APENAS_DESBALANCEADO_DERECHA = -1
_DESBALANCEADO_DERECHA = -2


def _actualizar_altura(nodo: NodoArbol) -> None:
    nodo.altura = max(nodo.altura_izquierda(), nodo.altura_derecha()) + 1


def _balanceo(nodo: NodoArbol) -> int:
    diferencia = nodo.altura_izquierda() - nodo.altura_derecha()
    if diferencia in (
        _DESBALANCEADO_DERECHA,
        _APENAS_DESBALANCEADO_DERECHA,
        _APENAS_DESBALANCEADO_IZQUIERDA,
        _DESBALANCEADO_IZQUIERDA,
    ):
        return diferencia
    return _BALANCEADO


def _rotar_izquierda(nodo: NodoArbol) -> NodoArbol:
    otro = nodo.hd
    assert otro is not None
    nodo.hd = otro.hi
    otro.hi = nodo
    _actualizar_altura(nodo)
    otro.altura = max(otro.altura_derecha(), nodo.altura) + 1
    return otro


def _rotar_derecha(nodo: NodoArbol) -> NodoArbol:
    otro = nodo.hi
    assert otro is not None
    nodo.hi = otro.hd
    otro.hd = nodo
    _actualizar_altura(nodo)
    otro.altura = max(otro.altura_izquierda(), nodo.altura) + 1
    return otro


def _minimo(nodo: NodoArbol) -> NodoArbol:
    while nodo.hi is not None:
        nodo = nodo.hi
    return nodo


class ArbolAVL:
    """AVL tree of elements; keys are unique.

    ``capacidad`` only affects :meth:`es_lleno`; insertion is not refused
    when the tree is full.
    """

    def __init__(self, capacidad: int = TAMANIO_MAXIMO_ARBOL_AVL) -> None:
        self.capacidad = capacidad
        self.raiz: NodoArbol | None = None
        self._cantidad = 0

    def es_vacio(self) -> bool:
        return self.raiz is None

    def es_lleno(self) -> bool:
        return self._cantidad == self.capacidad

    def __len__(self) -> int:
        return self._cantidad

    def insertar(self, elemento: Elemento) -> bool:
        """Insert an element; return ``False`` if its key is already present."""
        self.raiz, inserto = self._insertar(self.raiz, elemento)
        if inserto:
            self._cantidad += 1
        return inserto

    def _insertar(
        self, nodo: NodoArbol | None, elemento: Elemento
    ) -> tuple[NodoArbol, bool]:
        if nodo is None:
            return NodoArbol(elemento), True

        clave = elemento.clave
        if clave < nodo.datos.clave:
            nodo.hi, inserto = self._insertar(nodo.hi, elemento)
        elif clave > nodo.datos.clave:
            nodo.hd, inserto = self._insertar(nodo.hd, elemento)
        else:
            return nodo, False

        _actualizar_altura(nodo)
        estado = _balanceo(nodo)

        if estado == _DESBALANCEADO_IZQUIERDA:
            assert nodo.hi is not None
            if clave < nodo.hi.datos.clave:
                return _rotar_derecha(nodo), inserto
            nodo.hi = _rotar_izquierda(nodo.hi)
            return _rotar_derecha(nodo), inserto

        if estado == _DESBALANCEADO_DERECHA:
            assert nodo.hd is not None
            if clave > nodo.hd.datos.clave:
                return _rotar_izquierda(nodo), inserto
            nodo.hd = _rotar_derecha(nodo.hd)
            return _rotar_izquierda(nodo), inserto

        return nodo, inserto

    def eliminar(self, clave: int) -> bool:
        """Remove the element with ``clave``; return whether it was found."""
        self.raiz, borre = self._eliminar(self.raiz, clave)
        if borre:
            self._cantidad -= 1
        return borre

    def _eliminar(
        self, nodo: NodoArbol | None, clave: int
    ) -> tuple[NodoArbol | None, bool]:
        if nodo is None:
            return None, False

        if clave < nodo.datos.clave:
            nodo.hi, borre = self._eliminar(nodo.hi, clave)
        elif clave > nodo.datos.clave:
            nodo.hd, borre = self._eliminar(nodo.hd, clave)
        else:
            borre = True
            if nodo.hi is None:
                if nodo.hd is None:
                    return None, True
                nodo = nodo.hd
            elif nodo.hd is None:
                nodo = nodo.hi
            else:
                sucesor = _minimo(nodo.hd)
                nodo.datos = sucesor.datos
                nodo.hd, _ = self._eliminar(nodo.hd, sucesor.datos.clave)

        _actualizar_altura(nodo)
        estado = _balanceo(nodo)

        if estado == _DESBALANCEADO_IZQUIERDA:
            assert nodo.hi is not None
            if _balanceo(nodo.hi) in (_BALANCEADO, _APENAS_DESBALANCEADO_IZQUIERDA):
                return _rotar_derecha(nodo), borre
            nodo.hi = _rotar_izquierda(nodo.hi)
            return _rotar_derecha(nodo), borre

        if estado == _DESBALANCEADO_DERECHA:
            assert nodo.hd is not None
            if _balanceo(nodo.hd) in (_BALANCEADO, _APENAS_DESBALANCEADO_DERECHA):
                return _rotar_izquierda(nodo), borre
            nodo.hd = _rotar_derecha(nodo.hd)
            return _rotar_izquierda(nodo), borre

        return nodo, borre

    def buscar(self, clave: int) -> Elemento | None:
        """Return the element with ``clave``, or ``None``."""
        nodo = self.raiz
        while nodo is not None:
            if clave < nodo.datos.clave:
                nodo = nodo.hi
            elif clave > nodo.datos.clave:
                nodo = nodo.hd
            else:
                return nodo.datos
        return None

    def __iter__(self) -> Iterator[Elemento]:
        """Yield the elements in ascending key order."""
        pila: list[NodoArbol] = []
        nodo = self.raiz
        while pila or nodo is not None:
            while nodo is not None:
                pila.append(nodo)
                nodo = nodo.hi
            nodo = pila.pop()
            yield nodo.datos
            nodo = nodo.hd