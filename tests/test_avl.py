import random

import pytest

from estructuras_tad.avl import TAMANIO_MAXIMO_ARBOL_AVL, ArbolAVL
from estructuras_tad.elemento import Elemento


def _verificar(nodo):
    """Check BST order, stored heights and AVL balance; return height."""
    if nodo is None:
        return -1
    izq = _verificar(nodo.hi)
    der = _verificar(nodo.hd)
    if nodo.hi is not None:
        assert nodo.hi.datos.clave < nodo.datos.clave
    if nodo.hd is not None:
        assert nodo.hd.datos.clave > nodo.datos.clave
    assert abs(izq - der) <= 1
    assert nodo.altura == max(izq, der) + 1
    return nodo.altura


def _claves(arbol):
    return [e.clave for e in arbol]


def test_arbol_nuevo_vacio():
    arbol = ArbolAVL()
    assert arbol.es_vacio()
    assert len(arbol) == 0
    assert _claves(arbol) == []
    assert arbol.buscar(5) is None


def test_insertar_y_buscar():
    arbol = ArbolAVL()
    elemento = Elemento(7, "siete")
    assert arbol.insertar(elemento) is True
    assert not arbol.es_vacio()
    assert len(arbol) == 1
    assert arbol.buscar(7) is elemento
    assert arbol.buscar(8) is None


def test_insertar_duplicado_no_cuenta():
    arbol = ArbolAVL()
    assert arbol.insertar(Elemento(3))
    assert arbol.insertar(Elemento(3, "otro")) is False
    assert len(arbol) == 1
    assert arbol.buscar(3).valor is None


def test_rotacion_simple_izquierda():
    arbol = ArbolAVL()
    for clave in (1, 2, 3):
        arbol.insertar(Elemento(clave))
    assert arbol.raiz.datos.clave == 2
    _verificar(arbol.raiz)


def test_rotacion_doble():
    arbol = ArbolAVL()
    for clave in (3, 1, 2):
        arbol.insertar(Elemento(clave))
    assert arbol.raiz.datos.clave == 2
    assert _claves(arbol) == [1, 2, 3]
    _verificar(arbol.raiz)


def test_iteracion_ordenada():
    arbol = ArbolAVL()
    claves = [50, 20, 80, 10, 30, 70, 90, 25, 5]
    for clave in claves:
        arbol.insertar(Elemento(clave))
    assert _claves(arbol) == sorted(claves)


def test_eliminar_inexistente():
    arbol = ArbolAVL()
    for clave in (4, 2, 6):
        arbol.insertar(Elemento(clave))
    assert arbol.eliminar(99) is False
    assert len(arbol) == 3
    assert _claves(arbol) == [2, 4, 6]


def test_eliminar_en_vacio():
    arbol = ArbolAVL()
    assert arbol.eliminar(1) is False
    assert len(arbol) == 0


def test_eliminar_hoja_y_con_un_hijo():
    arbol = ArbolAVL()
    for clave in (10, 5, 15, 20):
        arbol.insertar(Elemento(clave))
    assert arbol.eliminar(5)
    assert _claves(arbol) == [10, 15, 20]
    assert arbol.eliminar(15)
    assert _claves(arbol) == [10, 20]
    assert len(arbol) == 2
    _verificar(arbol.raiz)


def test_eliminar_con_dos_hijos_conserva_valores():
    arbol = ArbolAVL()
    for clave in (10, 5, 15, 12, 20):
        arbol.insertar(Elemento(clave, f"v{clave}"))
    assert arbol.eliminar(10)
    assert arbol.buscar(10) is None
    assert arbol.buscar(12).valor == "v12"
    assert _claves(arbol) == [5, 12, 15, 20]
    _verificar(arbol.raiz)


def test_eliminar_no_altera_elementos_compartidos():
    compartido = Elemento(10, "diez")
    arbol = ArbolAVL()
    for elemento in (compartido, Elemento(5), Elemento(15)):
        arbol.insertar(elemento)
    arbol.eliminar(10)
    assert compartido.clave == 10
    assert compartido.valor == "diez"


def test_eliminar_todo_deja_vacio():
    arbol = ArbolAVL()
    for clave in range(20):
        arbol.insertar(Elemento(clave))
    for clave in range(20):
        assert arbol.eliminar(clave)
    assert arbol.es_vacio()
    assert len(arbol) == 0


def test_es_lleno_con_capacidad():
    arbol = ArbolAVL(capacidad=3)
    for clave in (1, 2):
        arbol.insertar(Elemento(clave))
    assert not arbol.es_lleno()
    arbol.insertar(Elemento(3))
    assert arbol.es_lleno()
    arbol.eliminar(2)
    assert not arbol.es_lleno()


def test_capacidad_por_defecto():
    arbol = ArbolAVL()
    assert arbol.capacidad == TAMANIO_MAXIMO_ARBOL_AVL
    assert not arbol.es_lleno()


@pytest.mark.parametrize("semilla", [0, 1, 2, 3])
def test_invariantes_aleatorios(semilla):
    rng = random.Random(semilla)
    arbol = ArbolAVL()
    presentes = set()
    for _ in range(300):
        clave = rng.randint(0, 150)
        if rng.random() < 0.6:
            assert arbol.insertar(Elemento(clave)) == (clave not in presentes)
            presentes.add(clave)
        else:
            assert arbol.eliminar(clave) == (clave in presentes)
            presentes.discard(clave)
        assert len(arbol) == len(presentes)
    _verificar(arbol.raiz)
    assert _claves(arbol) == sorted(presentes)
    for clave in range(151):
        encontrado = arbol.buscar(clave)
        assert (encontrado is not None) == (clave in presentes)


def test_insercion_secuencial_mantiene_altura_logaritmica():
    arbol = ArbolAVL()
    for clave in range(1, 128):
        arbol.insertar(Elemento(clave))
    assert _verificar(arbol.raiz) == 6