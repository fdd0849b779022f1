from estructuras_tad.elemento import Elemento
from estructuras_tad.nodo import NodoArbol


def test_hoja():
    nodo = NodoArbol(Elemento(1))
    assert nodo.altura == 0
    assert nodo.hi is None and nodo.hd is None
    assert nodo.altura_izquierda() == -1
    assert nodo.altura_derecha() == -1


def test_alturas_de_hijos():
    izq = NodoArbol(Elemento(1), altura=2)
    der = NodoArbol(Elemento(3))
    raiz = NodoArbol(Elemento(2), hi=izq, hd=der)
    assert raiz.altura_izquierda() == izq.altura
    assert raiz.altura_derecha() == der.altura


def test_un_solo_hijo():
    hijo = NodoArbol(Elemento(5), altura=1)
    raiz = NodoArbol(Elemento(2), hd=hijo)
    assert raiz.altura_izquierda() == -1
    assert raiz.altura_derecha() == hijo.altura


def test_datos_compartidos():
    e = Elemento(4, "x")
    nodo = NodoArbol(e)
    nodo.datos.valor = "y"
    assert e.valor == "y"