"""Compare average lookup time of an AVL tree against a hash table."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from .avl import ArbolAVL
from .elemento import Elemento
from .primos import primo_mas_cercano
from .tabla_hash import TablaHashColisiones

MAXIMO_CLAVES = 2000


@dataclass(frozen=True)
class ResultadoBenchmark:
    """Average lookup times, in nanoseconds."""

    promedio_arbol_ns: float
    promedio_tabla_ns: float

    def __str__(self) -> str:
        return (
            "[OUTPUT] El promedio de tiempo de ejecucion del arbol es "
            f"{self.promedio_arbol_ns:.1f} nanosegundos y el promedio de tiempo "
            f"de ejecucion de la tabla es {self.promedio_tabla_ns:.1f} nanosegundos."
        )


def _clave_aleatoria(rng: random.Random, minimo: int, maximo: int) -> int:
    return int(rng.random() * (maximo - minimo) + minimo)


def _promedio_busqueda(
    buscar: Callable[[int], object],
    repeticiones: int,
    rng: random.Random,
    minimo: int,
    maximo: int,
) -> float:
    total = 0
    for _ in range(repeticiones):
        clave = _clave_aleatoria(rng, minimo, maximo)
        inicio = time.perf_counter_ns()
        buscar(clave)
        total += time.perf_counter_ns() - inicio
    return total / repeticiones


def medir_busquedas(
    cantidad_claves: int,
    repeticiones: int,
    minimo: int,
    maximo: int,
    rng: random.Random | None = None,
) -> ResultadoBenchmark:
    """Load random keys in ``[minimo, maximo]`` into both structures and time
    ``repeticiones`` random lookups in each."""
    if not 1 <= cantidad_claves <= MAXIMO_CLAVES:
        raise ValueError(f"la cantidad de claves debe estar entre 1 y {MAXIMO_CLAVES}")
    if repeticiones < 1:
        raise ValueError("las repeticiones deben ser al menos 1")
    if maximo <= minimo:
        raise ValueError("el maximo debe ser mayor que el minimo")
    rng = rng if rng is not None else random.Random()

    modulo = primo_mas_cercano(cantidad_claves)
    arbol = ArbolAVL()
    tabla = TablaHashColisiones(max(cantidad_claves, modulo), lambda c: c % modulo)

    for _ in range(cantidad_claves):
        clave = _clave_aleatoria(rng, minimo, maximo)
        arbol.insertar(Elemento(clave))
        tabla.insertar(Elemento(clave))

    return ResultadoBenchmark(
        _promedio_busqueda(arbol.buscar, repeticiones, rng, minimo, maximo),
        _promedio_busqueda(tabla.recuperar, repeticiones, rng, minimo, maximo),
    )


def _obtener_entero(
    valor: int | None,
    mensaje: str,
    error: str,
    valido: Callable[[int], bool],
    parser: argparse.ArgumentParser,
) -> int:
    if valor is not None:
        if not valido(valor):
            parser.error(error)
        return valor
    while True:
        texto = input(mensaje)
        try:
            numero = int(texto.strip())
        except ValueError:
            print(error)
            continue
        if valido(numero):
            return numero
        print(error)


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark, asking for any value not given on the command line."""
    parser = argparse.ArgumentParser(
        description="Compara tiempos de busqueda de un arbol AVL y una tabla hash."
    )
    parser.add_argument("--claves", type=int)
    parser.add_argument("--repeticiones", type=int)
    parser.add_argument("--minimo", type=int)
    parser.add_argument("--maximo", type=int)
    args = parser.parse_args(argv)

    try:
        claves = _obtener_entero(
            args.claves,
            f"[INPUT] Cuantas claves desea generar (1-{MAXIMO_CLAVES}): ",
            "[ERROR] Debe ingresar un numero de claves que se encuentre entre "
            f"1 y {MAXIMO_CLAVES}.",
            lambda n: 1 <= n <= MAXIMO_CLAVES,
            parser,
        )
        repeticiones = _obtener_entero(
            args.repeticiones,
            "[INPUT] Cuantas repeticiones desea hacer: ",
            "[ERROR] Debe ingresar un numero para las repeticiones.",
            lambda n: n >= 1,
            parser,
        )
        minimo = _obtener_entero(
            args.minimo,
            "[INPUT] Ingrese el minimo del intervalo para generar las claves: ",
            "[ERROR] Debe ingresar un numero minimo para el intervalo.",
            lambda n: True,
            parser,
        )
        maximo = _obtener_entero(
            args.maximo,
            "[INPUT] Ingrese el maximo del intervalo para generar las claves: ",
            "[ERROR] Debe ingresar un numero maximo para el intervalo, mayor que "
            "el numero minimo ya ingresado.",
            lambda n: n > minimo,
            parser,
        )
    except EOFError:
        return 1

    resultado = medir_busquedas(claves, repeticiones, minimo, maximo)
    print()
    print(resultado)
    return 0