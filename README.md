# estructuras_tad

Classic abstract data types written in plain Python, plus two interactive
console programs that use them.

## Data types

- `estructuras_tad.elemento.Elemento` – an integer key (`clave`) with an
  optional attached value (`valor`).
- `estructuras_tad.listas.ListaArreglo` – a bounded list (100 elements by
  default) with 1-based positions: `agregar`, `insertar`, `eliminar`,
  `recuperar`, `buscar`, `borrar` (removes every element with a key),
  `es_vacia`, `es_llena`, `len()`, `mostrar` and in-order iteration.
  `insertar` past the end appends the element and returns `False`.
- `estructuras_tad.nodo.NodoArbol` – a binary tree node with its height.
- `estructuras_tad.avl.ArbolAVL` – a self-balancing binary search tree with
  unique integer keys: `insertar`, `eliminar`, `buscar`, `es_vacio`,
  `es_lleno`, `len()` and iteration in ascending key order.
- `estructuras_tad.tabla_hash.TablaHashColisiones` and `TablaHashOverflow` –
  fixed-size hash tables driven by a hash function you supply, resolving
  collisions with a list per slot or with a separate overflow area:
  `insertar`, `eliminar`, `recuperar`, the `in` operator, `texto` and
  `mostrar(solo_ocupados)`. A hash value outside `range(capacidad)` raises
  `IndexError`.

```python
from estructuras_tad.avl import ArbolAVL
from estructuras_tad.elemento import Elemento
from estructuras_tad.tabla_hash import TablaHashColisiones

arbol = ArbolAVL()
for clave in (5, 1, 9, 3):
    arbol.insertar(Elemento(clave))
print([e.clave for e in arbol])        # [1, 3, 5, 9]

tabla = TablaHashColisiones(7, lambda clave: clave % 7)
tabla.insertar(Elemento(3, "tres"))
tabla.insertar(Elemento(10, "diez"))    # same slot, kept in the collision list
print(tabla.recuperar(10).valor)        # diez
tabla.mostrar(solo_ocupados=True)
```

`estructuras_tad.primos` offers `es_primo` and `primo_mas_cercano` (the
nearest prime, the smaller one on a tie).

`estructuras_tad.benchmark.medir_busquedas(cantidad_claves, repeticiones,
minimo, maximo, rng=None)` loads random keys into an AVL tree and a hash
table and returns a `ResultadoBenchmark` with the average lookup time of
each, in nanoseconds.

`estructuras_tad.vacunacion` has `RegistroVacunacion` (`cargar(persona)`,
`recuperar(dia, mes, anio)`), the `Persona` record and the date helpers
`es_bisiesto`, `dias_en_mes`, `dias_desde_inicio` and `calcular_clave`
(days elapsed since 01/04/2020). Dates before that day are rejected with
`ValueError`.

## Console programs

After installing the package:

- `tad-benchmark [--claves N] [--repeticiones N] [--minimo N] [--maximo N]`
  – compares the average lookup time of an AVL tree and a hash table over
  randomly generated keys (1 to 2000 keys). Any value not given on the
  command line is asked for.
- `tad-vacunacion` – a menu to record vaccinated people by date (option 1),
  list everyone vaccinated on a given day (option 2) and leave (option 3).
  The records live in memory only and are lost when the program ends.

## What it does not do

The package has no set type and no set operations (union, intersection,
difference), no linked or cursor-based list, and no student register kept
in a file. Only the array-backed list is provided.

## Tests

```
pip install -e .[test]
pytest
```