"""Prime number helpers used to size hash functions."""

from __future__ import annotations

from math import isqrt


def es_primo(num: int) -> bool:
    """Whether ``num`` is a prime number."""
    if num <= 1:
        return False
    return all(num % i for i in range(2, isqrt(num) + 1))


def primo_mas_cercano(num: int) -> int:
    """The prime closest to ``num``; on a tie the smaller one wins.

    Anything not above 1 gives 2.
    """
    if num <= 1:
        return 2
    if es_primo(num):
        return num
    distancia = 1
    while True:
        if es_primo(num - distancia):
            return num - distancia
        if es_primo(num + distancia):
            return num + distancia
        distancia += 1