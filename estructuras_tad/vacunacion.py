"""Register of people vaccinated on a given date, indexed by a hash table."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass

from .elemento import Elemento
from .listas import ListaArreglo
from .tabla_hash import TablaHashColisiones

NRO_PRIMO = 107
INICIO_DIA = 1
INICIO_MES = 4
INICIO_ANIO = 2020
LARGO_NOMBRE = 19
LARGO_DNI = 8

_DIAS_POR_MES = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_ERROR_FECHA = "[ERROR] Debe ingresar un valor valido mayor al 01/04/2020. "
_ERROR_TEXTO = "[ERROR] Debe ingresar un valor válido. "


def es_bisiesto(anio: int) -> bool:
    """Whether ``anio`` is a leap year."""
    return anio % 4 == 0 and (anio % 100 != 0 or anio % 400 == 0)


def dias_en_mes(mes: int, anio: int) -> int:
    """Number of days of month ``mes`` (1-12) in ``anio``."""
    if not 1 <= mes <= 12:
        raise ValueError(f"mes invalido: {mes}")
    if mes == 2 and es_bisiesto(anio):
        return 29
    return _DIAS_POR_MES[mes - 1]


def dias_desde_inicio(dia: int, mes: int, anio: int) -> int:
    """Days elapsed from 01/04/2020 to the given date.

    The day is not checked against the length of the month, so the 31st
    of a 30-day month counts as the first of the next one.
    """
    dias = sum(366 if es_bisiesto(a) else 365 for a in range(INICIO_ANIO, anio))
    dias += sum(dias_en_mes(m, anio) for m in range(1, mes))
    dias += dia - 1
    dias -= sum(dias_en_mes(m, INICIO_ANIO) for m in range(1, INICIO_MES))
    dias -= INICIO_DIA - 1
    return dias


def calcular_clave(dia: int, mes: int, anio: int) -> int:
    """Key under which the people vaccinated on a date are stored."""
    return dias_desde_inicio(dia, mes, anio)


def _anio_valido(anio: int) -> bool:
    return anio >= INICIO_ANIO


def _mes_valido(mes: int, anio: int) -> bool:
    if not 1 <= mes <= 12:
        return False
    return anio > INICIO_ANIO or mes >= INICIO_MES


def _dia_valido(dia: int) -> bool:
    return 1 <= dia <= 31


def _validar_fecha(dia: int, mes: int, anio: int) -> None:
    if not (_anio_valido(anio) and _mes_valido(mes, anio) and _dia_valido(dia)):
        raise ValueError(
            f"fecha invalida {dia:02}/{mes:02}/{anio}: debe ser posterior al 01/04/2020"
        )


@dataclass(frozen=True)
class Persona:
    """A vaccinated person and the date of the vaccination."""

    nombre: str
    apellido: str
    dni: str
    dia: int
    mes: int
    anio: int

    def __post_init__(self) -> None:
        _validar_fecha(self.dia, self.mes, self.anio)
        for texto, largo in (
            (self.nombre, LARGO_NOMBRE),
            (self.apellido, LARGO_NOMBRE),
            (self.dni, LARGO_DNI),
        ):
            if not texto or len(texto) > largo:
                raise ValueError(f"el campo {texto!r} debe tener entre 1 y {largo} caracteres")


class RegistroVacunacion:
    """People grouped by vaccination date; each date holds a bounded list."""

    def __init__(self) -> None:
        self._tabla = TablaHashColisiones(NRO_PRIMO, lambda clave: clave % NRO_PRIMO)

    def cargar(self, persona: Persona) -> bool:
        """Store a person; return ``False`` if there was no room for it."""
        clave = calcular_clave(persona.dia, persona.mes, persona.anio)
        existente = self._tabla.recuperar(clave)
        if existente is None:
            lista = ListaArreglo()
            lista.agregar(Elemento(clave, persona))
            return self._tabla.insertar(Elemento(clave, lista))
        return existente.valor.agregar(Elemento(clave, persona))

    def recuperar(self, dia: int, mes: int, anio: int) -> list[Persona]:
        """People vaccinated on the given date, in the order they were loaded."""
        _validar_fecha(dia, mes, anio)
        elemento = self._tabla.recuperar(calcular_clave(dia, mes, anio))
        if elemento is None:
            return []
        return [e.valor for e in elemento.valor]


def _pedir_entero(mensaje: str, valido: Callable[[int], bool]) -> int:
    while True:
        print(mensaje)
        palabras = input().split()
        try:
            numero = int(palabras[0])
        except (IndexError, ValueError):
            print(_ERROR_FECHA)
            continue
        if valido(numero):
            return numero
        print(_ERROR_FECHA)


def _pedir_texto(mensaje: str, largo: int) -> str:
    while True:
        print(mensaje)
        texto = input().strip()
        if texto and len(texto) <= largo:
            return texto
        print(_ERROR_TEXTO)


def _pedir_fecha() -> tuple[int, int, int]:
    anio = _pedir_entero("[INFO] Ingrese el anio de vacunacion: ", _anio_valido)
    mes = _pedir_entero(
        "[INFO] Ingrese el mes de vacunacion: ", lambda m: _mes_valido(m, anio)
    )
    dia = _pedir_entero("[INFO] Ingrese el dia de vacunacion: ", _dia_valido)
    return dia, mes, anio


def _pausar() -> None:
    print("Presione Enter para continuar...")
    input()


def _limpiar_consola() -> None:
    if not sys.stdout.isatty():
        return
    comando = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(comando, check=False)
    except OSError:
        pass


def _cargar(registro: RegistroVacunacion) -> None:
    dia, mes, anio = _pedir_fecha()
    nombre = _pedir_texto("[INFO] Ingrese el nombre del paciente: ", LARGO_NOMBRE)
    apellido = _pedir_texto("[INFO] Ingrese el apellido del paciente: ", LARGO_NOMBRE)
    dni = _pedir_texto("[INFO] Ingrese el DNI del paciente (Sin puntos): ", LARGO_DNI)
    persona = Persona(nombre, apellido, dni, dia, mes, anio)
    nueva_fecha = not registro.recuperar(dia, mes, anio)
    if not registro.cargar(persona):
        print("[ERROR] No se pudo cargar la persona.")
    elif nueva_fecha:
        print("[INFO] Persona cargada exitosamente.")


def _recuperar(registro: RegistroVacunacion) -> None:
    personas = registro.recuperar(*_pedir_fecha())
    _limpiar_consola()
    if not personas:
        print("[ERROR] No se encontró ninguna persona vacunada en esa fecha.")
        return
    for persona in personas:
        print("[INFO] Datos de la persona vacunada:")
        print(f"Nombre: {persona.nombre}")
        print(f"Apellido: {persona.apellido}")
        print(f"DNI: {persona.dni}")
        print()


_MENU = (
    " [MENU]\n\n"
    " 1 - Cargar nueva persona vacunada.\n"
    " 2 - Recuperar persona vacunada por fecha.\n"
    " 3 - Salir.\n"
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive vaccination register until the user leaves."""
    parser = argparse.ArgumentParser(description="Registro de personas vacunadas.")
    parser.parse_args(argv)
    registro = RegistroVacunacion()
    try:
        while True:
            print(_MENU, end="")
            palabras = input().split()
            opcion = palabras[0] if palabras else ""
            if opcion == "1":
                _cargar(registro)
                _pausar()
            elif opcion == "2":
                _recuperar(registro)
                _pausar()
            elif opcion == "3":
                return 0
            else:
                print("[ERROR] Debe ingresar una opcion valida.")
    except EOFError:
        return 0