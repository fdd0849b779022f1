import random

import pytest

from estructuras_tad.benchmark import ResultadoBenchmark, main, medir_busquedas


def test_medir_busquedas_devuelve_promedios_no_negativos():
    resultado = medir_busquedas(200, 50, 0, 1000, random.Random(1))
    assert resultado.promedio_arbol_ns >= 0
    assert resultado.promedio_tabla_ns >= 0


@pytest.mark.parametrize("cantidad", [1, 10, 2000])
def test_medir_busquedas_con_cantidades_limite(cantidad):
    resultado = medir_busquedas(cantidad, 5, -50, 50, random.Random(3))
    assert resultado.promedio_arbol_ns >= 0
    assert resultado.promedio_tabla_ns >= 0


@pytest.mark.parametrize("cantidad", [0, 2001, -3])
def test_cantidad_de_claves_invalida(cantidad):
    with pytest.raises(ValueError):
        medir_busquedas(cantidad, 5, 0, 10)


def test_repeticiones_invalidas():
    with pytest.raises(ValueError):
        medir_busquedas(10, 0, 0, 10)


@pytest.mark.parametrize("maximo", [5, 4])
def test_maximo_no_mayor_que_minimo(maximo):
    with pytest.raises(ValueError):
        medir_busquedas(10, 5, 5, maximo)


def test_texto_del_resultado():
    texto = str(ResultadoBenchmark(12.34, 5.0))
    assert texto.startswith("[OUTPUT] El promedio de tiempo de ejecucion del arbol es")
    assert "12.3 nanosegundos" in texto
    assert "5.0 nanosegundos." in texto


def test_main_con_argumentos(capsys):
    codigo = main(
        ["--claves", "50", "--repeticiones", "10", "--minimo", "0", "--maximo", "500"]
    )
    assert codigo == 0
    assert "[OUTPUT] El promedio de tiempo" in capsys.readouterr().out


def test_main_rechaza_argumento_invalido():
    with pytest.raises(SystemExit):
        main(["--claves", "5000", "--repeticiones", "1", "--minimo", "0", "--maximo", "9"])


def test_main_interactivo_reintenta(monkeypatch, capsys):
    respuestas = iter(["abc", "0", "20", "5", "10", "3", "50"])
    monkeypatch.setattr("builtins.input", lambda _mensaje="": next(respuestas))
    assert main([]) == 0
    salida = capsys.readouterr().out
    assert salida.count("[ERROR] Debe ingresar un numero de claves") == 2
    assert "mayor que el numero minimo" in salida
    assert "[OUTPUT]" in salida


def test_main_sin_entrada(monkeypatch):
    def sin_entrada(_mensaje=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", sin_entrada)
    assert main([]) == 1