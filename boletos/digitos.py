"""Dígitos verificadores usados nos boletos (módulos 10 e 11, padrão FEBRABAN)."""

import re

from .erros import EntradaInvalida


def limpar_numero(s: str) -> str:
    """
    Remove todos os caracteres que não são dígitos.
    """
    return re.sub(r"\D", "", s or "", flags=re.ASCII)


def so_digitos(s: str) -> bool:
    """True se `s` tiver apenas dígitos ASCII (0-9)."""
    return s.isascii() and s.isdigit()


def _para_inteiros(digitos):
    if isinstance(digitos, str):
        if not so_digitos(digitos):
            raise EntradaInvalida(f"Sequência com caracteres não numéricos: {digitos!r}")
        return [int(d) for d in digitos]

    valores = list(digitos)
    for d in valores:
        if not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9:
            raise EntradaInvalida(f"Elemento que não é um dígito: {d!r}")
    return valores


def modulo11(digitos) -> int:
    """
    Calcula o dígito verificador geral do código de barras (módulo 11).

    Aceita uma string de dígitos ou uma sequência de inteiros de 0 a 9.
    Regra:
      - pesos de 2 a 9 (repetindo) da direita para a esquerda
      - DV = (11 - soma % 11) % 10
      - se o resultado for 0, o DV é 1

    >>> modulo11("123456789")
    7
    """
    valores = _para_inteiros(digitos)
    if not valores:
        raise EntradaInvalida("Sequência vazia não tem dígito verificador.")

    soma = 0
    for i, n in enumerate(reversed(valores)):
        soma += n * ((i % 8) + 2)

    dv = (11 - soma % 11) % 10
    if dv == 0:
        dv = 1
    return dv


def modulo10(numero) -> int:
    """
    Calcula o dígito verificador pelo módulo 10 (usado nos 3 primeiros campos da linha digitável).
    """
    valores = _para_inteiros(numero)
    if not valores:
        raise EntradaInvalida("Sequência vazia não tem dígito verificador.")

    soma = 0
    multiplicador = 2
    for n in reversed(valores):
        prod = n * multiplicador
        # se resultado tiver 2 dígitos, soma os dígitos
        if prod >= 10:
            prod = (prod // 10) + (prod % 10)
        soma += prod
        multiplicador = 1 if multiplicador == 2 else 2

    return (10 - soma % 10) % 10
