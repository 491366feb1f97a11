"""
Conversões de posição fixa entre a linha digitável (47 dígitos) e o
código de barras (44 dígitos), e extração dos campos do código de barras.

Linha digitável (posições 0-based):
  Campo 1:  0-3 banco+moeda, 4-8 campo livre (1-5)   + DV (9)
  Campo 2: 10-19 campo livre (6-15)                  + DV (20)
  Campo 3: 21-30 campo livre (16-25)                 + DV (31)
  Campo 4: 32 DV geral do código de barras
  Campo 5: 33-36 fator de vencimento, 37-46 valor
"""

from typing import NamedTuple

from .digitos import modulo10, so_digitos
from .erros import EntradaInvalida

TAMANHO_LINHA_DIGITAVEL = 47
TAMANHO_CODIGO_BARRAS = 44


class Campo(NamedTuple):
    nome: str
    inicio: int
    tamanho: int

    @property
    def fim(self):
        return self.inicio + self.tamanho


CAMPOS_CODIGO_BARRAS = (
    Campo("banco", 0, 3),
    Campo("moeda", 3, 1),
    Campo("digito_verificador", 4, 1),
    Campo("fator_vencimento", 5, 4),
    Campo("valor", 9, 10),
    Campo("campo_livre", 19, 25),
)
_CAMPOS_POR_NOME = {c.nome: c for c in CAMPOS_CODIGO_BARRAS}

# Grupos da máscara "NNNNN.NNNNN NNNNN.NNNNNN NNNNN.NNNNNN N NNNNNNNNNNNNNN"
_MASCARA = ((5, "."), (5, " "), (5, "."), (6, " "), (5, "."), (6, " "), (1, " "), (14, ""))


def _exigir_digitos(valor, tamanho, descricao):
    if not isinstance(valor, str) or len(valor) != tamanho or not so_digitos(valor):
        raise EntradaInvalida(
            f"{descricao} deve ter exatamente {tamanho} dígitos, recebido {valor!r}."
        )


def linha_para_codigo_barras(linha: str) -> str:
    """
    Monta o código de barras (44 dígitos) a partir da linha digitável.

    A linha é o código de barras reorganizado com mais três DVs (um por campo).
    Aqui os DVs são descartados e a ordem original é refeita:
    banco+moeda (4) + DV geral, fator e valor (15) + campo livre (25).
    """
    _exigir_digitos(linha, TAMANHO_LINHA_DIGITAVEL, "Linha digitável")

    banco_moeda = linha[0:4]
    livre_1 = linha[4:9]
    livre_2 = linha[10:20]
    livre_3 = linha[21:31]
    dv_fator_valor = linha[32:47]

    return banco_moeda + dv_fator_valor + livre_1 + livre_2 + livre_3


def codigo_barras_para_linha(codigo_barras: str) -> str:
    """
    Operação inversa de linha_para_codigo_barras: separa o campo livre em
    três campos e acrescenta o DV módulo 10 de cada um.
    """
    _exigir_digitos(codigo_barras, TAMANHO_CODIGO_BARRAS, "Código de barras")

    campo1 = codigo_barras[0:4] + codigo_barras[19:24]
    campo2 = codigo_barras[24:34]
    campo3 = codigo_barras[34:44]
    campo5 = codigo_barras[4:19]

    return (
        campo1 + str(modulo10(campo1))
        + campo2 + str(modulo10(campo2))
        + campo3 + str(modulo10(campo3))
        + campo5
    )


def formatar_linha_digitavel(linha: str) -> str:
    """
    Aplica a máscara usual: 00000.00000 00000.000000 00000.000000 0 00000000000000
    """
    _exigir_digitos(linha, TAMANHO_LINHA_DIGITAVEL, "Linha digitável")

    partes = []
    pos = 0
    for tamanho, separador in _MASCARA:
        partes.append(linha[pos:pos + tamanho] + separador)
        pos += tamanho
    return "".join(partes)


def extrair_campo(codigo_barras: str, nome: str) -> str:
    """
    Retorna o trecho do código de barras correspondente ao campo `nome`
    (ver CAMPOS_CODIGO_BARRAS).
    """
    campo = _CAMPOS_POR_NOME[nome]
    _exigir_digitos(codigo_barras, TAMANHO_CODIGO_BARRAS, "Código de barras")
    return codigo_barras[campo.inicio:campo.fim]


def verificar_digitos_campos(linha: str):
    """
    Confere o DV (módulo 10) dos campos 1, 2 e 3 da linha digitável.
    Retorna lista de mensagens; vazia quando os três conferem.
    """
    _exigir_digitos(linha, TAMANHO_LINHA_DIGITAVEL, "Linha digitável")

    campos = (
        (1, linha[0:9], int(linha[9])),
        (2, linha[10:20], int(linha[20])),
        (3, linha[21:31], int(linha[31])),
    )
    erros = []
    for numero, campo, dv in campos:
        esperado = modulo10(campo)
        if esperado != dv:
            erros.append(
                f"Dígito verificador do Campo {numero} inválido. Esperado {esperado}, encontrado {dv}."
            )
    return erros
