"""Tabelas fixas consultadas na leitura do código de barras."""

from datetime import date
from types import MappingProxyType
from typing import NamedTuple

DESCONHECIDO = "Unknown"

# Data base do fator de vencimento (fator 0000 = 07/10/1997)
DATA_BASE_VENCIMENTO = date(1997, 10, 7)

# Bancos mais comuns; a lista completa fica com a FEBRABAN.
BANCOS = MappingProxyType({
    "001": "Banco do Brasil",
    "007": "BNDES",
    "033": "Santander",
    "069": "Crefisa",
    "070": "Banco de Brasília (BRB)",
    "077": "Banco Inter",
    "102": "XP Investimentos",
    "104": "Caixa Econômica Federal",
    "140": "Easynvest",
    "197": "Stone",
    "208": "BTG Pactual",
    "212": "Banco Original",
    "237": "Bradesco",
    "260": "Nu Pagamentos",
    "341": "Itaú",
    "389": "Banco Mercantil do Brasil",
    "422": "Banco Safra",
    "505": "Credit Suisse",
    "633": "Banco Rendimento",
    "652": "Itaú Unibanco",
    "735": "Banco Neon",
    "739": "Banco Cetelem",
    "745": "Citibank",
    "748": "Sicredi",
    "756": "Sicoob",
})


class Moeda(NamedTuple):
    codigo: str
    simbolo: str
    decimal: str


MOEDA_DESCONHECIDA = Moeda(DESCONHECIDO, "", "")

# Só o código 9 (Real) é usado na prática.
MOEDAS = MappingProxyType({
    "9": Moeda("BRL", "R$", ","),
})


def nome_banco(codigo: str) -> str:
    return BANCOS.get(codigo, DESCONHECIDO)


def moeda_por_codigo(codigo: str) -> Moeda:
    return MOEDAS.get(codigo, MOEDA_DESCONHECIDA)
