"""Leitura, validação e desenho de boletos bancários."""
from .erros import (
    ErroBoleto,
    EntradaInvalida,
    LinhaDigitavelInvalida,
    SimboloInvalido,
    ErroAlvoRenderizacao
)

from .digitos import (
    limpar_numero,
    modulo10,
    modulo11
)

from .tabelas import (
    BANCOS,
    MOEDAS,
    MOEDA_DESCONHECIDA,
    DATA_BASE_VENCIMENTO,
    DESCONHECIDO,
    Moeda,
    nome_banco,
    moeda_por_codigo
)

from .campos import (
    CAMPOS_CODIGO_BARRAS,
    Campo,
    extrair_campo,
    linha_para_codigo_barras,
    codigo_barras_para_linha,
    formatar_linha_digitavel,
    verificar_digitos_campos
)

from .boleto import (
    Boleto
)

from .analise import (
    analisar_linha_digitavel,
    analisar_lote
)

__all__ = [
    "ErroBoleto",
    "EntradaInvalida",
    "LinhaDigitavelInvalida",
    "SimboloInvalido",
    "ErroAlvoRenderizacao",
    "limpar_numero",
    "modulo10",
    "modulo11",
    "BANCOS",
    "MOEDAS",
    "MOEDA_DESCONHECIDA",
    "DATA_BASE_VENCIMENTO",
    "DESCONHECIDO",
    "Moeda",
    "nome_banco",
    "moeda_por_codigo",
    "CAMPOS_CODIGO_BARRAS",
    "Campo",
    "extrair_campo",
    "linha_para_codigo_barras",
    "codigo_barras_para_linha",
    "formatar_linha_digitavel",
    "verificar_digitos_campos",
    "Boleto",
    "analisar_linha_digitavel",
    "analisar_lote"
]
