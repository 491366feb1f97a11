"""Boleto bancário (cobrança) construído a partir da linha digitável."""

import logging
from datetime import timedelta

from .campos import (
    TAMANHO_LINHA_DIGITAVEL,
    extrair_campo,
    formatar_linha_digitavel,
    linha_para_codigo_barras,
)
from .digitos import limpar_numero, modulo11
from .erros import LinhaDigitavelInvalida
from .tabelas import DATA_BASE_VENCIMENTO, MOEDA_DESCONHECIDA, moeda_por_codigo, nome_banco

logger = logging.getLogger(__name__)


class Boleto:
    """
    Boleto validado. Só existe se a linha digitável tiver 47 dígitos e o DV
    geral do código de barras conferir; caso contrário a construção levanta
    LinhaDigitavelInvalida.

    Caracteres que não são dígitos (pontos, espaços) são descartados antes da
    validação, então a linha pode vir com ou sem máscara.

    Os demais dados são sempre recalculados a partir da linha.
    """

    __slots__ = ("_numero",)

    def __init__(self, linha_digitavel: str):
        numero = limpar_numero(linha_digitavel)
        object.__setattr__(self, "_numero", numero)

        if len(numero) != TAMANHO_LINHA_DIGITAVEL:
            logger.debug("Linha recusada por tamanho: %s dígitos", len(numero))
            raise LinhaDigitavelInvalida(
                numero,
                f"esperado {TAMANHO_LINHA_DIGITAVEL} dígitos, recebido {len(numero)}",
            )
        if not self.valido():
            logger.debug("Linha recusada pelo DV geral: %s", numero)
            raise LinhaDigitavelInvalida(
                numero,
                f"dígito verificador geral {self.digito_verificador()} não confere "
                f"(esperado {self._digito_calculado()})",
            )

    def __setattr__(self, nome, valor):
        raise AttributeError("Boleto é imutável")

    def __reduce__(self):
        return (Boleto, (self._numero,))

    def __repr__(self):
        return f"Boleto({self._numero!r})"

    def __str__(self):
        return self.linha_formatada()

    def __eq__(self, outro):
        if not isinstance(outro, Boleto):
            return NotImplemented
        return self._numero == outro._numero

    def __hash__(self):
        return hash(self._numero)

    def _digito_calculado(self) -> int:
        digitos = self.codigo_barras()
        return modulo11(digitos[:4] + digitos[5:])

    def valido(self) -> bool:
        """
        Confere o tamanho da linha e aplica o módulo 11 ao código de barras
        sem a posição 5 (o próprio DV geral), comparando com esse DV.
        """
        if len(self._numero) != TAMANHO_LINHA_DIGITAVEL:
            return False
        return self._digito_calculado() == int(self.digito_verificador())

    def numero(self) -> str:
        return self._numero

    def linha_formatada(self) -> str:
        return formatar_linha_digitavel(self._numero)

    def codigo_barras(self) -> str:
        return linha_para_codigo_barras(self._numero)

    def codigo_banco(self) -> str:
        return extrair_campo(self.codigo_barras(), "banco")

    def banco(self) -> str:
        """
        Nome do banco emissor. Só os bancos mais usados estão na tabela;
        os demais retornam "Unknown".
        """
        return nome_banco(self.codigo_banco())

    def codigo_moeda(self) -> str:
        return extrair_campo(self.codigo_barras(), "moeda")

    def moeda(self):
        return moeda_por_codigo(self.codigo_moeda())

    def digito_verificador(self) -> str:
        return extrair_campo(self.codigo_barras(), "digito_verificador")

    def fator_vencimento(self) -> int:
        return int(extrair_campo(self.codigo_barras(), "fator_vencimento"))

    def vencimento(self):
        """
        Data de vencimento: dias corridos contados a partir de 07/10/1997.
        """
        return DATA_BASE_VENCIMENTO + timedelta(days=self.fator_vencimento())

    def campo_livre(self) -> str:
        return extrair_campo(self.codigo_barras(), "campo_livre")

    def valor_centavos(self) -> int:
        return int(extrair_campo(self.codigo_barras(), "valor"))

    def valor(self) -> str:
        """Valor nominal com duas casas decimais, ex.: '29.80'."""
        reais, centavos = divmod(self.valor_centavos(), 100)
        return f"{reais}.{centavos:02d}"

    def valor_formatado(self) -> str:
        """Valor com símbolo e separador da moeda, ex.: 'R$ 29,80'."""
        moeda = self.moeda()
        if moeda is MOEDA_DESCONHECIDA:
            return self.valor()
        return f"{moeda.simbolo} {self.valor().replace('.', moeda.decimal)}"

    def renderizar(self, alvo, codificador, renderizador):
        """
        Desenha o código de barras em `alvo`: o codificador transforma os 44
        dígitos em faixas e o renderizador desenha as faixas.
        Erros de qualquer um dos dois sobem sem alteração.
        """
        faixas = codificador.codificar(self.codigo_barras())
        renderizador.renderizar(faixas, alvo)
