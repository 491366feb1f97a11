"""
Codificação e desenho do código de barras do boleto.

O núcleo (Boleto) só conhece os protocolos CodificadorSimbolo e
RenderizadorSimbolo. As implementações padrão usam o python-barcode:
Interleaved 2 of 5 (ITF), que é o símbolo exigido pela FEBRABAN, e SVG.
"""

import logging
import os
from pathlib import Path
from typing import List, NamedTuple, Protocol

from barcode import ITF
from barcode.writer import SVGWriter

from .config import Config
from .digitos import so_digitos
from .erros import ErroAlvoRenderizacao, SimboloInvalido

logger = logging.getLogger(__name__)

ESTREITA = 1
LARGA = 3


class Faixa(NamedTuple):
    barra: bool
    largura: int


class CodificadorSimbolo(Protocol):
    def codificar(self, digitos: str) -> List[Faixa]:
        ...


class RenderizadorSimbolo(Protocol):
    def renderizar(self, faixas: List[Faixa], alvo) -> None:
        ...


class CodificadorITF:
    """
    Converte dígitos em faixas Interleaved 2 of 5.

    Cada par de dígitos vira 5 barras (primeiro dígito) intercaladas com
    5 espaços (segundo dígito); início NnNn, fim WnN.
    """

    def codificar(self, digitos: str) -> List[Faixa]:
        if not isinstance(digitos, str) or not so_digitos(digitos):
            raise SimboloInvalido(f"ITF aceita apenas dígitos: {digitos!r}")

        simbolo = ITF(digitos, narrow=ESTREITA, wide=LARGA)

        return modulos_para_faixas(simbolo.build()[0])


def modulos_para_faixas(modulos: str) -> List[Faixa]:
    """
    '1110100' -> [Faixa(True, 3), Faixa(False, 1), Faixa(True, 1), Faixa(False, 2)]
    """
    faixas = []
    for m in modulos:
        barra = m == "1"
        if faixas and faixas[-1].barra == barra:
            faixas[-1] = Faixa(barra, faixas[-1].largura + 1)
        else:
            faixas.append(Faixa(barra, 1))
    return faixas


def faixas_para_modulos(faixas) -> str:
    return "".join(("1" if f.barra else "0") * f.largura for f in faixas)


class RenderizadorSVG:
    """
    Desenha as faixas como documento SVG (via SVGWriter do python-barcode).

    O alvo pode ser um caminho (str ou Path) ou um arquivo binário aberto.
    """

    def __init__(self, module_width=None, module_height=None, quiet_zone=None):
        self.options = {
            "module_width": Config.SVG_MODULE_WIDTH if module_width is None else module_width,
            "module_height": Config.SVG_MODULE_HEIGHT if module_height is None else module_height,
            "quiet_zone": Config.SVG_QUIET_ZONE if quiet_zone is None else quiet_zone,
            "text": "",
        }

    def gerar(self, faixas) -> bytes:
        writer = SVGWriter()
        writer.set_options(self.options)
        return writer.render([faixas_para_modulos(faixas)])

    def renderizar(self, faixas, alvo) -> None:
        conteudo = self.gerar(faixas)

        if isinstance(alvo, (str, os.PathLike)):
            caminho = Path(alvo)
            try:
                caminho.write_bytes(conteudo)
            except OSError as e:
                raise ErroAlvoRenderizacao(f"Não foi possível gravar em {caminho}: {e}") from e
            logger.debug("Código de barras gravado em %s", caminho)
            return

        escrever = getattr(alvo, "write", None)
        if not callable(escrever):
            raise ErroAlvoRenderizacao(f"Destino de desenho não reconhecido: {alvo!r}")
        try:
            escrever(conteudo)
        except (OSError, TypeError, ValueError) as e:
            raise ErroAlvoRenderizacao(f"Não foi possível escrever no destino: {e}") from e


def codigo_barras_svg(boleto, **opcoes) -> bytes:
    """SVG do código de barras de um boleto, em memória."""
    faixas = CodificadorITF().codificar(boleto.codigo_barras())
    return RenderizadorSVG(**opcoes).gerar(faixas)


def salvar_codigo_barras_svg(boleto, alvo, **opcoes) -> None:
    boleto.renderizar(alvo, CodificadorITF(), RenderizadorSVG(**opcoes))
