import copy
import datetime
import pickle

import pytest

from boletos.boleto import Boleto
from boletos.erros import ErroAlvoRenderizacao, LinhaDigitavelInvalida, SimboloInvalido
from boletos.tabelas import MOEDA_DESCONHECIDA, Moeda, moeda_por_codigo, nome_banco

ITAU = "34191.09008 00015.710296 30132.800001 9 43950000002980"
ITAU_NUMERO = "34191090080001571029630132800001943950000002980"
BANCO_DO_BRASIL = "00190.00009 07777.777009 00087.654182 6 49000000295295"
HSBC = "39993.90309 36010.001018 03120.145929 3 42480000003500"

FULLWIDTH = str.maketrans("0123456789", "０１２３４５６７８９")

# Só zeros: o DV geral de 43 zeros é 1 (posição 32 da linha)
ZEROS = "0" * 32 + "1" + "0" * 14
# Fator de vencimento 0001: DV geral 6
FATOR_1 = "0" * 32 + "6" + "0001" + "0" * 10


def test_boleto_itau():
    boleto = Boleto(ITAU)

    assert boleto.numero() == ITAU_NUMERO
    assert boleto.codigo_barras() == "34199439500000029801090000015710293013280000"
    assert boleto.linha_formatada() == ITAU
    assert boleto.codigo_banco() == "341"
    assert boleto.banco() == "Itaú"
    assert boleto.codigo_moeda() == "9"
    assert boleto.moeda() == Moeda("BRL", "R$", ",")
    assert boleto.digito_verificador() == "9"
    assert boleto.fator_vencimento() == 4395
    assert boleto.vencimento() == datetime.date(2009, 10, 19)
    assert boleto.valor_centavos() == 2980
    assert boleto.valor() == "29.80"
    assert boleto.valor_formatado() == "R$ 29,80"
    assert boleto.campo_livre() == "1090000015710293013280000"
    assert boleto.valido()


def test_boleto_banco_do_brasil():
    boleto = Boleto(BANCO_DO_BRASIL)

    assert boleto.banco() == "Banco do Brasil"
    assert boleto.valor() == "2952.95"
    assert boleto.valor_formatado() == "R$ 2952,95"


def test_banco_nao_mapeado():
    assert Boleto(HSBC).banco() == "Unknown"


def test_aceita_linha_com_ou_sem_mascara():
    assert Boleto(ITAU) == Boleto(ITAU_NUMERO)
    assert Boleto(" " + ITAU.replace(" ", "-") + "\n").numero() == ITAU_NUMERO


def test_moeda_desconhecida_usa_valor_sem_formatacao():
    boleto = Boleto(ZEROS)

    assert boleto.codigo_moeda() == "0"
    assert boleto.moeda() is MOEDA_DESCONHECIDA
    assert boleto.moeda().codigo == "Unknown"
    assert boleto.banco() == "Unknown"
    assert boleto.valor() == "0.00"
    assert boleto.valor_formatado() == "0.00"


@pytest.mark.parametrize(
    "linha, esperado",
    [
        (ZEROS, datetime.date(1997, 10, 7)),
        (FATOR_1, datetime.date(1997, 10, 8)),
    ],
)
def test_vencimento(linha, esperado):
    assert Boleto(linha).vencimento() == esperado


@pytest.mark.parametrize(
    "linha",
    [
        "",
        "123",
        ITAU_NUMERO[:-1],
        ITAU_NUMERO + "0",
        # só zeros com DV geral errado
        "0" * 47,
        "0" * 32 + "2" + "0" * 14,
        # Itaú com o DV geral trocado
        ITAU_NUMERO[:32] + "8" + ITAU_NUMERO[33:],
        # Itaú com o valor adulterado
        ITAU_NUMERO[:-4] + "2981",
        # dígitos que não são ASCII
        "²" * 47,
        "３" * 47,
        "٣" * 47,
        ITAU_NUMERO.translate(FULLWIDTH),
    ],
)
def test_linha_invalida(linha):
    with pytest.raises(LinhaDigitavelInvalida):
        Boleto(linha)


def test_linha_invalida_informa_motivo():
    with pytest.raises(LinhaDigitavelInvalida) as excinfo:
        Boleto("0" * 47)

    assert excinfo.value.numero == "0" * 47
    assert "esperado 1" in excinfo.value.motivo


def test_linha_invalida_por_tamanho_informa_motivo():
    with pytest.raises(LinhaDigitavelInvalida) as excinfo:
        Boleto("1234.5")

    assert "recebido 5" in excinfo.value.motivo


def test_boleto_e_imutavel():
    boleto = Boleto(ITAU)
    with pytest.raises(AttributeError):
        boleto._numero = ZEROS
    assert boleto.numero() == ITAU_NUMERO


def test_str_e_repr():
    boleto = Boleto(ITAU_NUMERO)
    assert str(boleto) == ITAU
    assert repr(boleto) == f"Boleto('{ITAU_NUMERO}')"
    assert len({boleto, Boleto(ITAU)}) == 1


class CodificadorFalso:
    def __init__(self):
        self.recebido = None

    def codificar(self, digitos):
        self.recebido = digitos
        return ["faixas"]


class RenderizadorFalso:
    def __init__(self):
        self.chamadas = []

    def renderizar(self, faixas, alvo):
        self.chamadas.append((faixas, alvo))


def test_renderizar_delega_ao_codificador_e_ao_renderizador():
    codificador = CodificadorFalso()
    renderizador = RenderizadorFalso()

    Boleto(ITAU).renderizar("#codigo", codificador, renderizador)

    assert codificador.recebido == "34199439500000029801090000015710293013280000"
    assert renderizador.chamadas == [(["faixas"], "#codigo")]


def test_renderizar_propaga_erro_do_codificador():
    erro = SimboloInvalido("falhou")

    class CodificadorComErro:
        def codificar(self, digitos):
            raise erro

    with pytest.raises(SimboloInvalido) as excinfo:
        Boleto(ITAU).renderizar("#codigo", CodificadorComErro(), RenderizadorFalso())

    assert excinfo.value is erro


@pytest.mark.parametrize(
    "codigo, esperado",
    [
        ("341", "Itaú"),
        ("001", "Banco do Brasil"),
        ("237", "Bradesco"),
        ("999", "Unknown"),
    ],
)
def test_nome_banco(codigo, esperado):
    assert nome_banco(codigo) == esperado


def test_moeda_por_codigo():
    assert moeda_por_codigo("9") == Moeda("BRL", "R$", ",")
    assert moeda_por_codigo("1") is MOEDA_DESCONHECIDA


def test_numero_guarda_apenas_digitos_ascii():
    boleto = Boleto(ITAU + " ３٣²")

    assert boleto.numero() == ITAU_NUMERO
    assert boleto.numero().isascii()


def test_copia_e_pickle():
    boleto = Boleto(ITAU)

    assert copy.copy(boleto) == boleto
    assert copy.deepcopy(boleto) == boleto
    assert pickle.loads(pickle.dumps(boleto)) == boleto


def test_renderizar_propaga_erro_do_renderizador():
    erro = ErroAlvoRenderizacao("sem destino")

    class RenderizadorComErro:
        def renderizar(self, faixas, alvo):
            raise erro

    with pytest.raises(ErroAlvoRenderizacao) as excinfo:
        Boleto(ITAU).renderizar("#codigo", CodificadorFalso(), RenderizadorComErro())

    assert excinfo.value is erro
