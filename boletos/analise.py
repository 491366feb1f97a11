"""Relatório de validação da linha digitável, usado pelo console e pela página web."""

from .boleto import Boleto
from .campos import TAMANHO_LINHA_DIGITAVEL, verificar_digitos_campos
from .digitos import limpar_numero
from .erros import LinhaDigitavelInvalida


def analisar_linha_digitavel(linha: str):
    """
    Valida uma linha digitável de boleto bancário (47 dígitos, padrão cobrança).

    Retorna (erros, avisos, infos), onde:
      - erros: motivos pelos quais a linha foi recusada (tamanho, DV geral)
      - avisos: DVs dos campos 1, 2 e 3 que não conferem (não impedem a leitura)
      - infos: dicionário com dados extraídos (banco, valor, vencimento, código de barras, etc.)
    """
    erros = []
    avisos = []
    infos = {}

    numeros = limpar_numero(linha)
    if len(numeros) == TAMANHO_LINHA_DIGITAVEL:
        avisos = verificar_digitos_campos(numeros)

    try:
        boleto = Boleto(numeros)
    except LinhaDigitavelInvalida as e:
        erros.append(f"Linha digitável inválida: {e.motivo}.")
        return erros, avisos, infos

    moeda = boleto.moeda()
    infos["numero"] = boleto.numero()
    infos["linha_digitavel"] = boleto.linha_formatada()
    infos["codigo_barras"] = boleto.codigo_barras()
    infos["codigo_banco"] = boleto.codigo_banco()
    infos["banco"] = boleto.banco()
    infos["moeda"] = moeda.codigo
    infos["fator_vencimento"] = boleto.fator_vencimento()
    infos["vencimento"] = boleto.vencimento().strftime("%d/%m/%Y")
    infos["valor_centavos"] = boleto.valor_centavos()
    infos["valor"] = boleto.valor()
    infos["valor_formatado"] = boleto.valor_formatado()
    infos["campo_livre"] = boleto.campo_livre()

    return erros, avisos, infos


def analisar_lote(linhas):
    """
    Aplica analisar_linha_digitavel a cada linha não vazia.
    Retorna lista de dicionários {"linha", "erros", "avisos", "infos"}.
    """
    resultados = []
    for linha in linhas:
        if not linha.strip():
            continue
        erros, avisos, infos = analisar_linha_digitavel(linha)
        resultados.append({
            "linha": linha.strip(),
            "erros": erros,
            "avisos": avisos,
            "infos": infos,
        })
    return resultados
