"""Utilitario de linha de comando para o validador de boletos."""

import argparse
import logging

from .analise import analisar_lote
from .boleto import Boleto
from .config import Config
from .erros import ErroAlvoRenderizacao
from .simbolo import salvar_codigo_barras_svg


def _imprimir_resultado(resultado):
    print(f"\n=== {resultado['linha']} ===")

    if resultado["erros"]:
        print("Erros:")
        for erro in resultado["erros"]:
            print("   -", erro)
    else:
        print("OK. Linha digitavel valida.")

    if resultado["avisos"]:
        print("Avisos:")
        for aviso in resultado["avisos"]:
            print("   -", aviso)

    infos = resultado["infos"]
    if infos:
        print(f"Linha digitavel: {infos['linha_digitavel']}")
        print(f"Codigo de barras: {infos['codigo_barras']}")
        print(f"Banco: {infos['codigo_banco']} - {infos['banco']}")
        print(f"Moeda: {infos['moeda']}")
        print(f"Vencimento: {infos['vencimento']} (fator {infos['fator_vencimento']:04d})")
        print(f"Valor: {infos['valor_formatado']}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="validador-boleto",
        description="Valida linhas digitaveis de boletos bancarios (47 digitos).",
    )
    parser.add_argument("linhas", nargs="*", help="linha digitavel, com ou sem mascara")
    parser.add_argument(
        "--svg",
        metavar="CAMINHO",
        help="grava o codigo de barras em SVG (apenas com uma linha)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=Config.LOG_LEVEL)

    linhas = args.linhas
    if not linhas:
        print("=== Validador de linha digitavel de boleto ===")
        try:
            linhas = [input("Informe a linha digitavel: ").strip()]
        except EOFError:
            print("\nErro: nenhuma linha informada.")
            return 1

    resultados = analisar_lote(linhas)
    if not resultados:
        print("Erro: nenhuma linha informada.")
        return 1

    for resultado in resultados:
        _imprimir_resultado(resultado)

    if args.svg:
        if len(resultados) != 1:
            print("\nErro: --svg aceita apenas uma linha por vez.")
            return 1
        if resultados[0]["erros"]:
            print("\nCodigo de barras nao gerado: linha invalida.")
            return 1
        try:
            salvar_codigo_barras_svg(Boleto(resultados[0]["linha"]), args.svg)
        except ErroAlvoRenderizacao as e:
            print(f"\nErro: {e}")
            return 1
        print(f"\nCodigo de barras gravado em {args.svg}")

    return 0 if all(not r["erros"] for r in resultados) else 1


if __name__ == "__main__":
    raise SystemExit(main())
