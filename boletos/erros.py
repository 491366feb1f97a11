"""Exceções do validador de boletos."""


class ErroBoleto(ValueError):
    """Erro base de todo o pacote."""


class EntradaInvalida(ErroBoleto):
    """
    Entrada fora do contrato de uma função (tamanho errado, caractere
    não numérico, sequência vazia).
    """


class LinhaDigitavelInvalida(ErroBoleto):
    """
    Linha digitável recusada na construção do boleto: tamanho diferente de
    47 dígitos ou dígito verificador geral (módulo 11) que não confere.
    """

    def __init__(self, numero, motivo):
        self.numero = numero
        self.motivo = motivo
        super().__init__(f"Linha digitável inválida: {motivo}")


class SimboloInvalido(ErroBoleto):
    """Conteúdo que não pode ser codificado como código de barras."""


class ErroAlvoRenderizacao(ErroBoleto):
    """Destino do desenho do código de barras não pode ser usado."""
