"""Ponto de entrada ``validador_boleto``.

Este arquivo reexporta toda a API pública definida no pacote ``boletos``
e mantém o ponto de entrada de linha de comando.
"""

from boletos import *  # noqa: F401,F403
from boletos import __all__ as _BOLETOS_ALL
from boletos.cli import main

__all__ = list(_BOLETOS_ALL) + ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
