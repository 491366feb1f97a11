import os
from dotenv import load_dotenv

# Carrega as variáveis do arquivo .env
load_dotenv()


def _bool(valor):
    return (valor or "").strip().lower() in ("1", "true", "sim", "yes", "on")


class Config:
    # --- LOG ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # --- CÓDIGO DE BARRAS (SVG, medidas em mm) ---
    SVG_MODULE_WIDTH = float(os.getenv("SVG_MODULE_WIDTH", "0.25"))
    SVG_MODULE_HEIGHT = float(os.getenv("SVG_MODULE_HEIGHT", "13.0"))
    SVG_QUIET_ZONE = float(os.getenv("SVG_QUIET_ZONE", "2.5"))

    # --- FLASK ---
    FLASK_DEBUG = _bool(os.getenv("FLASK_DEBUG"))
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")
