import logging

from flask import Flask, Response, abort, jsonify, redirect, render_template, request, url_for

from boletos import Boleto, LinhaDigitavelInvalida, analisar_linha_digitavel
from boletos.config import Config
from boletos.simbolo import codigo_barras_svg

logging.basicConfig(level=Config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(Config)


@app.route("/")
def index():
    return redirect(url_for("boleto"))


@app.route("/boleto", methods=["GET", "POST"])
def boleto():
    """
    Página para validação da linha digitável de boleto.
    """
    erros = []
    avisos = []
    infos = {}
    linha_digitavel = ""

    if request.method == "POST":
        linha_digitavel = (request.form.get("linha_digitavel") or "").strip()
        erros, avisos, infos = analisar_linha_digitavel(linha_digitavel)

    return render_template(
        "boleto.html",
        erros=erros,
        avisos=avisos,
        infos=infos,
        linha_digitavel=linha_digitavel,
    )


@app.route("/api/boleto/<linha>")
def api_boleto(linha):
    """
    Mesma validação da página, em JSON. 422 quando a linha é recusada.
    """
    erros, avisos, infos = analisar_linha_digitavel(linha)
    status = 422 if erros else 200
    return jsonify(valido=not erros, erros=erros, avisos=avisos, infos=infos), status


@app.route("/boleto/<linha>/codigo-barras.svg")
def codigo_barras(linha):
    try:
        dados = Boleto(linha)
    except LinhaDigitavelInvalida as e:
        logger.info("SVG não gerado: %s", e)
        abort(404)

    return Response(codigo_barras_svg(dados), mimetype="image/svg+xml")


if __name__ == "__main__":
    app.run(debug=Config.FLASK_DEBUG)
