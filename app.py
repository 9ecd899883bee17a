import logging

from flask import Flask, request, jsonify

from constants import DOCS_FILE, NOISE_WORDS_FILE, LOG_FORMAT, LOG_DATE_FORMAT
from index import SearchEngine


def create_app(engine=None):
    app = Flask(__name__)
    app.config["ENGINE"] = engine if engine is not None else SearchEngine()

    # Index summary
    @app.route('/')
    def index():
        return jsonify(app.config["ENGINE"].stats())

    # Endpoint to handle search
    @app.route('/search')
    def search():
        kw1 = request.args.get('kw1', '')
        kw2 = request.args.get('kw2', '')
        if not kw1.strip() or not kw2.strip():
            return jsonify({"error": "kw1 and kw2 are required"}), 400
        return jsonify(app.config["ENGINE"].top5_search(kw1, kw2))

    # Endpoint for autocomplete
    @app.route('/autocomplete')
    def autocomplete():
        term = request.args.get('term', '')
        return jsonify(app.config["ENGINE"].complete(term))

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    create_app(SearchEngine().make_index(DOCS_FILE, NOISE_WORDS_FILE)).run()
