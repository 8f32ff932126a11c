"""
Flask REST API for search suggestions

This module exposes the suggest builder over HTTP so UI applications can
request "did you mean" and completion suggestions without talking to the
search service directly.

Endpoints:
    POST /api/suggest      - Run one or more suggesters
    GET  /api/health-check - Health check
"""

from flask import Flask, request, jsonify
from flask_cors import CORS

from SearchSuggest.Utility.env import load_env_file
from SearchSuggest.Client.SearchClient import SearchClient
from SearchSuggest.Exception.SearchError import DecodeError, ResponseStatusError, TransportError
from SearchSuggest.Suggesters.SuggesterProvider import build_suggester
from SearchSuggest.Routes.validators import validate_suggest_payload, map_suggestions

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        config: Optional configuration dictionary; "SEARCH_CLIENT" overrides
                the client used for every request
    Returns:
        Flask application instance
"""
def CreateApp(config=None):

    app = Flask(__name__)
    if config:
        app.config.update(config)
    # Load environment variables from .env
    load_env_file()
    CORS(app)
    RegisterRoutes(app)
    return app

"""Register all API routes.
    Args:
        app: Flask application instance
"""
def RegisterRoutes(app: Flask) -> None:

    def GetClient() -> SearchClient:
        return app.config.get("SEARCH_CLIENT") or SearchClient()

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "Search suggest API is running"
        }), 200

    """Run suggesters against the search service.
        Request JSON body:
        {
            "indices": ["articles"],          # Optional
            "types": [],                      # Optional
            "routing": "user-1",              # Optional
            "preference": "_local",           # Optional
            "pretty": false,                  # Optional
            "debug": false,                   # Optional, logs request/response dumps
            "suggesters": [                   # Required
                {"kind": "term", "name": "fix", "text": "serch", "field": "body"}
            ]
        }
        Returns:
            JSON response with suggestions keyed by suggester name, or error
    """
    @app.route('/api/suggest', methods=['POST'])
    def SuggestEndpoint():
        data = request.get_json(silent=True) or {}
        try:
            params = validate_suggest_payload(data)
            suggesters = [build_suggester(s) for s in params["suggesters"]]
        except ValueError as e:
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

        service = (GetClient().suggest()
                   .add_indices(*params["indices"])
                   .add_types(*params["types"])
                   .set_routing(params["routing"])
                   .set_preference(params["preference"])
                   .set_pretty(params["pretty"])
                   .set_debug(params["debug"]))
        for suggester in suggesters:
            service.add_suggester(suggester)

        try:
            result = service.execute()
        except ResponseStatusError as e:
            logger.error("Search API error (%s): %s", e.status_code, e.message)
            # 1xx/3xx upstream answers map to 502
            status = e.status_code if e.status_code >= 400 else 502
            return jsonify({"error": "search_error", "message": e.message}), status
        except TransportError as e:
            logger.error("Search API unreachable: %s", e.message)
            return jsonify({"error": "transport_error", "message": e.message}), 502
        except DecodeError as e:
            logger.error("Invalid suggest response: %s", e.message)
            return jsonify({"error": "decode_error", "message": e.message}), 502

        return jsonify({
            "success": True,
            "suggestions": map_suggestions(result),
        }), 200

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or POST /api/suggest"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
