"""
Flask REST API for autocomplete text fields

This module exposes the registered autocomplete fields over HTTP so a client
widget can query suggestions as the user types. Each query carries an opaque
request id which is echoed back untouched, letting the client match responses
that arrive out of order.

Endpoints:
    GET  /api/health-check                          - Health check
    GET  /api/fields                                - Registered field names
    GET  /api/fields/<field>/state                  - Client configuration of a field
    POST /api/fields/<field>/suggestions            - Query suggestions for a term
    GET  /api/fields/<field>/resources/<id>/<key>   - Resolve an icon key of a response
"""

from typing import Any, Optional
from flask import Flask, request, jsonify, redirect
from flask_cors import CORS

from Autocomplete.Business.AutocompleteExtension import AutocompleteExtension
from Autocomplete.Business.ExtensionRegistry import ExtensionRegistry
from Autocomplete.Exception.AutocompleteError import AutocompleteError, ProviderError
from Autocomplete.Routes.validators import validate_query_payload, map_response
from Autocomplete.Utility.env import load_env_file
from Autocomplete.Utility.settings import load_settings

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        config: Optional settings overrides, e.g. {"suggestion_limit": 5}
        registry: Optional ExtensionRegistry holding the served fields
    Returns:
        Flask application instance
"""
def CreateApp(config=None, registry: Optional[ExtensionRegistry] = None):

    app = Flask(__name__)
    # Load environment variables from .env
    load_env_file()
    app.config["AUTOCOMPLETE_SETTINGS"] = load_settings(config)
    app.config["AUTOCOMPLETE_REGISTRY"] = registry if registry is not None else ExtensionRegistry()
    # Enable CORS for all routes
    CORS(app)
    RegisterRoutes(app)
    return app

"""Create an extension for `name` configured from the app settings and serve it.
    Returns:
        The registered AutocompleteExtension
"""
def RegisterField(app: Flask, name: str, provider: Any = None) -> AutocompleteExtension:
    extension = AutocompleteExtension(name, suggestion_provider=provider)
    app.config["AUTOCOMPLETE_SETTINGS"].apply(extension)
    logger.info("Registered autocomplete field '%s' (limit=%d)", name, extension.suggestion_limit)
    return app.config["AUTOCOMPLETE_REGISTRY"].register(extension)

"""Register all API routes.
    Args:
        app: Flask application instance
"""
def RegisterRoutes(app: Flask) -> None:

    def registry() -> ExtensionRegistry:
        return app.config["AUTOCOMPLETE_REGISTRY"]

    @app.errorhandler(AutocompleteError)
    def AutocompleteFailure(e: AutocompleteError):
        if isinstance(e, ProviderError):
            logger.error("Suggestion provider error: %s", e.message)
            return jsonify({"error": "provider_error", "message": e.message}), e.status_code
        if e.status_code == 404:
            return jsonify({"error": "not_found", "message": e.message}), 404
        logger.error("Autocomplete error: %s", e.message)
        return jsonify({"error": "autocomplete_error", "message": e.message}), e.status_code

    """Health check endpoint.
        Returns:
            JSON response with status
    """
    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "Autocomplete API is running",
            "fields": len(registry().names())
        }), 200

    @app.route('/api/fields', methods=['GET'])
    def ListFields():
        return jsonify({"fields": registry().names()}), 200

    @app.route('/api/fields/<field>/state', methods=['GET'])
    def FieldState(field):
        extension = registry().get(field)
        return jsonify({"field": field, "state": extension.GetState()}), 200

    """Query suggestions for the given search term.
        Request JSON body:
        {
            "request_id": 42,      # Required, any JSON value, echoed back verbatim
            "term": "ca"           # Optional, default ""
        }
        Returns:
            JSON response with the request id, the encoded suggestions and the icon resources
    """
    @app.route('/api/fields/<field>/suggestions', methods=['POST'])
    def QuerySuggestionsEndpoint(field):
        extension = registry().get(field)
        data = request.get_json(silent=True)
        try:
            request_id, term = validate_query_payload(data)
        except ValueError as e:
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

        delivered = {}

        def set_suggestions(echoed_id, records):
            delivered["response"] = (echoed_id, records)

        try:
            encoded = extension.ServerQuerySuggestions(request_id, term, set_suggestions)
        except AutocompleteError:
            raise
        except Exception as e:
            logger.exception("Error querying suggestions for field '%s': %s", field, e)
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500

        echoed_id, records = delivered["response"]
        return jsonify(map_response(echoed_id, records, encoded.resource_urls())), 200

    """Resolve an icon key issued in the response to <request_id>.
        Non-string request ids are addressed by their compact JSON form, e.g. 7 or {"seq":7}.
    """
    @app.route('/api/fields/<field>/resources/<request_id>/<key>', methods=['GET'])
    def ResolveResource(field, request_id, key):
        resource = registry().get(field).GetResource(request_id, key)
        if resource is None:
            return jsonify({"error": "not_found", "message": f"Resource not found: {key} (request {request_id})"}), 404
        return redirect(resource.url, code=302)

    """Handle 404 errors.
        Args:
            error: The error object
        Returns:
            JSON response with error
    """
    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or POST /api/fields/<field>/suggestions"
        }), 404

    """Handle 405 errors.
        Args:
            error: The error object
        Returns:
            JSON response with error
    """
    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
