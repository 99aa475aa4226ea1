"""
Autocomplete API Server
Run the Flask REST API server serving one autocomplete field.
Usage:
    python main.py --words words.txt
    python main.py --remote https://example.org/suggest --port 8000
    python main.py --debug
"""

import argparse
import sys
from typing import List

from Autocomplete.Provider.SuggestionProvider import SuggestionProvider
from Autocomplete.Routes.AutocompleteRoute import CreateApp, RegisterField

# Create the Flask app globally so Gunicorn can find it
app = CreateApp()


def read_words(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def build_provider(args):
    if args.remote:
        return SuggestionProvider.InitializeProvider("remote", args.remote)
    if args.words:
        return SuggestionProvider.InitializeProvider("collection", read_words(args.words), match_mode=args.match)
    endpoint = app.config["AUTOCOMPLETE_SETTINGS"].remote_endpoint
    if endpoint:
        return SuggestionProvider.InitializeProvider("remote", endpoint)
    return None


def main():
    """Parse arguments and start the API server."""
    parser = argparse.ArgumentParser(
        description="Autocomplete REST API Server",
        epilog="""
            Examples:
            python main.py --words words.txt                # Prefix matches from a word list
            python main.py --words words.txt --match contains
            python main.py --remote https://host/suggest    # Proxy a remote suggest endpoint
            python main.py --port 8000 --debug
        """
    )
    parser.add_argument('--port', type=int, default=5000, help='Port to run the server on (default: 5000)')
    parser.add_argument('--host', default='0.0.0.0', help='Host to bind to (default: 0.0.0.0)')
    parser.add_argument('--debug', action='store_true', help='Run in debug mode')
    parser.add_argument('--field', default='default', help='Name of the served field (default: default)')
    parser.add_argument('--words', help='File with one suggestion per line')
    parser.add_argument('--match', choices=['begins', 'contains'], default='begins', help='Match mode for --words')
    parser.add_argument('--remote', help='Remote suggest endpoint URL')

    args = parser.parse_args()

    try:
        provider = build_provider(args)
    except OSError as e:
        print(f"\nCannot read word list: {e}")
        sys.exit(1)
    extension = RegisterField(app, args.field, provider)

    print(f"\n{'='*60}")
    print("Autocomplete API Server")
    print(f"{'='*60}")
    print(f"Server starting on http://{args.host}:{args.port}")
    print(f"Debug mode: {args.debug}")
    print(f"Field: {args.field} (limit={extension.suggestion_limit}, provider={'none' if provider is None else type(provider).__name__})")
    print(f"\nEndpoints:")
    print(f"  GET  http://{args.host}:{args.port}/api/health-check")
    print(f"  GET  http://{args.host}:{args.port}/api/fields/{args.field}/state")
    print(f"  POST http://{args.host}:{args.port}/api/fields/{args.field}/suggestions")
    print(f"{'='*60}\n")

    try:
        app.run(
            host=args.host,
            port=args.port,
            debug=args.debug,
            use_reloader=args.debug
        )
    except KeyboardInterrupt:
        print("\n\nServer stopped by user")
        sys.exit(0)
    except Exception as e:
        print(f"\nError starting server: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
