"""
Search Suggest API Server
Run the Flask REST API server in front of the search service's suggest endpoint.
Usage:
    python main.py [--host HOST] [--port PORT] [--debug]
"""

import argparse
from SearchSuggest.Routes.SuggestRoute import CreateApp

app = CreateApp()

def main():
    parser = argparse.ArgumentParser(description="Search Suggest REST API Server")
    parser.add_argument('--port', type=int, default=5000, help='Port to run the server on (default: 5000)')
    parser.add_argument('--host', default='0.0.0.0', help='Host to bind to (default: 0.0.0.0)')
    parser.add_argument('--debug', action='store_true', help='Run in debug mode')
    args = parser.parse_args()

    app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=args.debug)


if __name__ == '__main__':
    main()
