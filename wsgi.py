"""WSGI entry point for the net worth planner application."""

import os
import sys

from planner import create_app

app = create_app()

if __name__ == "__main__":
    # Get port from environment variable or command line argument
    port = 5000  # default

    # Check for PORT environment variable (used by Render, Heroku, etc.)
    if "PORT" in os.environ:
        port = int(os.environ["PORT"])

    # Check for --port command line argument
    if len(sys.argv) > 2 and sys.argv[1] == "--port":
        port = int(sys.argv[2])

    debug = app.config["DEBUG"]
    app.run(debug=debug, host="0.0.0.0", port=port)
