#!/usr/bin/env python3
"""
Development server for the Roster demo.
This bypasses Gunicorn for local testing.
"""

import os

os.environ.setdefault('FLASK_DEBUG', '1')

from roster import create_app

def run_dev_server():
    """Run the Flask development server."""
    app = create_app()

    print("🧪 Starting Roster Development Server")
    print("=" * 50)
    print("NOTE: This is for testing only. Production uses Gunicorn.")
    print("")
    print("Access the application at: http://localhost:5001")
    print("")

    app.run(
        host='0.0.0.0',
        port=5001,
        debug=True,
        use_reloader=False
    )

if __name__ == '__main__':
    run_dev_server()
