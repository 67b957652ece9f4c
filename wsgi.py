"""WSGI entrypoint for production deployment.

Usage with Gunicorn:
    gunicorn -w 4 -b 0.0.0.0:5000 wsgi:app

Environment variables:
    SU_DATA_ROOT=<dir>        Directory holding schemas/ and data/
    SU_SCHEMA_INDEX=<path>    Schema index file (default: $SU_DATA_ROOT/schemas/index.json)
"""

from api import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
