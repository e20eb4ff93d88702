#!/usr/bin/env python3
"""Entry point: serve the manual trigger endpoints on PORT."""

import sys
import os

sys.path.insert(0, os.path.dirname(__file__))

import config
from app.web import create_app

if __name__ == "__main__":
    app = create_app()
    print(f"Server running on port {config.PORT}")
    app.run(host="0.0.0.0", port=config.PORT)
