"""
Media Gateway Service.

Entry point for the HTTP gateway in front of the transcription,
video-generation and artifact storage services.
"""

import os

import uvicorn
from ddtrace import patch_all

from application import create_app

patch_all()

app = create_app()


def main():
    """Starts the HTTP server."""
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3001")))


if __name__ == "__main__":
    main()
