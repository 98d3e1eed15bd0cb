"""
Fixed runtime settings for the TP REST API service.

The service reads no environment variables or CLI flags; everything it needs
is defined here as module constants.
"""

import os

PORT = 3000
HOST = "0.0.0.0"

DATA_DIR_NAME = "data"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_data_dir() -> str:
    """data/ under the current working directory, as seen at start-up."""
    return os.path.join(os.getcwd(), DATA_DIR_NAME)


DATA_DIR = resolve_data_dir()
