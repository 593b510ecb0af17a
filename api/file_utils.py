"""
File Utilities for the Recitation API
Handles temporary paths for uploaded recordings.
"""

import os
import uuid
from pathlib import Path

from recitation.config import UPLOAD_DIR


def get_upload_dir() -> Path:
    """Return the upload directory, creating it if needed."""
    upload_dir = Path(UPLOAD_DIR)
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


def get_temp_filepath(prefix: str = 'temp', extension: str = 'tmp') -> str:
    """
    Generate temporary file path with unique identifier.

    Args:
        prefix: Prefix for temp file (default: temp)
        extension: File extension (default: tmp)

    Returns:
        Absolute path: /path/to/uploads/{prefix}_{uuid}.{ext}

    Example:
        >>> get_temp_filepath('recording', 'wav')
        '/srv/recitation/uploads/recording_a3b4c5d6.wav'
    """
    unique_id = str(uuid.uuid4())[:8]
    filename = f"{prefix}_{unique_id}.{extension}"
    return str(get_upload_dir() / filename)


def remove_quietly(path: str) -> None:
    """Delete a temp file if it still exists."""
    try:
        if os.path.exists(path):
            os.remove(path)
    except OSError as e:
        print(f"Could not remove temp file {path}: {e}")
