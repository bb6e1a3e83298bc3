"""
Storage of uploaded project photos.

Photos are written under ``<WEB_ROOT>/<IMAGES_DIR>`` and referenced from the
database by their path relative to the web root, so the static mount can serve
them directly.
"""

import logging
import re
import shutil
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Optional

from app.core.config import settings

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")
DEFAULT_FILENAME = "upload"
MAX_COLLISION_ATTEMPTS = 1000


def sanitize_filename(filename: Optional[str]) -> str:
    """
    Reduce a client-supplied filename to a safe basename.

    Directory components (either separator) are dropped, runs of characters
    outside ``[A-Za-z0-9._-]`` become a single underscore and leading dots are
    removed so the result can never escape the images directory or be hidden.
    """
    if not filename:
        return DEFAULT_FILENAME
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    name = _UNSAFE_CHARS.sub("_", name).lstrip(".")
    return name or DEFAULT_FILENAME


def _candidate_names(filename: str):
    yield filename
    stem, dot, suffix = filename.partition(".")
    for n in range(1, MAX_COLLISION_ATTEMPTS):
        yield f"{stem}-{n}{dot}{suffix}"


def save_project_pic(source: BinaryIO, original_filename: Optional[str], dest_dir: Optional[Path] = None) -> str:
    """
    Write an uploaded photo and return its link relative to the web root.

    Args:
        source: Readable binary stream with the upload content
        original_filename: Filename sent by the client
        dest_dir: Directory to write into (defaults to the configured images dir)

    Returns:
        Link such as ``content/images/kitchen.jpg``

    Raises:
        OSError: If the file cannot be written
    """
    if dest_dir is None:
        dest_dir = settings.images_dir
    dest_dir.mkdir(parents=True, exist_ok=True)

    filename = sanitize_filename(original_filename)
    for candidate in _candidate_names(filename):
        dest = dest_dir / candidate
        try:
            # exclusive create: an existing photo is never overwritten
            with open(dest, "xb") as out:
                shutil.copyfileobj(source, out)
        except FileExistsError:
            continue
        except Exception:
            dest.unlink(missing_ok=True)
            raise
        logger.info(f"Saved project photo: {dest}")
        return str(PurePosixPath(settings.IMAGES_DIR) / candidate)

    raise FileExistsError(f"No free filename left for {filename} in {dest_dir}")


def delete_project_pic(link: Optional[str]) -> bool:
    """
    Delete the file behind a photo link.

    Returns:
        True if deletion was successful or file didn't exist, False on error
    """
    if not link:
        return True

    try:
        pic_file = settings.web_root / link
        if pic_file.exists():
            pic_file.unlink()
            logger.info(f"Deleted project photo: {pic_file}")
        return True
    except OSError as e:
        logger.error(f"Failed to delete project photo {link}: {e}")
        return False
