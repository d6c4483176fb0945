"""
Image check - decode the written file and look at its header.

File existence says a renderer wrote something. This says it wrote a
non-empty image of the requested size. Only used when asked for.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


@dataclass
class ImageCheck:
    """Header facts about a captured image"""
    width: int
    height: int
    size_bytes: int
    format: Optional[str] = None


def inspect_image(path: str) -> ImageCheck:
    """
    Read size and dimensions of an image file.

    Raises:
        ValueError: the file is empty or not a decodable image
    """
    size_bytes = os.path.getsize(path)
    if size_bytes == 0:
        raise ValueError(f"{path} is empty")
    try:
        with Image.open(path) as img:
            img.verify()
            width, height = img.size
            fmt = img.format
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ValueError(f"{path} is not a readable image: {e}")
    return ImageCheck(width=width, height=height, size_bytes=size_bytes, format=fmt)


def check_image(path: str, width: int, height: int) -> tuple[Optional[ImageCheck], Optional[str]]:
    """
    Check that path holds a non-empty image of width x height pixels.

    Returns:
        (check, problem) - problem is None when the image looks right
    """
    try:
        check = inspect_image(path)
    except ValueError as e:
        logger.debug(f"Image check failed: {e}")
        return None, str(e)

    if (check.width, check.height) != (width, height):
        problem = f"image is {check.width}x{check.height}, expected {width}x{height}"
        logger.debug(f"Image check failed: {problem}")
        return check, problem
    return check, None
