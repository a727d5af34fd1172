"""Image inspection helpers."""

from io import BytesIO

from PIL import Image, UnidentifiedImageError


def image_dimensions(content: bytes) -> tuple[int, int] | None:
    """Pixel width and height of a raster image, None if Pillow can't read it.

    SVG and other vector formats return None.
    """
    try:
        with Image.open(BytesIO(content)) as image:
            return image.size
    except (UnidentifiedImageError, OSError):
        return None
