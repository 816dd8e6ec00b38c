from PIL import Image, UnidentifiedImageError

from intentglyph.errors import AssetLoadError


def load_image(path: str, width: int, height: int) -> Image.Image:
    """Load ``path`` as RGBA and stretch it to exactly ``width`` x ``height``.

    Paths are resolved relative to the working directory. Nothing is cached:
    repeated references are decoded again.

    Raises:
        AssetLoadError: If the file is missing, unreadable, not an image, or
            declares more pixels than Pillow is willing to decode.
    """
    try:
        with Image.open(path) as im:
            return im.convert("RGBA").resize((width, height))
    except (
        OSError,
        UnidentifiedImageError,
        ValueError,
        Image.DecompressionBombError,
    ) as e:
        raise AssetLoadError(path, str(e)) from e
