"""Image reader for parcel images.

Only the native size of the image is needed by the split engine, so the
reader opens the file lazily and never decodes pixel data.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from parcelsplit.domain import Extent
from parcelsplit.exceptions import ImageLoadError


class ImageReader:
    """Reads the native extent of a raster image.

    Example:
        reader = ImageReader(Path("parcel.png"))
        reader.load()
        print(reader.extent)
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._extent: Extent | None = None
        self._format: str | None = None

    def load(self) -> None:
        """Read the image header.

        Raises:
            ImageLoadError: If the file is missing or is not a readable image
        """
        if not self._image_path.exists():
            raise ImageLoadError(str(self._image_path), "file not found")
        if not self._image_path.is_file():
            raise ImageLoadError(str(self._image_path), "not a file")

        try:
            with Image.open(self._image_path) as image:
                width, height = image.size
                self._format = image.format
        except UnidentifiedImageError as e:
            raise ImageLoadError(str(self._image_path), "not a recognized image format") from e
        except OSError as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

        if width <= 0 or height <= 0:
            raise ImageLoadError(str(self._image_path), f"empty image ({width}x{height})")

        self._extent = Extent(float(width), float(height))

    @property
    def extent(self) -> Extent:
        """Return native image size.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._extent is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._extent

    @property
    def format(self) -> str:
        """Return image format name reported by Pillow (e.g. 'PNG').

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._extent is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._format or "unknown"


def read_image_extent(image_path: Path) -> Extent:
    """Convenience wrapper returning the native size of an image."""
    reader = ImageReader(image_path)
    reader.load()
    return reader.extent
