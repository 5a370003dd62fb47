"""
Pytest configuration for local imports and in-memory image fixtures.
"""

# Standard Library
import io
import os
import sys

# PIP3 modules
import PIL.Image
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

RED = (220, 20, 20)
BLUE = (20, 20, 220)


#============================================
def encode_split_image(width: int, height: int, image_format: str) -> bytes:
	"""
	Encode an image whose top half is red and bottom half is blue.

	Args:
		width: Pixel width.
		height: Pixel height.
		image_format: Pillow format name, "PNG" or "JPEG".

	Returns:
		Encoded image bytes.
	"""
	image = PIL.Image.new("RGB", (width, height), BLUE)
	image.paste(RED, (0, 0, width, height // 2))
	buffer = io.BytesIO()
	image.save(buffer, format=image_format)
	return buffer.getvalue()


@pytest.fixture
def make_upload():
	"""
	Factory fixture building Upload records with real image payloads.
	"""
	import storysheet_imposer.config

	def factory(
		name: str = "photo.png",
		width: int = 100,
		height: int = 200,
		content_type: str = "image/png",
	) -> storysheet_imposer.config.Upload:
		image_format = "JPEG" if content_type == "image/jpeg" else "PNG"
		data = encode_split_image(width, height, image_format)
		return storysheet_imposer.config.Upload(name=name, content_type=content_type, data=data)

	return factory


@pytest.fixture
def split_image_bytes():
	"""
	Fixture exposing the split-color image encoder.
	"""
	return encode_split_image
