"""
Source image intake and embedding helpers.
"""

# Standard Library
import io
import mimetypes
import pathlib

# PIP3 modules
import PIL.Image
import reportlab.lib.utils

# local repo modules
import storysheet_imposer as ssi
import storysheet_imposer.config
import storysheet_imposer.errors


SourceImage = ssi.config.SourceImage
Upload = ssi.config.Upload
RenderFailure = ssi.errors.RenderFailure

SUPPORTED_CONTENT_TYPES = ssi.config.SUPPORTED_CONTENT_TYPES


#============================================
def normalize_content_type(content_type: str) -> str:
	"""
	Strip parameters and case from a content type.

	Args:
		content_type: Raw content type such as "image/PNG; q=1".

	Returns:
		Normalized content type.
	"""
	if not content_type:
		return ""
	return content_type.split(";", 1)[0].strip().lower()


#============================================
def is_supported(content_type: str) -> bool:
	return normalize_content_type(content_type) in SUPPORTED_CONTENT_TYPES


#============================================
def build_source_image(upload: Upload) -> SourceImage:
	"""
	Decode an upload far enough to know its pixel size.

	Unsupported formats are kept with a zero size so the composer can skip
	them; supported payloads that fail to decode raise RenderFailure.

	Args:
		upload: Uploaded payload.

	Returns:
		SourceImage.
	"""
	content_type = normalize_content_type(upload.content_type)
	if content_type not in SUPPORTED_CONTENT_TYPES:
		return SourceImage(
			name=upload.name,
			content_type=content_type,
			data=upload.data,
			width=0,
			height=0,
		)
	try:
		with PIL.Image.open(io.BytesIO(upload.data)) as image:
			image.load()
			width, height = image.size
	except (OSError, SyntaxError, ValueError) as error:
		raise RenderFailure(f"Could not decode image {upload.name}: {error}") from error
	return SourceImage(
		name=upload.name,
		content_type=content_type,
		data=upload.data,
		width=width,
		height=height,
	)


#============================================
def open_image_reader(source: SourceImage) -> reportlab.lib.utils.ImageReader:
	"""
	Wrap image bytes for drawing on a ReportLab canvas.

	Args:
		source: Source image.

	Returns:
		ImageReader instance.
	"""
	return reportlab.lib.utils.ImageReader(io.BytesIO(source.data))


#============================================
def guess_content_type(path: pathlib.Path) -> str:
	content_type, _encoding = mimetypes.guess_type(path.name)
	return content_type or "application/octet-stream"


#============================================
def load_image_path(path: pathlib.Path) -> Upload:
	"""
	Read an image file from disk as an upload.

	Args:
		path: Image path.

	Returns:
		Upload with the content type guessed from the extension.
	"""
	return Upload(
		name=path.name,
		content_type=guess_content_type(path),
		data=path.read_bytes(),
	)
