"""
PDF serialization of composed documents.
"""

# Standard Library
import io

# PIP3 modules
import pypdf
import reportlab.lib.utils
import reportlab.pdfgen.canvas

# local repo modules
import storysheet_imposer as ssi
import storysheet_imposer.config
import storysheet_imposer.geometry
import storysheet_imposer.images


ImageDraw = ssi.config.ImageDraw
TextDraw = ssi.config.TextDraw
PageRecord = ssi.config.PageRecord
GeneratedDocument = ssi.config.GeneratedDocument

BORDER_LINE_WIDTH = ssi.config.BORDER_LINE_WIDTH
BORDER_GRAY = ssi.config.BORDER_GRAY
CAPTION_BACKGROUND_GRAY = ssi.config.CAPTION_BACKGROUND_GRAY


#============================================
def draw_image(
	pdf: reportlab.pdfgen.canvas.Canvas,
	draw: ImageDraw,
	image_reader: reportlab.lib.utils.ImageReader,
) -> None:
	"""
	Draw a placed image, flipped in place when its panel is rotated.

	Args:
		pdf: ReportLab canvas.
		draw: Image placement.
		image_reader: ImageReader for the source bytes.
	"""
	mask = None
	if draw.image.content_type == "image/png":
		mask = "auto"
	pdf.saveState()
	if draw.rotated180:
		pdf.transform(*ssi.geometry.compute_rotation_matrix(draw.pivot[0], draw.pivot[1]))
	pdf.drawImage(
		image_reader,
		draw.x,
		draw.y,
		width=draw.width,
		height=draw.height,
		mask=mask,
		preserveAspectRatio=False,
		anchor="sw",
	)
	pdf.restoreState()


#============================================
def draw_text(pdf: reportlab.pdfgen.canvas.Canvas, draw: TextDraw) -> None:
	"""
	Draw a single text line with an optional background strip.

	Args:
		pdf: ReportLab canvas.
		draw: Text placement.
	"""
	pdf.saveState()
	if draw.rotated180:
		pdf.transform(*ssi.geometry.compute_rotation_matrix(draw.pivot[0], draw.pivot[1]))
	if draw.background is not None:
		x0, y0, x1, y1 = draw.background
		pdf.setFillGray(CAPTION_BACKGROUND_GRAY)
		pdf.rect(x0, y0, x1 - x0, y1 - y0, stroke=0, fill=1)
	pdf.setFillGray(0.0)
	pdf.setFont(draw.font_name, draw.font_size)
	pdf.drawString(draw.x, draw.baseline_y, draw.text)
	pdf.restoreState()


#============================================
def draw_panel_borders(
	pdf: reportlab.pdfgen.canvas.Canvas,
	borders: list[tuple[float, float, float, float]],
) -> None:
	"""
	Stroke thin panel outlines on the current page.

	Args:
		pdf: ReportLab canvas.
		borders: Rectangles as (x, y, width, height).
	"""
	if not borders:
		return
	pdf.saveState()
	pdf.setLineWidth(BORDER_LINE_WIDTH)
	pdf.setStrokeGray(BORDER_GRAY)
	for x, y, width, height in borders:
		pdf.rect(x, y, width, height, stroke=1, fill=0)
	pdf.restoreState()


#============================================
def draw_page(pdf: reportlab.pdfgen.canvas.Canvas, page: PageRecord) -> None:
	pdf.setPageSize((page.width, page.height))
	for draw in page.images:
		draw_image(pdf, draw, ssi.images.open_image_reader(draw.image))
	for draw in page.texts:
		draw_text(pdf, draw)
	draw_panel_borders(pdf, page.borders)
	pdf.showPage()


#============================================
def render_document(document: GeneratedDocument) -> bytes:
	"""
	Serialize a composed document to PDF bytes.

	The canvas runs in invariant mode so identical input yields identical
	bytes.

	Args:
		document: Composed document.

	Returns:
		PDF bytes.
	"""
	buffer = io.BytesIO()
	first_page = document.pages[0]
	pdf = reportlab.pdfgen.canvas.Canvas(
		buffer,
		pagesize=(first_page.width, first_page.height),
		invariant=1,
	)
	for page in document.pages:
		draw_page(pdf, page)
	pdf.save()
	return buffer.getvalue()


#============================================
def count_pdf_pages(data: bytes) -> int:
	"""
	Count pages in serialized PDF bytes.

	Args:
		data: PDF bytes.

	Returns:
		Page count.
	"""
	reader = pypdf.PdfReader(io.BytesIO(data))
	return len(reader.pages)
