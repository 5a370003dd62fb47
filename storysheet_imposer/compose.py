"""
Document composition: place images, captions and back text on pages.

Composition only builds a GeneratedDocument model; render.py turns that
model into PDF bytes.
"""

# PIP3 modules
import reportlab.pdfbase.pdfmetrics

# local repo modules
import storysheet_imposer as ssi
import storysheet_imposer.config
import storysheet_imposer.geometry
import storysheet_imposer.images
import storysheet_imposer.layout
import storysheet_imposer.textfit


LayoutPlan = ssi.config.LayoutPlan
Panel = ssi.config.Panel
SourceImage = ssi.config.SourceImage
ImageDraw = ssi.config.ImageDraw
TextDraw = ssi.config.TextDraw
TextFit = ssi.config.TextFit
PageRecord = ssi.config.PageRecord
GeneratedDocument = ssi.config.GeneratedDocument

MODE_MINI_ZINE = ssi.config.MODE_MINI_ZINE
DEFAULT_FONT_REGULAR = ssi.config.DEFAULT_FONT_REGULAR
DEFAULT_FONT_BOLD = ssi.config.DEFAULT_FONT_BOLD
CAPTION_PADDING = ssi.config.CAPTION_PADDING
BACK_TEXT_MARGIN = ssi.config.BACK_TEXT_MARGIN


#============================================
def place_image(source: SourceImage, panel: Panel, logical_page: int) -> ImageDraw:
	"""
	Aspect-fit an image into its panel.

	Args:
		source: Source image with pixel size.
		panel: Target panel.
		logical_page: One-based reading order position.

	Returns:
		ImageDraw pivoting about the drawn rectangle center.
	"""
	draw_x, draw_y, draw_width, draw_height = ssi.geometry.compute_fit_box(
		source.width,
		source.height,
		panel.x,
		panel.y,
		panel.width,
		panel.height,
	)
	pivot = ssi.geometry.compute_box_center(draw_x, draw_y, draw_width, draw_height)
	return ImageDraw(
		image=source,
		logical_page=logical_page,
		slot=panel.slot,
		x=draw_x,
		y=draw_y,
		width=draw_width,
		height=draw_height,
		rotated180=panel.rotated180,
		pivot=pivot,
	)


#============================================
def build_caption(
	panel: Panel,
	text: str,
	font_name: str,
	font_size: float,
	baseline_y: float,
) -> TextDraw:
	"""
	Build a horizontally centered caption on a light strip.

	Args:
		panel: Host panel.
		text: Caption text.
		font_name: ReportLab font name.
		font_size: Font size.
		baseline_y: Baseline position in unrotated panel coordinates.

	Returns:
		TextDraw inheriting the panel rotation.
	"""
	width = reportlab.pdfbase.pdfmetrics.stringWidth(text, font_name, font_size)
	text_x = panel.x + (panel.width - width) / 2.0
	background = ssi.geometry.compute_text_bbox(
		text_x,
		baseline_y,
		text,
		font_name,
		font_size,
		CAPTION_PADDING,
	)
	pivot = ssi.geometry.compute_box_center(panel.x, panel.y, panel.width, panel.height)
	return TextDraw(
		text=text,
		x=text_x,
		baseline_y=baseline_y,
		font_name=font_name,
		font_size=font_size,
		rotated180=panel.rotated180,
		pivot=pivot,
		background=background,
	)


#============================================
def build_zine_captions(plan: LayoutPlan) -> list[TextDraw]:
	"""
	Build the fixed front and back cover captions.

	Args:
		plan: Mini-zine layout plan.

	Returns:
		List of caption TextDraw entries.
	"""
	front_panel = ssi.layout.resolve_panel(plan, 0)
	back_panel = ssi.layout.resolve_panel(plan, 7)
	front_baseline = front_panel.y + front_panel.height * ssi.config.COVER_CAPTION_HEIGHT_RATIO
	back_baseline = back_panel.y + ssi.config.BACK_CAPTION_BOTTOM_OFFSET + CAPTION_PADDING
	return [
		build_caption(
			front_panel,
			ssi.config.COVER_CAPTION,
			DEFAULT_FONT_BOLD,
			ssi.config.COVER_CAPTION_SIZE,
			front_baseline,
		),
		build_caption(
			back_panel,
			ssi.config.BACK_CAPTION,
			DEFAULT_FONT_REGULAR,
			ssi.config.BACK_CAPTION_SIZE,
			back_baseline,
		),
	]


#============================================
def layout_text_block(
	fit: TextFit,
	box_x: float,
	box_y: float,
	box_height: float,
) -> list[TextDraw]:
	"""
	Position fitted lines left-aligned and vertically centered in a box.

	Args:
		fit: Text fit result.
		box_x: Box left edge.
		box_y: Box bottom edge.
		box_height: Box height.

	Returns:
		One TextDraw per line.
	"""
	ascent = reportlab.pdfbase.pdfmetrics.getAscent(fit.font_name) * fit.font_size / 1000.0
	descent = reportlab.pdfbase.pdfmetrics.getDescent(fit.font_name) * fit.font_size / 1000.0
	glyph_height = ascent - descent
	block_height = len(fit.lines) * fit.line_height
	block_top = box_y + box_height - (box_height - block_height) / 2.0
	draws: list[TextDraw] = []
	for index, line in enumerate(fit.lines):
		line_top = block_top - index * fit.line_height
		baseline_y = line_top - (fit.line_height - glyph_height) / 2.0 - ascent
		draws.append(
			TextDraw(
				text=line,
				x=box_x,
				baseline_y=baseline_y,
				font_name=fit.font_name,
				font_size=fit.font_size,
			)
		)
	return draws


#============================================
def build_back_page(plan: LayoutPlan, text: str) -> tuple[PageRecord, TextFit]:
	"""
	Build the back-text page for a mini-zine.

	Args:
		plan: Mini-zine layout plan.
		text: Free text to auto-fit.

	Returns:
		Tuple of (PageRecord, TextFit).
	"""
	geometry = plan.geometry
	box_x = BACK_TEXT_MARGIN
	box_y = BACK_TEXT_MARGIN
	box_width = geometry.page_width - 2.0 * BACK_TEXT_MARGIN
	box_height = geometry.page_height - 2.0 * BACK_TEXT_MARGIN
	fit = ssi.textfit.fit_text(text, box_width, box_height)
	page = PageRecord(width=geometry.page_width, height=geometry.page_height)
	page.texts.extend(layout_text_block(fit, box_x, box_y, box_height))
	return (page, fit)


#============================================
def compose_document(
	plan: LayoutPlan,
	images: list[SourceImage],
	back_text: str | None = None,
	draw_borders: bool = True,
) -> GeneratedDocument:
	"""
	Compose the page model for one generation.

	Args:
		plan: Layout plan for the chosen mode.
		images: Ordered source images; extras beyond the mode maximum are ignored.
		back_text: Back page text for a mini-zine, or None for no back page.
		draw_borders: Whether mini-zine panels get a thin outline.

	Returns:
		GeneratedDocument.
	"""
	geometry = plan.geometry
	is_zine = plan.mode == MODE_MINI_ZINE
	page = PageRecord(width=geometry.page_width, height=geometry.page_height)
	document = GeneratedDocument(mode=plan.mode, pages=[page])

	for index, source in enumerate(images[:plan.max_images]):
		logical_page = index + 1
		if not ssi.images.is_supported(source.content_type):
			document.skipped.append((logical_page, source.name))
			continue
		panel = ssi.layout.resolve_panel(plan, index)
		page.images.append(place_image(source, panel, logical_page))

	if not is_zine:
		return document

	page.texts.extend(build_zine_captions(plan))
	if draw_borders:
		for panel in plan.panels:
			page.borders.append((panel.x, panel.y, panel.width, panel.height))

	if back_text is not None:
		back_page, fit = build_back_page(plan, back_text)
		document.pages.append(back_page)
		document.back_text = fit
	return document
