"""
Coordinate helpers for fitting, centering and flipping content in place.
"""

# PIP3 modules
import reportlab.pdfbase.pdfmetrics


#============================================
def compute_fit_box(
	image_width: float,
	image_height: float,
	box_x: float,
	box_y: float,
	box_width: float,
	box_height: float,
) -> tuple[float, float, float, float]:
	"""
	Scale an image uniformly to fit a box and center it.

	Args:
		image_width: Native image width in pixels.
		image_height: Native image height in pixels.
		box_x: Box left edge.
		box_y: Box bottom edge.
		box_width: Box width.
		box_height: Box height.

	Returns:
		Drawn rectangle (x, y, width, height).
	"""
	if image_width <= 0 or image_height <= 0:
		raise ValueError(f"Invalid image size {image_width}x{image_height}")
	scale = min(box_width / image_width, box_height / image_height)
	draw_width = image_width * scale
	draw_height = image_height * scale
	draw_x = box_x + (box_width - draw_width) / 2.0
	draw_y = box_y + (box_height - draw_height) / 2.0
	return (draw_x, draw_y, draw_width, draw_height)


#============================================
def compute_box_center(x: float, y: float, width: float, height: float) -> tuple[float, float]:
	return (x + width / 2.0, y + height / 2.0)


#============================================
def compute_rotation_matrix(
	pivot_x: float,
	pivot_y: float,
) -> tuple[float, float, float, float, float, float]:
	"""
	Build an affine matrix for a 180 degree turn about a pivot.

	Canvas rotation turns about the current origin, so the matrix folds in
	the translation that keeps the pivot fixed.

	Args:
		pivot_x: Pivot x position.
		pivot_y: Pivot y position.

	Returns:
		Matrix (a, b, c, d, e, f) for canvas.transform.
	"""
	return (-1.0, 0.0, 0.0, -1.0, 2.0 * pivot_x, 2.0 * pivot_y)


#============================================
def apply_matrix(
	matrix: tuple[float, float, float, float, float, float],
	x: float,
	y: float,
) -> tuple[float, float]:
	"""
	Map a point through an affine matrix.

	Args:
		matrix: Matrix (a, b, c, d, e, f).
		x: Point x.
		y: Point y.

	Returns:
		Transformed (x, y).
	"""
	a, b, c, d, e, f = matrix
	return (a * x + c * y + e, b * x + d * y + f)


#============================================
def rotate_point_180(x: float, y: float, pivot_x: float, pivot_y: float) -> tuple[float, float]:
	return apply_matrix(compute_rotation_matrix(pivot_x, pivot_y), x, y)


#============================================
def compute_text_bbox(
	x: float,
	baseline_y: float,
	text: str,
	font_name: str,
	font_size: float,
	padding: float,
) -> tuple[float, float, float, float]:
	"""
	Compute a text bounding box from a baseline position.

	Args:
		x: Text x position.
		baseline_y: Text baseline y position.
		text: Text content.
		font_name: ReportLab font name.
		font_size: Font size in points.
		padding: Padding added on every side.

	Returns:
		Bounding box (x0, y0, x1, y1).
	"""
	width = reportlab.pdfbase.pdfmetrics.stringWidth(text, font_name, font_size)
	ascent = reportlab.pdfbase.pdfmetrics.getAscent(font_name) * font_size / 1000.0
	descent = reportlab.pdfbase.pdfmetrics.getDescent(font_name) * font_size / 1000.0
	x0 = x - padding
	x1 = x + width + padding
	y0 = baseline_y + descent - padding
	y1 = baseline_y + ascent + padding
	return (x0, y0, x1, y1)
