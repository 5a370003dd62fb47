"""
Word wrapping and binary-search font sizing for text blocks.
"""

# Standard Library
import collections.abc
import math

# PIP3 modules
import reportlab.pdfbase.pdfmetrics

# local repo modules
import storysheet_imposer as ssi
import storysheet_imposer.config


TextFit = ssi.config.TextFit
Measurer = collections.abc.Callable[[str, float], float]

DEFAULT_FONT_REGULAR = ssi.config.DEFAULT_FONT_REGULAR
TEXT_MIN_FONT_SIZE = ssi.config.TEXT_MIN_FONT_SIZE
TEXT_MAX_FONT_SIZE = ssi.config.TEXT_MAX_FONT_SIZE
TEXT_LINE_SPACING = ssi.config.TEXT_LINE_SPACING


#============================================
def make_string_measurer(font_name: str) -> Measurer:
	"""
	Build a width measurer backed by ReportLab font metrics.

	Args:
		font_name: ReportLab font name.

	Returns:
		Callable taking (text, font_size) and returning width in points.
	"""
	def measure(text: str, font_size: float) -> float:
		return reportlab.pdfbase.pdfmetrics.stringWidth(text, font_name, font_size)

	return measure


#============================================
def compute_line_height(font_size: int) -> int:
	return int(math.floor(font_size * TEXT_LINE_SPACING + 0.5))


#============================================
def wrap_words(
	text: str,
	max_width: float,
	font_size: float,
	measure: Measurer,
) -> list[str]:
	"""
	Greedily pack whitespace-delimited words onto lines.

	A word wider than max_width sits alone on its own line.

	Args:
		text: Free text.
		max_width: Maximum line width.
		font_size: Font size used for measuring.
		measure: Width measurer.

	Returns:
		Wrapped lines, never empty.
	"""
	words = text.split()
	if not words:
		return [""]
	lines: list[str] = []
	current = words[0]
	for word in words[1:]:
		candidate = f"{current} {word}"
		if measure(candidate, font_size) <= max_width:
			current = candidate
		else:
			lines.append(current)
			current = word
	lines.append(current)
	return lines


#============================================
def split_long_word(
	word: str,
	max_width: float,
	font_size: float,
	measure: Measurer,
) -> list[str]:
	"""
	Break a word into the longest measured chunks that fit max_width.

	Every chunk holds at least one character.

	Args:
		word: Word wider than max_width.
		max_width: Maximum line width.
		font_size: Font size used for measuring.
		measure: Width measurer.

	Returns:
		Chunks in order.
	"""
	chunks: list[str] = []
	current = ""
	for char in word:
		candidate = current + char
		if current and measure(candidate, font_size) > max_width:
			chunks.append(current)
			current = char
		else:
			current = candidate
	if current:
		chunks.append(current)
	return chunks


#============================================
def block_fits(
	lines: list[str],
	font_size: int,
	max_width: float,
	max_height: float,
	measure: Measurer,
) -> bool:
	"""
	Check whether wrapped lines fit the box at a font size.

	Args:
		lines: Wrapped lines.
		font_size: Candidate font size.
		max_width: Box width.
		max_height: Box height.
		measure: Width measurer.

	Returns:
		True if block height and every line width are inside the box.
	"""
	if len(lines) * compute_line_height(font_size) > max_height:
		return False
	for line in lines:
		if measure(line, font_size) > max_width:
			return False
	return True


#============================================
def fit_text(
	text: str,
	max_width: float,
	max_height: float,
	measure: Measurer | None = None,
	font_name: str = DEFAULT_FONT_REGULAR,
	min_size: int = TEXT_MIN_FONT_SIZE,
	max_size: int = TEXT_MAX_FONT_SIZE,
) -> TextFit:
	"""
	Pick the largest integer font size whose wrapped block fits the box.

	Fitting sizes form a contiguous run from min_size upward, so a binary
	search over [min_size, max_size] finds the largest one.

	Args:
		text: Free text.
		max_width: Box width in points.
		max_height: Box height in points.
		measure: Optional width measurer; defaults to font metrics for font_name.
		font_name: ReportLab font name.
		min_size: Smallest candidate font size.
		max_size: Largest candidate font size.

	Returns:
		TextFit with the chosen size, line height and lines.
	"""
	if max_width <= 0 or max_height <= 0:
		raise ValueError(f"Text box must be positive, got {max_width}x{max_height}")
	if min_size > max_size:
		raise ValueError(f"min_size {min_size} exceeds max_size {max_size}")
	if measure is None:
		measure = make_string_measurer(font_name)

	best_size = None
	best_lines: list[str] = []
	low = min_size
	high = max_size
	while low <= high:
		size = (low + high) // 2
		lines = wrap_words(text, max_width, size, measure)
		if block_fits(lines, size, max_width, max_height, measure):
			best_size = size
			best_lines = lines
			low = size + 1
		else:
			high = size - 1

	if best_size is not None:
		return TextFit(
			font_name=font_name,
			font_size=best_size,
			line_height=compute_line_height(best_size),
			lines=tuple(best_lines),
		)

	# nothing fits; break overlong words and keep what the minimum size can hold
	line_height = compute_line_height(min_size)
	lines = []
	for line in wrap_words(text, max_width, min_size, measure):
		if measure(line, min_size) > max_width:
			lines.extend(split_long_word(line, max_width, min_size, measure))
		else:
			lines.append(line)
	capacity = max(1, int(max_height // line_height))
	return TextFit(
		font_name=font_name,
		font_size=min_size,
		line_height=line_height,
		lines=tuple(lines[:capacity]),
		truncated=True,
	)
