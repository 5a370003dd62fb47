"""
Shared configuration and constants.
"""

# Standard Library
import dataclasses


MODE_SINGLE_SHEET = "sheet"
MODE_MINI_ZINE = "zine"
VALID_MODES = (MODE_SINGLE_SHEET, MODE_MINI_ZINE)

SHEET_COLUMNS = 3
SHEET_ROWS = 4
SHEET_SIDE_MARGIN = 28.0
SHEET_TOP_MARGIN = 28.0
SHEET_BOTTOM_MARGIN = 28.0
SHEET_GUTTER = 10.0

ZINE_COLUMNS = 4
ZINE_ROWS = 2
ZINE_SIDE_MARGIN = 18.0
ZINE_TOP_MARGIN = 24.0
ZINE_BOTTOM_MARGIN = 18.0
ZINE_GUTTER = 8.0

SUPPORTED_CONTENT_TYPES = ("image/jpeg", "image/png")
PDF_CONTENT_TYPE = "application/pdf"
SHEET_FILENAME = "storysheet.pdf"
ZINE_FILENAME = "minizine.pdf"

DEFAULT_FONT_REGULAR = "Helvetica"
DEFAULT_FONT_BOLD = "Helvetica-Bold"

BACK_TEXT_MARGIN = 54.0
TEXT_MIN_FONT_SIZE = 6
TEXT_MAX_FONT_SIZE = 72
TEXT_LINE_SPACING = 1.3

COVER_CAPTION = "My Mini Zine"
COVER_CAPTION_SIZE = 14.0
COVER_CAPTION_HEIGHT_RATIO = 0.72
BACK_CAPTION = "made with storysheet"
BACK_CAPTION_SIZE = 7.0
BACK_CAPTION_BOTTOM_OFFSET = 8.0
CAPTION_PADDING = 4.0
CAPTION_BACKGROUND_GRAY = 0.97

BORDER_LINE_WIDTH = 0.3
BORDER_GRAY = 0.7

# logical zine page -> row-major slot on the 4 x 2 grid
ZINE_PAGE_TO_SLOT = {
	1: 1,
	2: 2,
	3: 3,
	4: 7,
	5: 6,
	6: 5,
	7: 4,
	8: 0,
}


@dataclasses.dataclass(frozen=True)
class PageGeometry:
	page_width: float
	page_height: float
	columns: int
	rows: int
	side_margin: float
	top_margin: float
	bottom_margin: float
	gutter: float
	cell_width: float
	cell_height: float


@dataclasses.dataclass(frozen=True)
class Panel:
	slot: int
	column: int
	row: int
	x: float
	y: float
	width: float
	height: float
	rotated180: bool


@dataclasses.dataclass(frozen=True)
class LayoutPlan:
	mode: str
	geometry: PageGeometry
	panels: tuple[Panel, ...]
	page_to_slot: dict[int, int] | None
	max_images: int


@dataclasses.dataclass(frozen=True)
class SourceImage:
	name: str
	content_type: str
	data: bytes
	width: int
	height: int


@dataclasses.dataclass(frozen=True)
class TextFit:
	font_name: str
	font_size: int
	line_height: int
	lines: tuple[str, ...]
	truncated: bool = False


@dataclasses.dataclass
class ImageDraw:
	image: SourceImage
	logical_page: int
	slot: int
	x: float
	y: float
	width: float
	height: float
	rotated180: bool
	pivot: tuple[float, float]


@dataclasses.dataclass
class TextDraw:
	text: str
	x: float
	baseline_y: float
	font_name: str
	font_size: float
	rotated180: bool = False
	pivot: tuple[float, float] = (0.0, 0.0)
	background: tuple[float, float, float, float] | None = None


@dataclasses.dataclass
class PageRecord:
	width: float
	height: float
	images: list[ImageDraw] = dataclasses.field(default_factory=list)
	texts: list[TextDraw] = dataclasses.field(default_factory=list)
	borders: list[tuple[float, float, float, float]] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class GeneratedDocument:
	mode: str
	pages: list[PageRecord]
	skipped: list[tuple[int, str]] = dataclasses.field(default_factory=list)
	back_text: TextFit | None = None


@dataclasses.dataclass(frozen=True)
class Upload:
	name: str
	content_type: str
	data: bytes


@dataclasses.dataclass
class GenerationRequest:
	mode: str
	uploads: list[Upload]
	include_back_text: bool = False
	back_text: str = ""
	draw_borders: bool = True


@dataclasses.dataclass
class GenerationOutput:
	data: bytes
	filename: str
	content_type: str
	document: GeneratedDocument
	pages: int


@dataclasses.dataclass
class GenerationResponse:
	status: int
	headers: dict[str, str]
	body: bytes | dict[str, str]
