"""
Panel layout planning for the single sheet and mini-zine modes.
"""

# PIP3 modules
import reportlab.lib.pagesizes

# local repo modules
import storysheet_imposer as ssi
import storysheet_imposer.config


PageGeometry = ssi.config.PageGeometry
Panel = ssi.config.Panel
LayoutPlan = ssi.config.LayoutPlan

MODE_SINGLE_SHEET = ssi.config.MODE_SINGLE_SHEET
MODE_MINI_ZINE = ssi.config.MODE_MINI_ZINE
ZINE_PAGE_TO_SLOT = ssi.config.ZINE_PAGE_TO_SLOT


#============================================
def build_geometry(
	page_size: tuple[float, float],
	columns: int,
	rows: int,
	side_margin: float,
	top_margin: float,
	bottom_margin: float,
	gutter: float,
) -> PageGeometry:
	"""
	Compute a grid geometry that tiles the page inside its margins.

	Args:
		page_size: Page (width, height) in points.
		columns: Column count.
		rows: Row count.
		side_margin: Left and right margin.
		top_margin: Top margin.
		bottom_margin: Bottom margin.
		gutter: Spacing between adjacent cells.

	Returns:
		PageGeometry.
	"""
	page_width, page_height = page_size
	usable_width = page_width - 2.0 * side_margin - gutter * (columns - 1)
	usable_height = page_height - top_margin - bottom_margin - gutter * (rows - 1)
	return PageGeometry(
		page_width=page_width,
		page_height=page_height,
		columns=columns,
		rows=rows,
		side_margin=side_margin,
		top_margin=top_margin,
		bottom_margin=bottom_margin,
		gutter=gutter,
		cell_width=usable_width / columns,
		cell_height=usable_height / rows,
	)


#============================================
def compute_cell_box(
	geometry: PageGeometry,
	column: int,
	row: int,
) -> tuple[float, float, float, float]:
	"""
	Compute the page rectangle of a grid cell.

	Row 0 is the top row; PDF coordinates grow upward.

	Args:
		geometry: Page geometry.
		column: Column index.
		row: Row index.

	Returns:
		Tuple of (x0, y0, x1, y1).
	"""
	cell_x = geometry.side_margin + column * (geometry.cell_width + geometry.gutter)
	cell_top = geometry.page_height - geometry.top_margin - row * (
		geometry.cell_height + geometry.gutter
	)
	cell_y = cell_top - geometry.cell_height
	return (cell_x, cell_y, cell_x + geometry.cell_width, cell_top)


#============================================
def build_panels(geometry: PageGeometry, rotate_top_row: bool) -> tuple[Panel, ...]:
	"""
	Build panels in row-major slot order.

	Args:
		geometry: Page geometry.
		rotate_top_row: Whether row 0 is flipped 180 degrees.

	Returns:
		Tuple of Panel entries indexed by slot.
	"""
	panels: list[Panel] = []
	for row in range(geometry.rows):
		for column in range(geometry.columns):
			x0, y0, x1, y1 = compute_cell_box(geometry, column, row)
			panels.append(
				Panel(
					slot=row * geometry.columns + column,
					column=column,
					row=row,
					x=x0,
					y=y0,
					width=x1 - x0,
					height=y1 - y0,
					rotated180=rotate_top_row and row == 0,
				)
			)
	return tuple(panels)


#============================================
def plan_layout(mode: str) -> LayoutPlan:
	"""
	Plan the fixed page geometry for a layout mode.

	Args:
		mode: MODE_SINGLE_SHEET or MODE_MINI_ZINE.

	Returns:
		LayoutPlan with geometry, panels and the zine page table.
	"""
	if mode == MODE_SINGLE_SHEET:
		geometry = build_geometry(
			reportlab.lib.pagesizes.portrait(reportlab.lib.pagesizes.letter),
			ssi.config.SHEET_COLUMNS,
			ssi.config.SHEET_ROWS,
			ssi.config.SHEET_SIDE_MARGIN,
			ssi.config.SHEET_TOP_MARGIN,
			ssi.config.SHEET_BOTTOM_MARGIN,
			ssi.config.SHEET_GUTTER,
		)
		panels = build_panels(geometry, rotate_top_row=False)
		page_to_slot = None
	elif mode == MODE_MINI_ZINE:
		geometry = build_geometry(
			reportlab.lib.pagesizes.landscape(reportlab.lib.pagesizes.letter),
			ssi.config.ZINE_COLUMNS,
			ssi.config.ZINE_ROWS,
			ssi.config.ZINE_SIDE_MARGIN,
			ssi.config.ZINE_TOP_MARGIN,
			ssi.config.ZINE_BOTTOM_MARGIN,
			ssi.config.ZINE_GUTTER,
		)
		panels = build_panels(geometry, rotate_top_row=True)
		page_to_slot = dict(ZINE_PAGE_TO_SLOT)
	else:
		raise ValueError(f"Unknown layout mode: {mode!r}")
	return LayoutPlan(
		mode=mode,
		geometry=geometry,
		panels=panels,
		page_to_slot=page_to_slot,
		max_images=len(panels),
	)


#============================================
def resolve_panel(plan: LayoutPlan, index: int) -> Panel:
	"""
	Resolve the physical panel for an image position.

	Args:
		plan: Layout plan.
		index: Zero-based image position.

	Returns:
		Panel receiving that image.
	"""
	logical_page = index + 1
	if plan.page_to_slot is None:
		slot = index
	else:
		slot = plan.page_to_slot[logical_page]
	return plan.panels[slot]
