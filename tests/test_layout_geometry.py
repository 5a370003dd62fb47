import pytest

import storysheet_imposer.config
import storysheet_imposer.layout


EPSILON = 0.001


#============================================
def _panel_box(panel: storysheet_imposer.config.Panel) -> tuple[float, float, float, float]:
	return (panel.x, panel.y, panel.x + panel.width, panel.y + panel.height)


#============================================
def test_single_sheet_grid_shape() -> None:
	"""
	Single sheet is a portrait 3 x 4 grid with no rotation.
	"""
	plan = storysheet_imposer.layout.plan_layout(storysheet_imposer.config.MODE_SINGLE_SHEET)
	geometry = plan.geometry
	assert geometry.page_width < geometry.page_height
	assert (geometry.columns, geometry.rows) == (3, 4)
	assert len(plan.panels) == 12
	assert plan.max_images == 12
	assert plan.page_to_slot is None
	assert not any(panel.rotated180 for panel in plan.panels)


#============================================
def test_single_sheet_identity_order() -> None:
	"""
	Images 1..12 land in slots 0..11, row-major.
	"""
	plan = storysheet_imposer.layout.plan_layout(storysheet_imposer.config.MODE_SINGLE_SHEET)
	for index in range(12):
		panel = storysheet_imposer.layout.resolve_panel(plan, index)
		assert panel.slot == index
		assert panel.column == index % 3
		assert panel.row == index // 3


#============================================
def test_mini_zine_grid_and_rotation() -> None:
	"""
	Mini-zine is a landscape 4 x 2 grid with the top row flipped.
	"""
	plan = storysheet_imposer.layout.plan_layout(storysheet_imposer.config.MODE_MINI_ZINE)
	geometry = plan.geometry
	assert geometry.page_width > geometry.page_height
	assert (geometry.columns, geometry.rows) == (4, 2)
	assert len(plan.panels) == 8
	for panel in plan.panels:
		assert panel.rotated180 == (panel.row == 0)
	top_left = plan.panels[0]
	assert top_left.column == 0 and top_left.row == 0
	assert top_left.y > plan.panels[4].y


#============================================
def test_mini_zine_page_table() -> None:
	"""
	The page table is the fixed fold table and a bijection.
	"""
	plan = storysheet_imposer.layout.plan_layout(storysheet_imposer.config.MODE_MINI_ZINE)
	expected = {1: 1, 2: 2, 3: 3, 4: 7, 5: 6, 6: 5, 7: 4, 8: 0}
	assert plan.page_to_slot == expected
	assert sorted(plan.page_to_slot.keys()) == list(range(1, 9))
	assert sorted(plan.page_to_slot.values()) == list(range(8))
	for logical_page, slot in expected.items():
		panel = storysheet_imposer.layout.resolve_panel(plan, logical_page - 1)
		assert panel.slot == slot


#============================================
@pytest.mark.parametrize(
	"mode",
	[storysheet_imposer.config.MODE_SINGLE_SHEET, storysheet_imposer.config.MODE_MINI_ZINE],
)
def test_panels_within_margins(mode: str) -> None:
	"""
	Ensure all panels respect the page margins.
	"""
	geometry = storysheet_imposer.layout.plan_layout(mode).geometry
	for panel in storysheet_imposer.layout.plan_layout(mode).panels:
		x0, y0, x1, y1 = _panel_box(panel)
		assert geometry.side_margin - EPSILON <= x0 < x1
		assert x1 <= geometry.page_width - geometry.side_margin + EPSILON
		assert geometry.bottom_margin - EPSILON <= y0 < y1
		assert y1 <= geometry.page_height - geometry.top_margin + EPSILON


#============================================
@pytest.mark.parametrize(
	"mode",
	[storysheet_imposer.config.MODE_SINGLE_SHEET, storysheet_imposer.config.MODE_MINI_ZINE],
)
def test_panels_non_overlapping(mode: str) -> None:
	"""
	Ensure adjacent panels do not overlap and are separated by the gutter.
	"""
	plan = storysheet_imposer.layout.plan_layout(mode)
	geometry = plan.geometry
	for row in range(geometry.rows):
		for column in range(geometry.columns - 1):
			left = plan.panels[row * geometry.columns + column]
			right = plan.panels[row * geometry.columns + column + 1]
			assert right.x - (left.x + left.width) == pytest.approx(geometry.gutter)
	for row in range(geometry.rows - 1):
		upper = plan.panels[row * geometry.columns]
		lower = plan.panels[(row + 1) * geometry.columns]
		assert upper.y - (lower.y + lower.height) == pytest.approx(geometry.gutter)


#============================================
def test_cell_size_formula() -> None:
	"""
	Cell size is the usable area divided evenly.
	"""
	geometry = storysheet_imposer.layout.plan_layout(storysheet_imposer.config.MODE_MINI_ZINE).geometry
	usable_width = geometry.page_width - 2.0 * geometry.side_margin - 3 * geometry.gutter
	usable_height = geometry.page_height - geometry.top_margin - geometry.bottom_margin - geometry.gutter
	assert geometry.cell_width == pytest.approx(usable_width / 4)
	assert geometry.cell_height == pytest.approx(usable_height / 2)


#============================================
def test_unknown_mode_rejected() -> None:
	with pytest.raises(ValueError):
		storysheet_imposer.layout.plan_layout("poster")
