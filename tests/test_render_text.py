import pdf_text_flow.align
import pdf_text_flow.geometry
import pdf_text_flow.pages
import pdf_text_flow.render
import pdf_text_flow.text
import pdf_text_flow.wrap

from conftest import FixedPitchStyle


Align = pdf_text_flow.align.Align
Point = pdf_text_flow.geometry.Point
Size = pdf_text_flow.geometry.Size
RenderMode = pdf_text_flow.render.RenderMode
StyledText = pdf_text_flow.text.StyledText

FOX = "The quick brown fox jumps over"
PAGE_SHIFT = 100.0


class RecordingPages:
	"""
	Page collaborator that records calls; every position maps to one page.
	"""

	def __init__(self) -> None:
		self.page = pdf_text_flow.pages.PageBuffer(1)
		self.overlay: list[pdf_text_flow.pages.TextCommand] = []
		self.resolved: list[float] = []

	def border_styled_text(self, x: float, y: float, text: str, style) -> None:
		self.overlay.append(pdf_text_flow.pages.TextCommand(x, y, text, style))

	def appropriate_page(self, y: float) -> pdf_text_flow.pages.PageBufferAndY:
		self.resolved.append(y)
		return pdf_text_flow.pages.PageBufferAndY(self.page, y - PAGE_SHIFT)


#============================================
def _placements(commands: list) -> list[tuple[float, float, str]]:
	"""
	Reduce commands to (x, y, text) tuples.

	Args:
		commands: TextCommand list.

	Returns:
		List of tuples.
	"""
	return [(command.x, command.y, command.text) for command in commands]


#============================================
def test_paginated_render_resolves_each_baseline(fixed_style: FixedPitchStyle) -> None:
	"""
	Paginated lines go through the page resolver one pitch apart.
	"""
	pages = RecordingPages()
	text = StyledText.of(fixed_style, FOX)
	size = pdf_text_flow.render.render_text(
		text, pages, Point(10.0, 500.0), Size(15.0, 24.0), RenderMode.PAGINATED,
	)
	assert size == Size(15.0, 24.0)
	assert pages.overlay == []
	assert pages.resolved == [492.0, 480.0]
	assert _placements(pages.page.commands) == [
		(10.0, 392.0, "The quick brown"),
		(10.0, 380.0, "fox jumps over"),
	]
	assert all(command.style is fixed_style for command in pages.page.commands)


#============================================
def test_overlay_render_skips_pagination(fixed_style: FixedPitchStyle) -> None:
	"""
	Overlay lines are drawn at their document position without resolving pages.
	"""
	pages = RecordingPages()
	text = StyledText.of(fixed_style, FOX)
	pdf_text_flow.render.render_text(
		text, pages, Point(10.0, 500.0), Size(15.0, 24.0), RenderMode.OVERLAY,
	)
	assert pages.resolved == []
	assert pages.page.commands == []
	assert _placements(pages.overlay) == [
		(10.0, 492.0, "The quick brown"),
		(10.0, 480.0, "fox jumps over"),
	]


#============================================
def test_center_alignment(fixed_style: FixedPitchStyle) -> None:
	"""
	Centering moves the block down and each narrower line right.
	"""
	pages = RecordingPages()
	text = StyledText.of(fixed_style, FOX)
	pdf_text_flow.render.render_text(
		text,
		pages,
		Point(0.0, 500.0),
		Size(15.0, 48.0),
		RenderMode.OVERLAY,
		Align("CENTER", "MIDDLE"),
	)
	assert _placements(pages.overlay) == [
		(0.0, 480.0, "The quick brown"),
		(0.5, 468.0, "fox jumps over"),
	]


#============================================
def test_right_alignment_in_wider_box(fixed_style: FixedPitchStyle) -> None:
	"""
	Right alignment pads the block and right-aligns lines inside it.
	"""
	pages = RecordingPages()
	text = StyledText.of(fixed_style, FOX)
	pdf_text_flow.render.render_text(
		text,
		pages,
		Point(0.0, 100.0),
		Size(15.0, 30.0),
		RenderMode.OVERLAY,
		Align("RIGHT", "BOTTOM"),
	)
	# block is 15 wide and 24 tall inside a 15 x 30 box
	assert _placements(pages.overlay) == [
		(0.0, 86.0, "The quick brown"),
		(1.0, 74.0, "fox jumps over"),
	]


#============================================
def test_render_reuses_measured_block(fixed_style: FixedPitchStyle) -> None:
	"""
	Rendering at a measured width does no new measuring and agrees on size.
	"""
	text = StyledText.of(fixed_style, FOX)
	measured = pdf_text_flow.wrap.calc_dimensions(text, 15.0)
	calls = fixed_style.measure_calls
	rendered = pdf_text_flow.render.render_text(
		text, RecordingPages(), Point(0.0, 0.0), Size(15.0, 10.0), RenderMode.PAGINATED,
	)
	assert rendered is measured
	assert fixed_style.measure_calls == calls


#============================================
def test_render_wraps_unseen_width(fixed_style: FixedPitchStyle) -> None:
	"""
	Rendering at a new width wraps once and caches the result.
	"""
	text = StyledText.of(fixed_style, FOX)
	rendered = pdf_text_flow.render.render_text(
		text, RecordingPages(), Point(0.0, 0.0), Size(30.0, 12.0), RenderMode.PAGINATED,
	)
	assert rendered == Size(30.0, 12.0)
	assert list(text.wrap_cache) == [30.0]
	assert pdf_text_flow.wrap.calc_dimensions(text, 30.0) is rendered


#============================================
def test_render_empty_text_draws_nothing(fixed_style: FixedPitchStyle) -> None:
	"""
	Empty text renders no lines and has zero size.
	"""
	pages = RecordingPages()
	size = pdf_text_flow.render.render_text(
		StyledText.of(fixed_style, "  "), pages, Point(0.0, 0.0), Size(5.0, 5.0), RenderMode.PAGINATED,
	)
	assert size == Size(0.0, 0.0)
	assert pages.resolved == []
	assert pages.overlay == []
