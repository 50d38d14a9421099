"""
Placing wrapped text onto pages.
"""

# Standard Library
import enum

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.align
import pdf_text_flow.geometry
import pdf_text_flow.text
import pdf_text_flow.wrap


Align = ptf.align.Align
Point = ptf.geometry.Point
Size = ptf.geometry.Size
StyledText = ptf.text.StyledText

DEFAULT_ALIGN = ptf.align.DEFAULT_ALIGN


class RenderMode(enum.Enum):
	# same position on every page, e.g. headers and footers
	OVERLAY = "overlay"
	# flowed content resolved to a page by its vertical position
	PAGINATED = "paginated"


#============================================
def draw_line(pages, mode: RenderMode, x: float, baseline: float, content: str, style) -> None:
	"""
	Send one line to the overlay or to the page owning its baseline.

	Args:
		pages: Page stack providing border_styled_text and appropriate_page.
		mode: RenderMode.
		x: Line x position.
		baseline: Baseline y in document coordinates.
		content: Encoded line text.
		style: Line style.
	"""
	if mode is RenderMode.OVERLAY:
		pages.border_styled_text(x, baseline, content, style)
		return
	placement = pages.appropriate_page(baseline)
	placement.page.draw_styled_text(x, placement.y, content, style)


#============================================
def render_text(
	text: StyledText,
	pages,
	outer_top_left: Point,
	outer_size: Size,
	mode: RenderMode,
	align: Align = DEFAULT_ALIGN,
) -> Size:
	"""
	Render a text run inside an outer box.

	The block is wrapped at outer_size.width, reusing any block already
	computed at that width, then placed in the box per align. Each line is
	aligned within the block's own width. Consecutive baselines are one
	line pitch (ascent + descent + leading) apart.

	Args:
		text: StyledText to render.
		pages: Page stack receiving draw calls.
		outer_top_left: Top left corner of the outer box.
		outer_size: Outer box size; width is the wrap width.
		mode: RenderMode.OVERLAY or RenderMode.PAGINATED.
		align: Alignment of the block and of each line.

	Returns:
		Size of the wrapped block.
	"""
	block = ptf.wrap.compute_block(text, outer_size.width)
	if not block.lines:
		return block.size

	style = text.style
	padding = align.calc_padding(outer_size, block.size)
	# padding.top moves down, and y grows upward
	block_top_left = outer_top_left.plus(Point(padding.left, -padding.top))
	x = block_top_left.x
	y = block_top_left.y
	for line in block.lines:
		line_x = x + align.left_offset(block.size.width, line.width)
		y -= style.ascent()
		draw_line(pages, mode, line_x, y, line.content, style)
		y -= style.descent()
		y -= style.leading()
	return block.size
