"""
Flowing paragraphs of text down a stack of pages.
"""

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.align
import pdf_text_flow.config
import pdf_text_flow.geometry
import pdf_text_flow.pages
import pdf_text_flow.render
import pdf_text_flow.style
import pdf_text_flow.text
import pdf_text_flow.wrap


FlowConfig = ptf.config.FlowConfig
FlowResult = ptf.config.FlowResult
Align = ptf.align.Align
Point = ptf.geometry.Point
Size = ptf.geometry.Size
PageStack = ptf.pages.PageStack
RenderMode = ptf.render.RenderMode
StyledText = ptf.text.StyledText

PROGRESS_BAR_WIDTH = ptf.config.PROGRESS_BAR_WIDTH
PROGRESS_UPDATE_EVERY = ptf.config.PROGRESS_UPDATE_EVERY


#============================================
def print_progress(prefix: str, current: int, total: int) -> None:
	"""
	Print a simple progress bar.

	Args:
		prefix: Label text.
		current: Current count.
		total: Total count.
	"""
	if total <= 0:
		return
	percent = int(round((current / total) * 100.0))
	filled = int(round(PROGRESS_BAR_WIDTH * percent / 100.0))
	bar = "#" * filled + "-" * (PROGRESS_BAR_WIDTH - filled)
	print(f"{prefix} [{bar}] {current}/{total} ({percent}%)", end="\r")


#============================================
def split_paragraphs(raw: str) -> list[str]:
	"""
	Split raw text into paragraphs at blank lines.

	Args:
		raw: Input text.

	Returns:
		Paragraphs with their internal line breaks folded into spaces.
	"""
	paragraphs: list[str] = []
	current: list[str] = []
	for line in raw.splitlines():
		if line.strip():
			current.append(line.strip())
			continue
		if current:
			paragraphs.append(" ".join(current))
			current = []
	if current:
		paragraphs.append(" ".join(current))
	return paragraphs


#============================================
def build_page_stack(config: FlowConfig) -> PageStack:
	"""
	Build an empty page stack from a flow config.

	Args:
		config: Flow configuration.

	Returns:
		PageStack.
	"""
	return PageStack(
		page_width=config.page_width,
		page_height=config.page_height,
		top_margin=config.top_margin,
		bottom_margin=config.bottom_margin,
		max_pages=config.max_pages,
	)


#============================================
def column_width(config: FlowConfig) -> float:
	width = config.page_width - config.left_margin - config.right_margin
	if width <= 0:
		raise ValueError("Margins leave no printable width")
	return width


#============================================
def render_header(stack: PageStack, config: FlowConfig) -> None:
	"""
	Render the header text once as an overlay, centered in the top margin.

	Args:
		stack: Page stack receiving the overlay.
		config: Flow configuration.
	"""
	if not config.header_text:
		return
	style = ptf.style.build_style(
		config.header_font_name,
		config.header_font_size,
		config.text_color,
	)
	header = StyledText.of(style, config.header_text)
	width = column_width(config)
	size = ptf.wrap.calc_dimensions(header, width)
	header_top = config.page_height - max(0.0, (config.top_margin - size.height) / 2.0)
	ptf.render.render_text(
		header,
		stack,
		Point(config.left_margin, header_top),
		Size(width, size.height),
		RenderMode.OVERLAY,
		Align(config.align_horizontal, "TOP"),
	)


#============================================
def flow_paragraphs(
	stack: PageStack,
	paragraphs: list[str],
	config: FlowConfig,
	verbose: bool = False,
) -> FlowResult:
	"""
	Lay paragraphs out one under another across the page stack.

	Each paragraph is measured at the column width and then rendered into a
	box of exactly that height, so the render reuses the measured block.

	Args:
		stack: Page stack to draw into.
		paragraphs: Paragraph strings.
		config: Flow configuration.
		verbose: Print progress while flowing.

	Returns:
		FlowResult.
	"""
	style = ptf.style.build_style(config.font_name, config.font_size, config.text_color)
	# paragraphs stack downward, each box is exactly its block height
	align = Align(config.align_horizontal, "TOP")
	width = column_width(config)
	render_header(stack, config)

	total = len(paragraphs)
	cursor_y = stack.page_top
	line_count = 0
	overflow_count = 0
	for index, paragraph in enumerate(paragraphs, start=1):
		text = StyledText.of(style, paragraph)
		block = ptf.wrap.compute_block(text, width)
		if block.lines:
			ptf.render.render_text(
				text,
				stack,
				Point(config.left_margin, cursor_y),
				Size(width, block.size.height),
				RenderMode.PAGINATED,
				align,
			)
			cursor_y -= block.size.height + config.paragraph_gap
			line_count += len(block.lines)
			overflow_count += sum(1 for line in block.lines if line.width > width)
		if verbose and (index % PROGRESS_UPDATE_EVERY == 0 or index == total):
			print_progress("Flowing paragraphs", index, total)
	if verbose and total > 0:
		print()

	return FlowResult(
		paragraphs=total,
		lines=line_count,
		pages=len(stack.pages),
		overflow_lines=overflow_count,
	)
