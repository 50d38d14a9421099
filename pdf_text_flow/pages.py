"""
Page buffers, vertical pagination, and PDF output.
"""

# Standard Library
import dataclasses
import io
import math
import pathlib

# PIP3 modules
import pypdf
import reportlab.pdfgen.canvas

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.style


parse_hex_color = ptf.style.parse_hex_color


class PageLimitError(RuntimeError):
	"""Raised when content needs more pages than the configured limit."""


@dataclasses.dataclass(frozen=True)
class TextCommand:
	x: float
	y: float
	text: str
	style: object


@dataclasses.dataclass
class PageBuffer:
	page_number: int
	commands: list[TextCommand] = dataclasses.field(default_factory=list)

	def draw_styled_text(self, x: float, y: float, text: str, style) -> None:
		self.commands.append(TextCommand(x, y, text, style))


@dataclasses.dataclass(frozen=True)
class PageBufferAndY:
	page: PageBuffer
	y: float


class PageStack:
	"""
	A stack of pages sharing one continuous vertical axis.

	The first page uses its own coordinates. Positions below its bottom
	margin continue at the top of the printable area of the next page, and
	so on; pages are allocated the first time a position lands on them.
	"""

	def __init__(
		self,
		page_width: float,
		page_height: float,
		top_margin: float,
		bottom_margin: float,
		max_pages: int | None = None,
	) -> None:
		if page_height - top_margin - bottom_margin <= 0:
			raise ValueError("Margins leave no printable height")
		self.page_width = page_width
		self.page_height = page_height
		self.top_margin = top_margin
		self.bottom_margin = bottom_margin
		self.max_pages = max_pages
		self.pages: list[PageBuffer] = [PageBuffer(1)]
		self.overlay: list[TextCommand] = []

	@property
	def page_top(self) -> float:
		return self.page_height - self.top_margin

	@property
	def printable_height(self) -> float:
		return self.page_height - self.top_margin - self.bottom_margin

	def page_index_for(self, y: float) -> int:
		"""
		Zero-based page index owning a document y position.

		Args:
			y: Document y position.

		Returns:
			Page index; positions above the first page stay on it.
		"""
		distance = self.page_top - y
		if distance <= 0:
			return 0
		return math.ceil(distance / self.printable_height) - 1

	def appropriate_page(self, y: float) -> PageBufferAndY:
		"""
		Resolve a document y position to its page and page-local y.

		Args:
			y: Document y position.

		Returns:
			PageBufferAndY.
		"""
		index = self.page_index_for(y)
		while len(self.pages) <= index:
			if self.max_pages is not None and len(self.pages) >= self.max_pages:
				raise PageLimitError(f"Content needs more than {self.max_pages} pages")
			self.pages.append(PageBuffer(len(self.pages) + 1))
		return PageBufferAndY(self.pages[index], y + index * self.printable_height)

	def border_styled_text(self, x: float, y: float, text: str, style) -> None:
		"""
		Record text drawn at the same place on every page.
		"""
		self.overlay.append(TextCommand(x, y, text, style))


#============================================
def draw_commands(pdf: reportlab.pdfgen.canvas.Canvas, commands: list[TextCommand]) -> None:
	"""
	Draw recorded text commands onto the current canvas page.

	Args:
		pdf: ReportLab canvas.
		commands: Commands in page-local coordinates.
	"""
	for command in commands:
		style = command.style
		pdf.setFont(style.font_name, style.font_size)
		color = parse_hex_color(style.text_color)
		pdf.setFillColorRGB(color[0], color[1], color[2])
		pdf.drawString(command.x, command.y, command.text)


#============================================
def build_overlay_page(stack: PageStack) -> pypdf.PageObject:
	"""
	Build a PDF page holding the overlay text.

	Args:
		stack: Page stack with overlay commands.

	Returns:
		PDF page object.
	"""
	buffer = io.BytesIO()
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=(stack.page_width, stack.page_height))
	draw_commands(pdf, stack.overlay)
	pdf.save()
	buffer.seek(0)
	reader = pypdf.PdfReader(buffer)
	return reader.pages[0]


#============================================
def write_pdf(stack: PageStack, output_path: pathlib.Path) -> int:
	"""
	Write every page buffer to a PDF, with the overlay merged onto each page.

	Args:
		stack: Page stack to write.
		output_path: Output PDF path.

	Returns:
		Number of pages written.
	"""
	buffer = io.BytesIO()
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=(stack.page_width, stack.page_height))
	for page in stack.pages:
		draw_commands(pdf, page.commands)
		pdf.showPage()
	pdf.save()
	buffer.seek(0)

	overlay_page = None
	if stack.overlay:
		overlay_page = build_overlay_page(stack)

	writer = pypdf.PdfWriter()
	reader = pypdf.PdfReader(buffer)
	for page in reader.pages:
		if overlay_page is not None:
			page.merge_page(overlay_page)
		writer.add_page(page)
	writer.write(str(output_path))
	return len(reader.pages)
