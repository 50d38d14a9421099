"""
Shared configuration and constants.
"""

# Standard Library
import dataclasses

# PIP3 modules
import reportlab.lib.pagesizes


POINTS_PER_INCH = 72.0
PAGE_WIDTH, PAGE_HEIGHT = reportlab.lib.pagesizes.letter

DEFAULT_MARGIN = 54.0
DEFAULT_FONT_REGULAR = "Helvetica"
DEFAULT_FONT_BOLD = "Helvetica-Bold"
DEFAULT_TEXT_SIZE = 11.0
DEFAULT_HEADER_SIZE = 9.0
DEFAULT_TEXT_COLOR = "#000000"
LINE_SPACING = 1.2
PARAGRAPH_GAP = 6.0
PROGRESS_BAR_WIDTH = 20
PROGRESS_UPDATE_EVERY = 10

# Initial line-break guess: chars = width * WRAP_GUESS_SCALE / avg_char_width.
# Width and avg_char_width are both in points (document units) at the style's
# font size, so the scale is dimensionless. The average advance is taken over
# all printable ASCII, which is narrower than typical prose words, hence > 1.
WRAP_GUESS_SCALE = 1.22

# Printable ASCII used to derive a font's average character width.
AVG_WIDTH_SAMPLE = "".join(chr(code) for code in range(32, 127))

HORIZONTAL_ALIGNS = ("LEFT", "CENTER", "RIGHT", "JUSTIFY")
VERTICAL_ALIGNS = ("TOP", "MIDDLE", "BOTTOM")


@dataclasses.dataclass
class FlowConfig:
	page_width: float
	page_height: float
	top_margin: float
	bottom_margin: float
	left_margin: float
	right_margin: float
	font_name: str
	font_size: float
	header_font_name: str
	header_font_size: float
	header_text: str | None
	align_horizontal: str
	align_vertical: str
	paragraph_gap: float
	text_color: str
	max_pages: int | None


@dataclasses.dataclass
class FlowResult:
	paragraphs: int
	lines: int
	pages: int
	overflow_lines: int


#============================================
def inches_to_points(value: float) -> float:
	"""
	Convert inches to points.

	Args:
		value: Inches value.

	Returns:
		Points value.
	"""
	return value * POINTS_PER_INCH


#============================================
def build_default_config() -> FlowConfig:
	"""
	Build a FlowConfig with the package defaults.

	Returns:
		FlowConfig.
	"""
	return FlowConfig(
		page_width=PAGE_WIDTH,
		page_height=PAGE_HEIGHT,
		top_margin=DEFAULT_MARGIN,
		bottom_margin=DEFAULT_MARGIN,
		left_margin=DEFAULT_MARGIN,
		right_margin=DEFAULT_MARGIN,
		font_name=DEFAULT_FONT_REGULAR,
		font_size=DEFAULT_TEXT_SIZE,
		header_font_name=DEFAULT_FONT_BOLD,
		header_font_size=DEFAULT_HEADER_SIZE,
		header_text=None,
		align_horizontal="LEFT",
		align_vertical="TOP",
		paragraph_gap=PARAGRAPH_GAP,
		text_color=DEFAULT_TEXT_COLOR,
		max_pages=None,
	)
