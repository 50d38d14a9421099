"""
Font styles backed by ReportLab font metrics.
"""

# Standard Library
import dataclasses
import string

# PIP3 modules
import reportlab.pdfbase.pdfmetrics

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.config


DEFAULT_FONT_REGULAR = ptf.config.DEFAULT_FONT_REGULAR
DEFAULT_TEXT_SIZE = ptf.config.DEFAULT_TEXT_SIZE
DEFAULT_TEXT_COLOR = ptf.config.DEFAULT_TEXT_COLOR
LINE_SPACING = ptf.config.LINE_SPACING
AVG_WIDTH_SAMPLE = ptf.config.AVG_WIDTH_SAMPLE


@dataclasses.dataclass(frozen=True)
class TextStyle:
	"""
	Font, size and color for one run of text.

	All metrics are in points at font_size. Wrapping and rendering only call
	the metric methods, so any object providing them can act as a style.
	"""

	font_name: str = DEFAULT_FONT_REGULAR
	font_size: float = DEFAULT_TEXT_SIZE
	text_color: str = DEFAULT_TEXT_COLOR
	line_spacing: float = LINE_SPACING

	def string_width(self, text: str) -> float:
		return reportlab.pdfbase.pdfmetrics.stringWidth(text, self.font_name, self.font_size)

	def ascent(self) -> float:
		return reportlab.pdfbase.pdfmetrics.getAscent(self.font_name, self.font_size)

	def descent(self) -> float:
		# ReportLab reports descent below the baseline as a negative number.
		return abs(reportlab.pdfbase.pdfmetrics.getDescent(self.font_name, self.font_size))

	def leading(self) -> float:
		"""
		Extra gap below the descent that makes the pitch font_size * line_spacing.
		"""
		pitch = self.font_size * self.line_spacing
		return max(0.0, pitch - self.ascent() - self.descent())

	def line_height(self) -> float:
		return self.ascent() + self.descent() + self.leading()

	def avg_char_width(self) -> float:
		return self.string_width(AVG_WIDTH_SAMPLE) / len(AVG_WIDTH_SAMPLE)


#============================================
def build_style(
	font_name: str = DEFAULT_FONT_REGULAR,
	font_size: float = DEFAULT_TEXT_SIZE,
	text_color: str = DEFAULT_TEXT_COLOR,
	line_spacing: float = LINE_SPACING,
) -> TextStyle:
	"""
	Build a validated TextStyle.

	Args:
		font_name: ReportLab font name, standard or registered.
		font_size: Font size in points.
		text_color: Hex color like "#333333".
		line_spacing: Line pitch as a multiple of font size.

	Returns:
		TextStyle.
	"""
	if font_size <= 0:
		raise ValueError(f"Font size must be positive: {font_size}")
	if line_spacing <= 0:
		raise ValueError(f"Line spacing must be positive: {line_spacing}")
	if not is_hex_color(text_color):
		raise ValueError(f"Text color must look like #RRGGBB: {text_color!r}")
	try:
		reportlab.pdfbase.pdfmetrics.getFont(font_name)
	except KeyError as exc:
		raise ValueError(f"Unknown font: {font_name}") from exc
	return TextStyle(
		font_name=font_name,
		font_size=font_size,
		text_color=text_color,
		line_spacing=line_spacing,
	)


#============================================
def parse_hex_color(value: str) -> tuple[float, float, float]:
	"""
	Parse a hex color string into RGB floats.

	Args:
		value: Color string like "#AABBCC".

	Returns:
		Tuple of (r, g, b) in 0.0-1.0 range.
	"""
	if not is_hex_color(value):
		return (0.0, 0.0, 0.0)
	red = int(value[1:3], 16) / 255.0
	green = int(value[3:5], 16) / 255.0
	blue = int(value[5:7], 16) / 255.0
	return (red, green, blue)


#============================================
def is_hex_color(value: str) -> bool:
	"""
	Check for a "#RRGGBB" color string.
	"""
	if not value or len(value) != 7 or not value.startswith("#"):
		return False
	return all(char in string.hexdigits for char in value[1:])
