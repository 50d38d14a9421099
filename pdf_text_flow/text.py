"""
Styled text runs and their wrapped forms.
"""

# Standard Library
import dataclasses
import functools
import math

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.config
import pdf_text_flow.encoding
import pdf_text_flow.geometry


Size = ptf.geometry.Size

WRAP_GUESS_SCALE = ptf.config.WRAP_GUESS_SCALE


@dataclasses.dataclass(frozen=True)
class WrappedLine:
	content: str
	width: float
	line_height: float


@dataclasses.dataclass(frozen=True)
class WrappedBlock:
	lines: tuple[WrappedLine, ...]
	size: Size


EMPTY_BLOCK = WrappedBlock(lines=(), size=Size(0.0, 0.0))


@dataclasses.dataclass(frozen=True)
class StyledText:
	"""
	An immutable run of text in a single style.

	wrap_cache maps each max width ever wrapped at to its WrappedBlock. It is
	the only mutable part of the instance and is not thread safe; callers
	sharing one StyledText across threads must serialize wrapping.
	"""

	style: object | None
	content: str
	wrap_cache: dict[float, WrappedBlock] = dataclasses.field(
		default_factory=dict, compare=False, repr=False,
	)

	@staticmethod
	def of(style: object | None, content: str | None) -> "StyledText":
		if content is None:
			content = ""
		if content == "" and style is None:
			return EMPTY_TEXT
		return StyledText(style, content)

	@functools.cached_property
	def encoded(self) -> str:
		"""
		Content in the encoding used for both measuring and drawing.
		"""
		return ptf.encoding.normalize_text(self.content)

	def max_width(self) -> float:
		"""
		Width of the whole run set on one line, trimmed.
		"""
		trimmed = ptf.encoding.strip_break_space(self.encoded)
		if not trimmed:
			return 0.0
		return self.style.string_width(trimmed)

	def avg_chars_for_width(self, width: float) -> int:
		guess = width * WRAP_GUESS_SCALE / self.style.avg_char_width()
		if not math.isfinite(guess):
			# unbounded width: the whole run is one candidate line
			return len(self.encoded)
		return math.floor(guess)

	def __str__(self) -> str:
		return f"StyledText({self.content})"


EMPTY_TEXT = StyledText(None, "")
