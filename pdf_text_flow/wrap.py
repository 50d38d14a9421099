"""
Greedy word wrapping with a per-width cache.
"""

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.encoding
import pdf_text_flow.geometry
import pdf_text_flow.text


Size = ptf.geometry.Size
StyledText = ptf.text.StyledText
WrappedLine = ptf.text.WrappedLine
WrappedBlock = ptf.text.WrappedBlock
EMPTY_BLOCK = ptf.text.EMPTY_BLOCK

is_break_space = ptf.encoding.is_break_space
strip_break_space = ptf.encoding.strip_break_space


#============================================
def skip_whitespace(text: str, index: int) -> int:
	while index < len(text) and is_break_space(text[index]):
		index += 1
	return index


#============================================
def skip_word(text: str, index: int) -> int:
	while index < len(text) and not is_break_space(text[index]):
		index += 1
	return index


#============================================
def previous_word_end(text: str, end: int) -> int:
	"""
	Step back from a word end to the end of the word before it.

	Args:
		text: Text being wrapped.
		end: Exclusive end index of the current candidate.

	Returns:
		Exclusive end of the previous word, or 0 if there is none.
	"""
	index = end - 1
	while index > -1 and not is_break_space(text[index]):
		index -= 1
	while index > -1 and is_break_space(text[index]):
		index -= 1
	return index + 1


#============================================
def snap_to_word_end(text: str, index: int) -> int:
	"""
	Move a guessed break index onto a word end.

	A guess inside a word is pushed to the end of that word; a guess inside
	a whitespace run falls back to the end of the preceding word.

	Args:
		text: Text with no leading whitespace.
		index: Guessed exclusive end.

	Returns:
		Exclusive end index of a word, or 0.
	"""
	if index <= 0:
		return 0
	if index >= len(text):
		return len(text)
	if not is_break_space(text[index - 1]):
		return skip_word(text, index)
	return len(strip_break_space(text[:index]))


#============================================
def find_line_end(text: str, style, max_width: float, guess: int) -> tuple[int, float]:
	"""
	Find where the first line of text ends.

	Starting from a guess, grow the candidate one word at a time until it
	reaches max_width, then shrink it one word at a time until it fits. A
	width equal to max_width fits. When even the first word is too wide it
	becomes the whole line.

	Args:
		text: Remaining text, no leading or trailing whitespace.
		style: Style used for measurement.
		max_width: Maximum line width.
		guess: Initial guess in characters.

	Returns:
		Tuple of (exclusive end index, measured width).
	"""
	text_len = len(text)
	end = snap_to_word_end(text, min(guess, text_len))
	width = style.string_width(text[:end])

	while width < max_width and end < text_len:
		end = skip_word(text, skip_whitespace(text, end))
		width = style.string_width(text[:end])

	while width > max_width:
		shorter = previous_word_end(text, end)
		if shorter < 1:
			# no break point fits: the first word runs over on its own
			end = skip_word(text, 0)
			width = style.string_width(text[:end])
			break
		end = shorter
		width = style.string_width(text[:end])

	if end < 1:
		end = skip_word(text, 0)
		width = style.string_width(text[:end])
	return (end, width)


#============================================
def wrap_lines(text: StyledText, max_width: float) -> WrappedBlock:
	"""
	Wrap a styled text run into lines no wider than max_width.

	Args:
		text: StyledText to wrap.
		max_width: Maximum line width in points.

	Returns:
		WrappedBlock with its lines and bounding size.
	"""
	remaining = strip_break_space(text.encoded)
	if not remaining:
		return EMPTY_BLOCK

	style = text.style
	line_height = style.line_height()
	guess = text.avg_chars_for_width(max_width)
	lines: list[WrappedLine] = []
	block_width = 0.0
	block_height = 0.0
	while remaining:
		end, width = find_line_end(remaining, style, max_width, guess)
		lines.append(WrappedLine(remaining[:end], width, line_height))
		block_height += line_height
		if width > block_width:
			block_width = width
		remaining = remaining[skip_whitespace(remaining, end):]
	return WrappedBlock(lines=tuple(lines), size=Size(block_width, block_height))


#============================================
def compute_block(text: StyledText, max_width: float) -> WrappedBlock:
	"""
	Get the wrapped block for a text run at a width, wrapping at most once.

	Args:
		text: StyledText to wrap.
		max_width: Maximum line width in points, positive.

	Returns:
		The cached WrappedBlock for max_width.
	"""
	if not max_width > 0:
		raise ValueError(f"Wrap width must be positive: {max_width}")
	block = text.wrap_cache.get(max_width)
	if block is not None:
		return block
	if text.style is None and strip_break_space(text.encoded):
		raise ValueError(f"Cannot measure unstyled text: {text}")
	block = wrap_lines(text, max_width)
	text.wrap_cache[max_width] = block
	return block


#============================================
def calc_dimensions(text: StyledText, max_width: float) -> Size:
	"""
	Size of a text run wrapped at max_width.

	Args:
		text: StyledText to measure.
		max_width: Maximum line width in points.

	Returns:
		Block size; (0, 0) for empty text.
	"""
	return compute_block(text, max_width).size
