"""
Text normalization to the single-byte encoding of the standard PDF fonts.
"""

# Standard Library
import unicodedata


PDF_TEXT_ENCODING = "cp1252"
PLACEHOLDER = "?"

# Spaces that separate words without allowing a line break.
NON_BREAKING_SPACES = frozenset((
	"\N{NO-BREAK SPACE}",
	"\N{FIGURE SPACE}",
	"\N{NARROW NO-BREAK SPACE}",
))

# Characters WinAnsi lacks, with readable stand-ins.
REPLACEMENTS = {
	"\u2212": "-",
	"\u2010": "-",
	"\u2011": "-",
	"\u2012": "-",
	"\u2015": "--",
	"\u2032": "'",
	"\u2190": "<-",
	"\u2192": "->",
	"\u2194": "<->",
	"\u21d2": "=>",
	"\u2260": "!=",
	"\u2264": "<=",
	"\u2265": ">=",
	"\u2248": "~",
	"\u221e": "inf",
	"\u2713": "v",
	"\u2500": "-",
	"\u2502": "|",
	"\ufb01": "fi",
	"\ufb02": "fl",
	"\u2033": "\"",
	"\u2044": "/",
	"\u200b": "",
	"\ufeff": "",
	"\N{FIGURE SPACE}": "\N{NO-BREAK SPACE}",
	"\N{NARROW NO-BREAK SPACE}": "\N{NO-BREAK SPACE}",
}


#============================================
def is_encodable(char: str) -> bool:
	"""
	Check whether a character exists in the PDF text encoding.

	Args:
		char: Single character.

	Returns:
		True if the character encodes.
	"""
	try:
		char.encode(PDF_TEXT_ENCODING)
	except UnicodeEncodeError:
		return False
	return True


#============================================
def substitute_char(char: str) -> str:
	"""
	Map one character onto encodable text.

	Args:
		char: Single character.

	Returns:
		Replacement text, possibly empty.
	"""
	if char in REPLACEMENTS:
		return REPLACEMENTS[char]
	if char == "\N{NO-BREAK SPACE}":
		return char
	if is_break_space(char):
		return " "
	if unicodedata.category(char) == "Cc":
		return ""
	if is_encodable(char):
		return char
	decomposed = unicodedata.normalize("NFKD", char)
	kept = "".join(
		part for part in decomposed
		if not unicodedata.combining(part) and is_encodable(part)
	)
	if kept:
		return kept
	return PLACEHOLDER


#============================================
def normalize_text(value: str | None) -> str:
	"""
	Normalize text for measuring and drawing with the standard PDF fonts.

	Args:
		value: Input text.

	Returns:
		Normalized text where every character is WinAnsi encodable.
	"""
	if not value:
		return ""
	return "".join(substitute_char(char) for char in value)


#============================================
def is_break_space(char: str) -> bool:
	return char.isspace() and char not in NON_BREAKING_SPACES


#============================================
def strip_break_space(text: str) -> str:
	"""
	Trim whitespace a line may break at, keeping non-breaking spaces.

	Args:
		text: Text to trim.

	Returns:
		Trimmed text.
	"""
	start = 0
	end = len(text)
	while start < end and is_break_space(text[start]):
		start += 1
	while end > start and is_break_space(text[end - 1]):
		end -= 1
	return text[start:end]
