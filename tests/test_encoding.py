import pdf_text_flow.encoding


normalize_text = pdf_text_flow.encoding.normalize_text


#============================================
def test_winansi_text_unchanged() -> None:
	"""
	Text already in the PDF encoding passes through.
	"""
	value = "Caf\N{LATIN SMALL LETTER E WITH ACUTE} \N{EM DASH} \N{EURO SIGN}5"
	assert normalize_text(value) == value


#============================================
def test_substitution_table() -> None:
	"""
	Known characters outside the encoding get readable stand-ins.
	"""
	assert normalize_text("a \N{MINUS SIGN} b") == "a - b"
	assert normalize_text("x \N{GREATER-THAN OR EQUAL TO} 2") == "x >= 2"
	assert normalize_text("\N{LATIN SMALL LIGATURE FI}ne") == "fine"
	assert normalize_text("zero\N{ZERO WIDTH SPACE}width") == "zerowidth"


#============================================
def test_decomposition_and_placeholder() -> None:
	"""
	Accents outside the encoding are dropped; unmappable glyphs become '?'.
	"""
	assert normalize_text("\N{LATIN SMALL LETTER Z WITH ACUTE}") == "z"
	assert normalize_text("\N{LATIN CAPITAL LETTER L WITH STROKE}") == "?"
	assert normalize_text("\N{HIRAGANA LETTER A}") == "?"


#============================================
def test_whitespace_and_controls() -> None:
	"""
	Whitespace becomes plain spaces and other controls vanish.
	"""
	assert normalize_text("a\tb\nc d") == "a b c d"
	assert normalize_text("bell\x07") == "bell"
	assert normalize_text(None) == ""
	assert normalize_text("") == ""


#============================================
def test_non_breaking_spaces_survive() -> None:
	"""
	No-break spaces stay glued; the narrow and figure variants become one.
	"""
	nbsp = "\N{NO-BREAK SPACE}"
	assert normalize_text("10\N{NO-BREAK SPACE}km") == "10" + nbsp + "km"
	assert normalize_text("10\N{NARROW NO-BREAK SPACE}km") == "10" + nbsp + "km"
	assert normalize_text("1\N{FIGURE SPACE}000") == "1" + nbsp + "000"
	assert normalize_text("a\N{EM SPACE}b") == "a b"
	assert pdf_text_flow.encoding.strip_break_space(" " + nbsp + "x\t") == nbsp + "x"
