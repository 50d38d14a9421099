"""
CLI entry points for flowing text files into PDF pages.
"""

# Standard Library
import argparse
import json
import pathlib
import time

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.align
import pdf_text_flow.config
import pdf_text_flow.document
import pdf_text_flow.pages
import pdf_text_flow.style


FlowConfig = ptf.config.FlowConfig
FlowResult = ptf.config.FlowResult

PAGE_WIDTH = ptf.config.PAGE_WIDTH
PAGE_HEIGHT = ptf.config.PAGE_HEIGHT
DEFAULT_MARGIN = ptf.config.DEFAULT_MARGIN
DEFAULT_FONT_REGULAR = ptf.config.DEFAULT_FONT_REGULAR
DEFAULT_FONT_BOLD = ptf.config.DEFAULT_FONT_BOLD
DEFAULT_TEXT_SIZE = ptf.config.DEFAULT_TEXT_SIZE
DEFAULT_HEADER_SIZE = ptf.config.DEFAULT_HEADER_SIZE
DEFAULT_TEXT_COLOR = ptf.config.DEFAULT_TEXT_COLOR
PARAGRAPH_GAP = ptf.config.PARAGRAPH_GAP


#============================================
def build_config(args: argparse.Namespace) -> FlowConfig:
	"""
	Build flow config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		FlowConfig.
	"""
	margin = DEFAULT_MARGIN
	if args.margin_inches is not None:
		margin = ptf.config.inches_to_points(args.margin_inches)
	align = ptf.align.parse_align(args.align)
	config = FlowConfig(
		page_width=PAGE_WIDTH,
		page_height=PAGE_HEIGHT,
		top_margin=margin,
		bottom_margin=margin,
		left_margin=margin,
		right_margin=margin,
		font_name=args.font_name,
		font_size=args.font_size,
		header_font_name=DEFAULT_FONT_BOLD,
		header_font_size=DEFAULT_HEADER_SIZE,
		header_text=args.header_text,
		align_horizontal=align.horizontal,
		align_vertical=align.vertical,
		paragraph_gap=PARAGRAPH_GAP,
		text_color=args.text_color,
		max_pages=args.max_pages,
	)
	return config


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list; None reads sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Flow plain text files into wrapped PDF pages.")
	parser.add_argument("inputs", nargs="+", help="Plain text files, paragraphs separated by blank lines.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", required=True, help="Output PDF path.")
	output_group.add_argument("-m", "--manifest", dest="manifest_path", default=None, help="Output manifest JSON path.")

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument("-f", "--font", dest="font_name", default=DEFAULT_FONT_REGULAR, help="Body font name.")
	layout_group.add_argument("-s", "--font-size", dest="font_size", type=float, default=DEFAULT_TEXT_SIZE, help="Body font size in points.")
	layout_group.add_argument("-a", "--align", dest="align", default="TOP_LEFT", help="Alignment, e.g. TOP_LEFT or TOP_CENTER. Body paragraphs stack from the top, so only the horizontal part moves them.")
	layout_group.add_argument("-t", "--header", dest="header_text", default=None, help="Header text repeated on every page.")
	layout_group.add_argument("-c", "--color", dest="text_color", default=DEFAULT_TEXT_COLOR, help="Text color as #RRGGBB.")
	layout_group.add_argument("--margin", dest="margin_inches", type=float, default=None, help="Page margin in inches.")

	limit_group = parser.add_argument_group("Limits")
	limit_group.add_argument("-g", "--max-pages", dest="max_pages", type=int, default=None, help="Fail if more pages are needed.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-q", "--quiet", dest="verbose", action="store_false", help="Suppress progress output.")
	behavior_group.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="Show progress output.")

	parser.set_defaults(verbose=True)

	args = parser.parse_args(argv)
	if not ptf.style.is_hex_color(args.text_color):
		parser.error(f"--color must look like #RRGGBB: {args.text_color!r}")
	return args


#============================================
def read_paragraphs(paths: list[pathlib.Path]) -> list[str]:
	"""
	Read and split every input file into paragraphs, in order.

	Args:
		paths: Text file paths.

	Returns:
		Paragraph strings.
	"""
	paragraphs: list[str] = []
	for path in paths:
		raw = path.read_text(encoding="utf-8")
		paragraphs.extend(ptf.document.split_paragraphs(raw))
	return paragraphs


#============================================
def write_manifest(
	manifest_path: pathlib.Path,
	inputs: list[pathlib.Path],
	result: FlowResult,
	config: FlowConfig,
) -> None:
	"""
	Write a manifest JSON file.

	Args:
		manifest_path: Output path.
		inputs: Input text files.
		result: Flow result.
		config: Flow configuration.
	"""
	data = {
		"inputs": [str(path) for path in inputs],
		"paragraphs": result.paragraphs,
		"lines": result.lines,
		"overflow_lines": result.overflow_lines,
		"pages": result.pages,
		"layout": {
			"page_width": config.page_width,
			"page_height": config.page_height,
			"top_margin": config.top_margin,
			"bottom_margin": config.bottom_margin,
			"left_margin": config.left_margin,
			"right_margin": config.right_margin,
			"align_horizontal": config.align_horizontal,
			"align_vertical": config.align_vertical,
			"paragraph_gap": config.paragraph_gap,
			"max_pages": config.max_pages,
		},
		"fonts": {
			"body": config.font_name,
			"body_size": config.font_size,
			"header": config.header_font_name,
			"header_size": config.header_font_size,
		},
	}
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True)


#============================================
def run_pipeline(args: argparse.Namespace) -> FlowResult:
	"""
	Run the full pipeline from text input to PDF output.

	Args:
		args: Parsed argparse namespace.

	Returns:
		FlowResult.
	"""
	verbose = args.verbose
	config = build_config(args)
	output_path = pathlib.Path(args.output_path)
	input_paths = [pathlib.Path(value) for value in args.inputs]
	if verbose:
		print("Text to PDF flow")
		print(f"Output PDF: {output_path}")
		print(f"Font: {config.font_name} {config.font_size}pt")
		print(f"Align: {config.align_vertical}_{config.align_horizontal}")
		if config.header_text:
			print(f"Header: {config.header_text}")
		if config.max_pages is not None:
			print(f"Max pages: {config.max_pages}")

	start_time = time.perf_counter()
	paragraphs = read_paragraphs(input_paths)
	if verbose:
		print(f"Paragraphs read: {len(paragraphs)}")

	flow_start = time.perf_counter()
	stack = ptf.document.build_page_stack(config)
	result = ptf.document.flow_paragraphs(stack, paragraphs, config, verbose=verbose)
	flow_end = time.perf_counter()

	write_start = time.perf_counter()
	pages_written = ptf.pages.write_pdf(stack, output_path)
	write_end = time.perf_counter()

	manifest_path = args.manifest_path
	if manifest_path is None:
		manifest_path = f"{output_path}.json"
	write_manifest(pathlib.Path(manifest_path), input_paths, result, config)

	if verbose:
		print(f"Lines set: {result.lines}")
		if result.overflow_lines:
			print(f"Lines wider than the column: {result.overflow_lines}")
		print(f"Pages written: {pages_written}")
		total_time = time.perf_counter() - start_time
		print(
			"Timing: flow={:.2f}s write={:.2f}s total={:.2f}s".format(
				flow_end - flow_start,
				write_end - write_start,
				total_time,
			)
		)
		print(f"Manifest written: {manifest_path}")
	return result


#============================================
def main() -> None:
	"""
	Main entry point.
	"""
	args = parse_args()
	run_pipeline(args)
