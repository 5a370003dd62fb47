"""
CLI entry points for photo sheet and mini-zine generation.
"""

# Standard Library
import argparse
import json
import pathlib
import sys

# local repo modules
import storysheet_imposer as ssi
import storysheet_imposer.config
import storysheet_imposer.errors
import storysheet_imposer.images
import storysheet_imposer.layout
import storysheet_imposer.pipeline


GenerationRequest = ssi.config.GenerationRequest
GenerationOutput = ssi.config.GenerationOutput
GenerationError = ssi.errors.GenerationError

MODE_SINGLE_SHEET = ssi.config.MODE_SINGLE_SHEET
VALID_MODES = ssi.config.VALID_MODES


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Optional argument list; defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Lay out photos as a 12-up sheet or an 8-panel mini-zine PDF.")
	parser.add_argument("inputs", nargs="+", help="JPEG or PNG image files, in reading order.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PDF path.")
	output_group.add_argument("-m", "--manifest", dest="manifest_path", default=None, help="Output manifest JSON path.")

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument(
		"--mode",
		dest="mode",
		choices=VALID_MODES,
		default=MODE_SINGLE_SHEET,
		help="Layout mode: 12-up sheet or 8-panel zine.",
	)
	layout_group.add_argument("-b", "--borders", dest="draw_borders", action="store_true", help="Outline zine panels.")
	layout_group.add_argument("-B", "--no-borders", dest="draw_borders", action="store_false", help="Skip zine panel outlines.")

	text_group = parser.add_argument_group("Back text")
	text_group.add_argument("-t", "--back-text", dest="back_text", default=None, help="Back page text for a zine.")
	text_group.add_argument("-T", "--back-text-file", dest="back_text_file", default=None, help="Read back page text from a file.")

	parser.set_defaults(draw_borders=True)

	args = parser.parse_args(argv)
	return args


#============================================
def build_request(args: argparse.Namespace) -> GenerationRequest:
	"""
	Build a generation request from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		GenerationRequest.
	"""
	uploads = [ssi.images.load_image_path(pathlib.Path(path)) for path in args.inputs]
	back_text = args.back_text
	if args.back_text_file is not None:
		back_text = pathlib.Path(args.back_text_file).read_text(encoding="utf-8")
	return GenerationRequest(
		mode=args.mode,
		uploads=uploads,
		include_back_text=back_text is not None,
		back_text=back_text or "",
		draw_borders=args.draw_borders,
	)


#============================================
def write_manifest(
	manifest_path: pathlib.Path,
	inputs: list[str],
	output: GenerationOutput,
) -> None:
	"""
	Write a manifest JSON file.

	Args:
		manifest_path: Output path.
		inputs: Input image paths.
		output: Generation output.
	"""
	document = output.document
	plan = ssi.layout.plan_layout(document.mode)
	geometry = plan.geometry
	placements = []
	for page in document.pages:
		for draw in page.images:
			placements.append(
				{
					"name": draw.image.name,
					"logical_page": draw.logical_page,
					"slot": draw.slot,
					"rotated180": draw.rotated180,
					"box": [draw.x, draw.y, draw.width, draw.height],
				}
			)
	back_text = None
	if document.back_text is not None:
		back_text = {
			"font_size": document.back_text.font_size,
			"line_height": document.back_text.line_height,
			"lines": len(document.back_text.lines),
			"truncated": document.back_text.truncated,
		}
	data = {
		"inputs": inputs,
		"mode": document.mode,
		"filename": output.filename,
		"pages": output.pages,
		"placed": placements,
		"skipped": [
			{"logical_page": logical_page, "name": name}
			for logical_page, name in document.skipped
		],
		"back_text": back_text,
		"layout": {
			"page_width": geometry.page_width,
			"page_height": geometry.page_height,
			"columns": geometry.columns,
			"rows": geometry.rows,
			"side_margin": geometry.side_margin,
			"top_margin": geometry.top_margin,
			"bottom_margin": geometry.bottom_margin,
			"gutter": geometry.gutter,
			"cell_width": geometry.cell_width,
			"cell_height": geometry.cell_height,
		},
		"fonts": {
			"regular": ssi.config.DEFAULT_FONT_REGULAR,
			"bold": ssi.config.DEFAULT_FONT_BOLD,
		},
	}
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True)


#============================================
def run_pipeline(args: argparse.Namespace) -> GenerationOutput:
	"""
	Run generation from image files to a PDF on disk.

	Args:
		args: Parsed argparse namespace.

	Returns:
		GenerationOutput.
	"""
	request = build_request(args)
	output = ssi.pipeline.generate(request, verbose=True)

	output_path = args.output_path
	if output_path is None:
		output_path = output.filename
	output_path = pathlib.Path(output_path)
	output_path.write_bytes(output.data)
	print(f"Output PDF: {output_path}")

	if args.manifest_path:
		write_manifest(pathlib.Path(args.manifest_path), list(args.inputs), output)
		print(f"Manifest written: {args.manifest_path}")
	return output


#============================================
def main(argv: list[str] | None = None) -> int:
	"""
	Main entry point.

	Args:
		argv: Optional argument list.

	Returns:
		Process exit code.
	"""
	args = parse_args(argv)
	try:
		run_pipeline(args)
	except GenerationError as error:
		print(f"Error: {error.message}", file=sys.stderr)
		return 1
	except OSError as error:
		print(f"Error: {error}", file=sys.stderr)
		return 1
	return 0
