"""
Request-level entry points: validate, plan, compose and serialize.
"""

# Standard Library
import time

# local repo modules
import storysheet_imposer as ssi
import storysheet_imposer.compose
import storysheet_imposer.config
import storysheet_imposer.errors
import storysheet_imposer.images
import storysheet_imposer.layout
import storysheet_imposer.render


GenerationRequest = ssi.config.GenerationRequest
GenerationOutput = ssi.config.GenerationOutput
GenerationResponse = ssi.config.GenerationResponse
GenerationError = ssi.errors.GenerationError
InvalidInput = ssi.errors.InvalidInput
RenderFailure = ssi.errors.RenderFailure

MODE_MINI_ZINE = ssi.config.MODE_MINI_ZINE
VALID_MODES = ssi.config.VALID_MODES
PDF_CONTENT_TYPE = ssi.config.PDF_CONTENT_TYPE


#============================================
def validate_mode(mode: str) -> str:
	"""
	Normalize a mode token and reject unknown values.

	Args:
		mode: Raw mode token.

	Returns:
		MODE_SINGLE_SHEET or MODE_MINI_ZINE.
	"""
	normalized = (mode or "").strip().lower()
	if normalized not in VALID_MODES:
		choices = ", ".join(VALID_MODES)
		raise InvalidInput(f"Unknown layout mode {mode!r}; expected one of: {choices}.")
	return normalized


#============================================
def build_filename(mode: str) -> str:
	if mode == MODE_MINI_ZINE:
		return ssi.config.ZINE_FILENAME
	return ssi.config.SHEET_FILENAME


#============================================
def generate(request: GenerationRequest, verbose: bool = False) -> GenerationOutput:
	"""
	Build the finished PDF for one request.

	Args:
		request: Generation request.
		verbose: Print progress lines.

	Returns:
		GenerationOutput with PDF bytes, filename and content type.
	"""
	mode = validate_mode(request.mode)
	if not request.uploads:
		raise InvalidInput("No images uploaded.")

	start_time = time.perf_counter()
	plan = ssi.layout.plan_layout(mode)
	if verbose:
		print(f"Layout mode: {mode}")
		print(f"Images received: {len(request.uploads)}")
		if len(request.uploads) > plan.max_images:
			print(f"Using the first {plan.max_images} images")

	back_text = None
	if mode == MODE_MINI_ZINE and request.include_back_text:
		back_text = request.back_text or ""

	try:
		images = [
			ssi.images.build_source_image(upload)
			for upload in request.uploads[:plan.max_images]
		]
		document = ssi.compose.compose_document(
			plan,
			images,
			back_text=back_text,
			draw_borders=request.draw_borders,
		)
		data = ssi.render.render_document(document)
		pages = ssi.render.count_pdf_pages(data)
	except GenerationError:
		raise
	except Exception as error:
		raise RenderFailure(str(error)) from error

	if verbose:
		placed = sum(len(page.images) for page in document.pages)
		print(f"Images placed: {placed}")
		for logical_page, name in document.skipped:
			print(f"Skipped unsupported image on page {logical_page}: {name}")
		if document.back_text is not None:
			fit = document.back_text
			print(f"Back text: {len(fit.lines)} lines at {fit.font_size} pt")
			if fit.truncated:
				print("Back text truncated at minimum font size")
		print(f"Pages written: {pages}")
		print(f"Timing: generate={time.perf_counter() - start_time:.2f}s")

	return GenerationOutput(
		data=data,
		filename=build_filename(mode),
		content_type=PDF_CONTENT_TYPE,
		document=document,
		pages=pages,
	)


#============================================
def generate_response(request: GenerationRequest) -> GenerationResponse:
	"""
	Run a generation and map the outcome to a transport response.

	Args:
		request: Generation request.

	Returns:
		GenerationResponse carrying PDF bytes or an error payload.
	"""
	try:
		output = generate(request)
	except GenerationError as error:
		return GenerationResponse(
			status=error.status,
			headers={"Content-Type": "application/json"},
			body=error.to_payload(),
		)
	headers = {
		"Content-Type": output.content_type,
		"Content-Disposition": f'attachment; filename="{output.filename}"',
	}
	return GenerationResponse(status=200, headers=headers, body=output.data)
