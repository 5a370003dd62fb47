"""
Generation error taxonomy.
"""

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class GenerationError(Exception):
	"""
	Base class for failures that abort a document build.
	"""

	status = 500

	#============================================
	def __init__(self, message: str = "") -> None:
		super().__init__(message)
		self.message = message or UNKNOWN_ERROR_MESSAGE

	#============================================
	def to_payload(self) -> dict[str, str]:
		"""
		Build the client-visible error payload.

		Returns:
			Dict with a single "error" message.
		"""
		return {"error": self.message}


class InvalidInput(GenerationError):
	"""
	Request rejected before any layout work began.
	"""

	status = 400


class RenderFailure(GenerationError):
	"""
	Decoding, embedding or serialization failed.
	"""

	status = 500
