FIELD_MESSAGES = {
	"name": "Name is required",
	"email": "Valid email is required",
	"message": "Message is required",
	"subject": "Subject must be a string",
}
UNKNOWN_FIELD_MESSAGE = "Unknown field"
BODY_MESSAGE = "Request body must be a JSON object"


def format_validation_errors(errors):
	"""Turn pydantic request errors into one ``{type, value, msg, path, location}``
	entry per failing field, in the order the fields were checked."""
	formatted = []
	seen = set()
	for error in errors:
		loc = error.get("loc", ())
		location = loc[0] if loc else "body"
		field = loc[1] if len(loc) > 1 and isinstance(loc[1], str) else ""
		if error.get("type") == "json_invalid":
			field = ""

		if field in seen:
			continue
		seen.add(field)

		if not field:
			msg = BODY_MESSAGE
		elif error.get("type") == "extra_forbidden":
			msg = UNKNOWN_FIELD_MESSAGE
		else:
			msg = FIELD_MESSAGES.get(field, error.get("msg"))

		formatted.append({
			"type": "field",
			"value": None if error.get("type") == "missing" or not field else error.get("input"),
			"msg": msg,
			"path": field,
			"location": location,
		})
	return formatted


def format_error(request, code, exception):
	"""Build the log report for an HTTP error answered by the service.

	``exception`` is the ``HTTPException.detail``: either a plain string or the
	dict routes raise with ``message``, ``detail`` and ``currentFrame``.
	"""
	if not exception:
		exception = {}
	if isinstance(exception, str):
		exception = {"message": exception}

	frame = exception.get("currentFrame")
	route = request.scope.get("route")
	return {
		"status": code if code else 500,
		"method": request.method,
		"path": route.path if route else request.url.path,
		"endpoint": route.name if route else None,
		"file": frame.filename.split('/')[-1] if frame else None,
		"line": frame.lineno if frame else None,
		"message": exception.get("message", "Unknown error"),
		"detail": exception.get("detail"),
	}
