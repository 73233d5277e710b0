import re

from jsonschema import validate
from jsonschema.exceptions import ValidationError
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from showcase.utils.error_handler import WrongSchema


HTTP_URL_PATTERN = r"^https?://.*"

_http_url = re.compile(HTTP_URL_PATTERN)
_any_url = TypeAdapter(AnyUrl)


def validate_schema(data, schema):
    try:
        validate(instance=data, schema=schema)
    except ValidationError as err:
        raise WrongSchema(err.message)


def is_http_url(value):
    """Loose check used on the form: only the http(s) prefix matters."""
    return bool(_http_url.match(value))


def is_absolute_url(value):
    """True when value parses as an absolute URL with a scheme."""
    try:
        _any_url.validate_python(value)
    except PydanticValidationError:
        return False
    return True
