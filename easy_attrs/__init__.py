from .attrs_model import EasyAttrs, extract_fields, parse_input
from .config import EasyAttrsSettings, settings
from .exceptions import DeclarationError, EasyAttrsError, UndeclaredFieldError
from .naming import normalize_deep, normalize_key, normalize_shallow
from .registry import FieldRegistry, registry
from .types import AccessMode, FieldDeclaration

__all__ = [
    "EasyAttrs",
    "extract_fields",
    "parse_input",
    "EasyAttrsSettings",
    "settings",
    "EasyAttrsError",
    "DeclarationError",
    "UndeclaredFieldError",
    "normalize_key",
    "normalize_shallow",
    "normalize_deep",
    "FieldRegistry",
    "registry",
    "AccessMode",
    "FieldDeclaration",
]
