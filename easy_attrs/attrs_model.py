"""
Objects built from raw JSON or a plain mapping, typically the response
of an external API, keeping only the fields their class declares.

Usage::

    class Item(EasyAttrs, readers=("id", "category"), accessors=("name",)):
        pass

    Item.internal_only("nested_data")

    item = Item('{"id": 1, "Name": "n", "nestedData": {"k": 5}, "extra": true}')

``readers``, ``writers`` and ``accessors`` create read-only, write-only and
read-write properties. ``internal_only`` fields are stored like the others
but get no property: the class's own methods reach them through
``self._read(name)``. Every other input key is discarded.

Fields accumulate down the class hierarchy: a subclass gets the fields of
every ``EasyAttrs`` ancestor plus its own.

Top-level input keys are converted to snake_case. Nested mappings are
converted as well, but only for declared fields, so large branches of the
input that get discarded are never walked.
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, FrozenSet, Iterable

from .accessors import install_accessors
from .codec import decode
from .exceptions import DeclarationError, UndeclaredFieldError
from .naming import normalize_deep, normalize_key, normalize_shallow
from .registry import FieldRegistry, registry
from .types import AccessMode, FieldDeclaration

logger = logging.getLogger(__name__)


def parse_input(raw_input: Any) -> Mapping:
    if isinstance(raw_input, Mapping):
        return raw_input
    if isinstance(raw_input, (str, bytes, bytearray)):
        data = decode(raw_input)
        if isinstance(data, Mapping):
            return data
        logger.warning("Ignoring JSON input that is not an object (got %s)", type(data).__name__)
    return {}


def extract_fields(
    storage: Dict[str, Any],
    data: Mapping,
    declarations: Iterable[FieldDeclaration],
) -> None:
    for declaration in declarations:
        value = data.get(declaration.name)
        if value is None:
            continue
        if isinstance(value, Mapping):
            value = normalize_deep(value)
        storage[declaration.name] = value


def _as_names(names: str | Iterable[str]) -> tuple:
    if isinstance(names, str):
        return (names,)
    return tuple(names)


class EasyAttrs:
    _registry: ClassVar[FieldRegistry] = registry

    def __init_subclass__(
        cls,
        readers: str | Iterable[str] = (),
        writers: str | Iterable[str] = (),
        accessors: str | Iterable[str] = (),
        internal_only: str | Iterable[str] = (),
        **kwargs,
    ):
        super().__init_subclass__(**kwargs)
        cls._registry.link(cls, [base for base in cls.__bases__ if issubclass(base, EasyAttrs)])
        for names, mode in (
            (readers, AccessMode.READ_ONLY),
            (writers, AccessMode.WRITE_ONLY),
            (accessors, AccessMode.READ_WRITE),
            (internal_only, AccessMode.INTERNAL_ONLY),
        ):
            if names:
                cls._declare(_as_names(names), mode)

    def __init__(self, raw_input: Any = None, **fields: Any):
        self._storage: Dict[str, Any] = {}

        data = parse_input(raw_input)
        if fields:
            data = {**data, **fields}
        if not data:
            return

        data = normalize_shallow(data)
        declarations = self._registry.effective_fields(type(self))
        if logger.isEnabledFor(logging.DEBUG):
            discarded = data.keys() - {d.name for d in declarations}
            if discarded:
                logger.debug("%s discarded input keys %s", type(self).__qualname__, sorted(discarded))
        extract_fields(self._storage, data, declarations)

    @classmethod
    def readers(cls, *names: str) -> None:
        cls._declare(names, AccessMode.READ_ONLY)

    @classmethod
    def writers(cls, *names: str) -> None:
        cls._declare(names, AccessMode.WRITE_ONLY)

    @classmethod
    def accessors(cls, *names: str) -> None:
        cls._declare(names, AccessMode.READ_WRITE)

    @classmethod
    def internal_only(cls, *names: str) -> None:
        cls._declare(names, AccessMode.INTERNAL_ONLY)

    instance_variables_only = internal_only

    @classmethod
    def all_attributes(cls) -> FrozenSet[str]:
        return cls._registry.field_names(cls)

    @classmethod
    def _declare(cls, names: Iterable[str], mode: AccessMode) -> None:
        if cls is EasyAttrs:
            raise DeclarationError("Fields must be declared on a subclass of EasyAttrs")
        for name in names:
            if normalize_key(name) in _RESERVED:
                raise DeclarationError(
                    f"Field {name!r} would shadow EasyAttrs.{normalize_key(name)}",
                    details={"owner": cls.__qualname__, "name": name},
                )
        install_accessors(cls, cls._registry.declare(cls, names, mode))

    def _read(self, name: str, default: Any = None) -> Any:
        name = normalize_key(name)
        if name not in self.all_attributes():
            raise UndeclaredFieldError(name, type(self))
        return self._storage.get(name, default)

    def _write(self, name: str, value: Any) -> None:
        name = normalize_key(name)
        if name not in self.all_attributes():
            raise UndeclaredFieldError(name, type(self))
        self._storage[name] = value

    def __repr__(self) -> str:
        fields = ' '.join(f'{name}={value!r}' for name, value in self._storage.items())
        return f'<{type(self).__qualname__} {fields}>' if fields else f'<{type(self).__qualname__}>'


_RESERVED = frozenset(name for name in vars(EasyAttrs) if not name.startswith('_'))
