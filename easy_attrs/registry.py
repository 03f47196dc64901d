import logging
import threading
import weakref
from typing import Dict, FrozenSet, Iterable, List, Tuple

from pydantic import ValidationError

from .exceptions import DeclarationError
from .types import AccessMode, FieldDeclaration

logger = logging.getLogger(__name__)


class FieldRegistry:
    """
    Per-type record of declared fields and of the explicit parent links
    between participating types.

    Effective field sets are computed on first use and cached per type.
    Types are ordered like Python's MRO (C3 linearization over the parent
    links) and, when several of them declare one name, the first one in
    that order wins. Types are held weakly.
    """

    def __init__(self):
        self._declarations: weakref.WeakKeyDictionary[type, Dict[str, FieldDeclaration]] = weakref.WeakKeyDictionary()
        self._parents: weakref.WeakKeyDictionary[type, Tuple[type, ...]] = weakref.WeakKeyDictionary()
        self._effective: weakref.WeakKeyDictionary[type, FrozenSet[FieldDeclaration]] = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def link(self, owner: type, parents: Iterable[type]) -> None:
        with self._lock:
            self._parents[owner] = tuple(parents)
            self._declarations.setdefault(owner, {})
            self._effective.clear()

    def parents(self, owner: type) -> Tuple[type, ...]:
        return self._parents.get(owner, ())

    def declare(self, owner: type, names: Iterable[str], mode: AccessMode | str) -> List[FieldDeclaration]:
        try:
            mode = AccessMode(mode)
        except ValueError:
            raise DeclarationError(
                f"Unknown access mode {mode!r}",
                details={"owner": owner.__qualname__, "mode": mode},
            ) from None

        declared = []
        for name in names:
            try:
                declaration = FieldDeclaration(name=name, mode=mode, owner=owner)
            except ValidationError as e:
                raise DeclarationError(
                    f"Cannot declare field {name!r} on {owner.__qualname__}",
                    details={"owner": owner.__qualname__, "name": name, "errors": e.errors()},
                ) from e
            declared.append(declaration)

        with self._lock:
            own = self._declarations.setdefault(owner, {})
            for declaration in declared:
                own[declaration.name] = declaration
            # Descendants cache their ancestors' fields as well
            self._effective.clear()

        logger.debug("Declared %s as %s on %s", [d.name for d in declared], mode.value, owner.__qualname__)
        return declared

    def declarations(self, owner: type) -> FrozenSet[FieldDeclaration]:
        return frozenset(self._declarations.get(owner, {}).values())

    def effective_fields(self, owner: type) -> FrozenSet[FieldDeclaration]:
        cached = self._effective.get(owner)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._effective.get(owner)
            if cached is None:
                cached = frozenset(self._collect(owner).values())
                self._effective[owner] = cached
                logger.debug(
                    "Computed %d effective fields for %s",
                    len(cached), owner.__qualname__,
                )
        return cached

    def field_names(self, owner: type) -> FrozenSet[str]:
        return frozenset(d.name for d in self.effective_fields(owner))

    def lookup(self, owner: type, name: str) -> FieldDeclaration | None:
        for declaration in self.effective_fields(owner):
            if declaration.name == name:
                return declaration
        return None

    def linearize(self, owner: type) -> List[type]:
        """ C3 linearization of ``owner`` over the recorded parent links """
        parents = self.parents(owner)
        sequences = [self.linearize(parent) for parent in parents] + [list(parents)]
        order = [owner]
        while True:
            sequences = [seq for seq in sequences if seq]
            if not sequences:
                return order
            for seq in sequences:
                head = seq[0]
                if not any(head in other[1:] for other in sequences):
                    break
            else:
                raise DeclarationError(
                    f"Cannot order the parents of {owner.__qualname__}",
                    details={"owner": owner.__qualname__, "parents": [p.__qualname__ for p in parents]},
                )
            order.append(head)
            for seq in sequences:
                if seq[0] is head:
                    del seq[0]

    def _collect(self, owner: type) -> Dict[str, FieldDeclaration]:
        merged: Dict[str, FieldDeclaration] = {}
        for cls in reversed(self.linearize(owner)):
            merged.update(self._declarations.get(cls, {}))
        return merged


registry = FieldRegistry()
