from typing import Any, Iterable

from .types import AccessMode, FieldDeclaration


class HiddenField:
    """ Blocks outside access to an internal-only field, inherited accessors included """

    def __init__(self, name: str):
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        raise AttributeError(f"{(owner or type(instance)).__name__!r} field {self.name!r} is internal")

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"{type(instance).__name__!r} field {self.name!r} is internal")

    def __delete__(self, instance: Any) -> None:
        raise AttributeError(f"{type(instance).__name__!r} field {self.name!r} is internal")


def build_accessor(name: str, mode: AccessMode) -> property | HiddenField:
    if not mode.public:
        return HiddenField(name)

    fget = fset = None
    if mode.readable:
        def fget(self) -> Any:
            return self._storage.get(name)
    if mode.writable:
        def fset(self, value: Any) -> None:
            self._storage[name] = value

    return property(fget, fset, doc=f"{name} ({mode.value})")


def install_accessors(owner: type, declarations: Iterable[FieldDeclaration]) -> None:
    for declaration in declarations:
        setattr(owner, declaration.name, build_accessor(declaration.name, declaration.mode))
