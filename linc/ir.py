"""The small subset of QBE intermediate language the compiler emits."""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Ret:
    """Return the word held in temporary ``tmp``."""

    tmp: int

    def __str__(self) -> str:
        return f"ret %t{self.tmp}"


@dataclass(frozen=True)
class Copy:
    """Copy an integer constant into temporary ``tmp``."""

    tmp: int
    value: int

    def __str__(self) -> str:
        return f"%t{self.tmp} =w copy {self.value}"


@dataclass(frozen=True)
class Call:
    """Call function ``name`` with temporary ``arg``, storing into ``tmp``."""

    tmp: int
    name: str
    arg: int

    def __str__(self) -> str:
        return f"%t{self.tmp} =w call ${self.name}(w %t{self.arg})"


Stmt = Union[Ret, Copy, Call]


@dataclass
class IR:
    """The body of the exported ``main`` function."""

    stmts: List[Stmt] = field(default_factory=list)

    def __str__(self) -> str:
        body = "".join(f"\n  {stmt}" for stmt in self.stmts)
        return f"export function w $main() {{\n@start{body}\n}}"