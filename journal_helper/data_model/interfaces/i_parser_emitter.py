# journal_helper/data_model/interfaces/i_parser_emitter.py
"""
Generic, runtime-checkable protocol for bidirectional text ↔ object converters.

This protocol models a *pair* of operations over a textual document: a
**parser** that converts the text into a domain object, and an **emitter** that
serializes such an object back to text.

### Design goals & expectations for implementers

- **Determinism:** Given the same input string, ``parse`` must produce the same
  object. Given the same object, ``emit`` must produce the same text.
- **Round trip:** ``parse(emit(obj)) == obj`` for every object ``parse`` can
  produce. ``emit(parse(s))`` is a canonical form of ``s``: comments, blank
  lines and alignment are not preserved.
- **Order preservation:** ``parse`` keeps items in source order.
- **Errors:** On malformed input raise ``ValueError`` (or a documented
  subclass) with actionable context such as the line number.

Note: This is a **structural** type (``typing.Protocol``). Any class with
matching attributes/methods is considered compatible without explicit
inheritance.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IParserEmitter(Protocol[T]):
    """
    Runtime-checkable protocol for paired parser/emitter implementations.

    Attributes
    ----------
    file_format : str
        Identifier of the textual format handled by this implementation,
        used for labeling and dispatch at call sites.
    """

    file_format: str

    def parse(self, unparsed_string: str) -> T:
        """
        Parse a complete textual document.

        Parameters
        ----------
        unparsed_string : str
            The full contents of the source document. Line endings ``\\n``
            and ``\\r\\n`` are treated equivalently; no other character ends a
            line.

        Raises
        ------
        ValueError
            If the input cannot be parsed due to malformed content.
        """
        ...

    def emit(self, obj: T) -> str:
        """
        Serialize ``obj`` into a single textual document using ``\\n`` line
        endings. Implementations must not mutate ``obj``.
        """
        ...
