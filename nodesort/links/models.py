"""Data models for decoded links and classified nodes."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .constants import INVALID, VALID_RULED, VALID_UNRULED


@dataclass(frozen=True)
class DecodeOk:
    remark: str


@dataclass(frozen=True)
class DecodeError:
    kind: str


DecodeResult = Union[DecodeOk, DecodeError]


@dataclass(frozen=True)
class ParsedRemark:
    country: str
    region: str
    tier: int
    sid: Optional[str] = None
    sn: Optional[int] = None
    flag: Optional[str] = None


@dataclass(frozen=True)
class RuledNode:
    status: ClassVar[str] = VALID_RULED

    id: int
    original_link: str
    remark: str
    parsed: ParsedRemark


@dataclass(frozen=True)
class UnruledNode:
    status: ClassVar[str] = VALID_UNRULED

    id: int
    original_link: str
    remark: str


@dataclass(frozen=True)
class InvalidNode:
    """A line that failed to decode or broke the naming rules.

    `remark` is kept when decoding succeeded (rule conflicts) so the node
    still orders by its label.
    """

    status: ClassVar[str] = INVALID

    id: int
    original_link: str
    error_kind: str
    error: str
    remark: Optional[str] = None


ClassifiedItem = Union[RuledNode, UnruledNode, InvalidNode]
