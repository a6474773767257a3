"""Tagged union of the response envelopes the backend services return.

Different services (and sometimes different calls to the same service)
wrap a list in different ways.  Detection is an explicit, ordered check
producing one of the variants below; ``Unrecognized`` is the fallback and
is a value, not an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Union


class EnvelopeShape(Enum):
    SPRING_PAGE = "spring_page"
    ENVELOPED = "enveloped"
    BARE_ARRAY = "bare_array"
    RESULT_LIST = "result_list"


@dataclass(frozen=True)
class SpringPage:
    """``{content: [...], pageable: {...}, totalPages, totalElements}``.

    Pagination fields are kept raw; the normalizer decides the defaults.
    """

    items: list
    page_number: Any = None
    page_size: Any = None
    total_pages: Any = None
    total_elements: Any = None


@dataclass(frozen=True)
class Enveloped:
    """``{data: [...]}`` or ``{data: {content|items|result: [...]}}``.

    ``metadata`` comes from the top-level ``metadata`` field first, then
    from ``data.metadata``.
    """

    items: list
    metadata: dict | None = None


@dataclass(frozen=True)
class BareArray:
    items: list


@dataclass(frozen=True)
class ResultList:
    """``{result: [...]}`` as answered by the identity service."""

    items: list
    metadata: dict | None = None


@dataclass(frozen=True)
class Unrecognized:
    raw: Any = field(default=None, repr=False)


Envelope = Union[SpringPage, Enveloped, BareArray, ResultList, Unrecognized]

# Built-in detection order, first match wins.  Real responses can satisfy
# more than one shape; this order must not change.
BUILTIN_ORDER: tuple[EnvelopeShape, ...] = (
    EnvelopeShape.SPRING_PAGE,
    EnvelopeShape.ENVELOPED,
    EnvelopeShape.BARE_ARRAY,
)


# ---------------------------------------------------------------------------
# Detectors: each returns a variant or None
# ---------------------------------------------------------------------------


def _as_dict(value: Any) -> dict | None:
    return value if isinstance(value, dict) else None


def _detect_spring_page(raw: Any) -> SpringPage | None:
    body = _as_dict(raw)
    if body is None or not isinstance(body.get("content"), list):
        return None
    pageable = _as_dict(body.get("pageable")) or {}
    return SpringPage(
        items=body["content"],
        page_number=pageable.get("pageNumber"),
        page_size=pageable.get("pageSize"),
        total_pages=body.get("totalPages"),
        total_elements=body.get("totalElements"),
    )


def _detect_enveloped(raw: Any) -> Enveloped | None:
    body = _as_dict(raw)
    if body is None or body.get("data") is None:
        return None

    data = body["data"]
    items: list = []
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict):
        for key in ("content", "items", "result"):
            if isinstance(data.get(key), list):
                items = data[key]
                break

    metadata = _as_dict(body.get("metadata"))
    if metadata is None and isinstance(data, dict):
        metadata = _as_dict(data.get("metadata"))
    return Enveloped(items=items, metadata=metadata)


def _detect_bare_array(raw: Any) -> BareArray | None:
    if isinstance(raw, list):
        return BareArray(items=raw)
    return None


def _detect_result_list(raw: Any) -> ResultList | None:
    body = _as_dict(raw)
    if body is None or not isinstance(body.get("result"), list):
        return None
    return ResultList(items=body["result"], metadata=_as_dict(body.get("metadata")))


_DETECTORS: dict[EnvelopeShape, Callable[[Any], Envelope | None]] = {
    EnvelopeShape.SPRING_PAGE: _detect_spring_page,
    EnvelopeShape.ENVELOPED: _detect_enveloped,
    EnvelopeShape.BARE_ARRAY: _detect_bare_array,
    EnvelopeShape.RESULT_LIST: _detect_result_list,
}


def detect_envelope(
    raw: Any,
    extra_shapes: tuple[EnvelopeShape, ...] = (),
) -> Envelope:
    """Classify *raw* into one envelope variant.

    The built-in shapes are tried first, in ``BUILTIN_ORDER``; a resource
    may append extra shapes that are tried afterwards.
    """
    for shape in BUILTIN_ORDER + tuple(s for s in extra_shapes if s not in BUILTIN_ORDER):
        detected = _DETECTORS[shape](raw)
        if detected is not None:
            return detected
    return Unrecognized(raw=raw)
