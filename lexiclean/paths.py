"""
String <-> component conversion for POSIX and Windows path flavors.

The normalizer only ever sees component sequences; these two helpers are the
parser in front of it and the serializer behind it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .models import Component, CurDir, Normal, ParentDir, Prefix, RootDir
from .normalize import clean
from .rules import (
    CUR_DIR_TEXT,
    DEFAULT_EMPTY_PATH_POLICY,
    DEFAULT_FLAVOR,
    PARENT_DIR_TEXT,
    PRIMARY_SEPARATOR,
    SEPARATORS,
    EmptyPathPolicy,
    Flavor,
)

logger = logging.getLogger(__name__)


def _is_unc_name(segment: str) -> bool:
    return bool(segment) and segment not in (CUR_DIR_TEXT, PARENT_DIR_TEXT)


def _split_windows_prefix(raw: str) -> Tuple[Optional[Prefix], bool, str]:
    """
    Peel a drive or UNC prefix off a Windows path.

    Returns (prefix, has_root, remainder).
    """
    seps = SEPARATORS[Flavor.WINDOWS]
    sep = PRIMARY_SEPARATOR[Flavor.WINDOWS]

    if len(raw) >= 2 and raw[0] in seps and raw[1] in seps:
        body = raw[2:]
        for other in seps[1:]:
            body = body.replace(other, sep)
        server, _, rest = body.partition(sep)
        share, _, rest = rest.partition(sep)
        # Anything short of \\server\share is an ordinary rooted path.
        if _is_unc_name(server) and _is_unc_name(share):
            # UNC paths are always rooted.
            return Prefix(text=sep * 2 + server + sep + share), True, rest

    if len(raw) >= 2 and raw[1] == ":" and raw[0].isascii() and raw[0].isalpha():
        rest = raw[2:]
        return Prefix(text=raw[:2]), rest[:1] in seps, rest

    return None, raw[:1] in seps, raw


def parse(raw: str, flavor: Flavor = DEFAULT_FLAVOR) -> List[Component]:
    """Split a path string into its components.

    Repeated and trailing separators collapse. A "." is kept only as the
    leading component of a path with neither root nor prefix.
    """
    seps = SEPARATORS[flavor]
    sep = PRIMARY_SEPARATOR[flavor]

    if flavor == Flavor.WINDOWS:
        prefix, has_root, rest = _split_windows_prefix(raw)
    else:
        prefix, has_root, rest = None, raw[:1] in seps, raw

    out: List[Component] = []
    if prefix is not None:
        out.append(prefix)
    if has_root:
        out.append(RootDir())

    for other in seps[1:]:
        rest = rest.replace(other, sep)

    leading = prefix is None and not has_root
    for i, segment in enumerate(rest.split(sep)):
        if not segment:
            continue
        if segment == CUR_DIR_TEXT:
            if i == 0 and leading:
                out.append(CurDir())
        elif segment == PARENT_DIR_TEXT:
            out.append(ParentDir())
        else:
            out.append(Normal(name=segment))

    return out


def render(components: Sequence[Component], flavor: Flavor = DEFAULT_FLAVOR) -> str:
    """Join components back into a path string."""
    sep = PRIMARY_SEPARATOR[flavor]
    head = ""
    parts: List[str] = []

    for component in components:
        if isinstance(component, Prefix):
            head += component.text
        elif isinstance(component, RootDir):
            head += sep
        elif isinstance(component, CurDir):
            parts.append(CUR_DIR_TEXT)
        elif isinstance(component, ParentDir):
            parts.append(PARENT_DIR_TEXT)
        else:
            parts.append(component.name)

    return head + sep.join(parts)


def normalize_path(
    raw: str,
    flavor: Flavor = DEFAULT_FLAVOR,
    empty_policy: EmptyPathPolicy = DEFAULT_EMPTY_PATH_POLICY,
) -> str:
    """Parse, clean and re-render a path string."""
    components = parse(raw, flavor)
    cleaned, summary = clean(components, empty_policy)
    logger.debug(
        "normalized %r (%s): %d -> %d components",
        raw,
        flavor.value,
        summary.input_components,
        summary.output_components,
    )
    return render(cleaned, flavor)
