"""
Core lexical normalization.

Responsibilities:
- drop current-dir markers
- cancel a named segment against a following parent-dir marker
- absorb parent-dir markers that reach an anchor (root or prefix)
- keep unresolved leading parent-dir markers
- apply the empty-result policy

Only the components already present in the input can appear in the output,
in the same relative order. Nothing here touches the filesystem.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .models import ANCHORS, Component, CurDir, Normal, ParentDir, ReportSummary
from .rules import DEFAULT_EMPTY_PATH_POLICY, EmptyPathPolicy


def clean(
    components: Sequence[Component],
    empty_policy: EmptyPathPolicy = DEFAULT_EMPTY_PATH_POLICY,
) -> Tuple[List[Component], ReportSummary]:
    """
    Normalize a component sequence and count what happened to it.

    Single left-to-right pass; the output list is the working stack and only
    its top entry is ever inspected.
    """
    summary = ReportSummary(input_components=len(components))

    # A lone component is already clean.
    if len(components) == 1:
        summary.output_components = 1
        return list(components), summary

    out: List[Component] = []

    for component in components:
        if isinstance(component, CurDir):
            summary.cur_dirs_discarded += 1
        elif isinstance(component, ParentDir):
            top = out[-1] if out else None
            if isinstance(top, Normal):
                out.pop()
                summary.normals_cancelled += 1
            elif top is None or isinstance(top, ParentDir):
                out.append(component)
                summary.parent_dirs_unresolved += 1
            elif isinstance(top, ANCHORS):
                summary.parent_dirs_absorbed += 1
        else:
            out.append(component)

    if not out and empty_policy == EmptyPathPolicy.CUR_DIR:
        out.append(CurDir())
        summary.empty_policy_applied = True

    summary.output_components = len(out)
    return out, summary


def normalize(
    components: Sequence[Component],
    empty_policy: EmptyPathPolicy = DEFAULT_EMPTY_PATH_POLICY,
) -> List[Component]:
    """Return the lexically cleaned form of `components` as a new list."""
    out, _ = clean(components, empty_policy)
    return out
