from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .rules import CUR_DIR_TEXT, PARENT_DIR_TEXT, EmptyPathPolicy, Flavor


class _Component(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class RootDir(_Component):
    kind: Literal["root_dir"] = "root_dir"


class Prefix(_Component):
    kind: Literal["prefix"] = "prefix"
    text: str = Field(min_length=1, examples=["C:"])


class CurDir(_Component):
    kind: Literal["cur_dir"] = "cur_dir"


class ParentDir(_Component):
    kind: Literal["parent_dir"] = "parent_dir"


class Normal(_Component):
    kind: Literal["normal"] = "normal"
    name: str = Field(min_length=1, examples=["foo"])

    @field_validator("name")
    @classmethod
    def _single_segment(cls, v: str) -> str:
        # "/" separates on every flavor; "\" is a legal POSIX name character.
        if v in (CUR_DIR_TEXT, PARENT_DIR_TEXT) or "/" in v:
            raise ValueError(f"{v!r} is not a single named segment")
        return v


Component = Annotated[
    Union[RootDir, Prefix, CurDir, ParentDir, Normal],
    Field(discriminator="kind"),
]

# Anchors cannot be cancelled by a following ParentDir.
ANCHORS = (RootDir, Prefix)


class ReportSummary(BaseModel):
    input_components: int = 0
    output_components: int = 0
    cur_dirs_discarded: int = 0
    normals_cancelled: int = 0
    parent_dirs_absorbed: int = 0
    parent_dirs_unresolved: int = 0
    empty_policy_applied: bool = False
    lexical: bool = True


class CleanReport(BaseModel):
    summary: ReportSummary = Field(default_factory=ReportSummary)
    flavor: Optional[Flavor] = None
    empty_policy: EmptyPathPolicy = EmptyPathPolicy.CUR_DIR


class NormalizeRequest(BaseModel):
    path: Optional[str] = Field(default=None, examples=["/foo/../bar"])
    components: Optional[List[Component]] = None
    flavor: Optional[Flavor] = None
    empty_policy: Optional[EmptyPathPolicy] = None


class NormalizeResponse(BaseModel):
    path: str
    components: List[Component]
    report: CleanReport


class HealthResponse(BaseModel):
    ok: bool = True
