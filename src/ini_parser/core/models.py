from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ================================
# Parsed entries
# ================================


class ConfigurationEntry(BaseModel):
    """One key's values, in the order they were encountered."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["configuration"] = Field(default="configuration", alias="type")
    values: List[str] = Field(default_factory=list, alias="content")


class SectionEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["section"] = Field(default="section", alias="type")
    keys: Dict[str, ConfigurationEntry] = Field(default_factory=dict, alias="content")


# Serialized with by_alias=True this is the meta wire form:
#   {"type": "section", "content": {"key": {"type": "configuration", "content": [...]}}}
Entry = Annotated[Union[SectionEntry, ConfigurationEntry], Field(discriminator="kind")]

ResultTree = Dict[str, Entry]


# ================================
# Options + stats
# ================================


class ParseOptions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    meta: bool = False


class ParseStats(BaseModel):
    sections: int = 0
    keys: int = 0


# ================================
# CLI config (defaults only)
# ================================

DEFAULT_INDENT = 2


class OutputConfig(BaseModel):
    """
    Output defaults. Global/project/CLI overrides are merged by
    core/config.py.
    """

    indent: int = Field(default=DEFAULT_INDENT, ge=0, le=16)
    meta: bool = False


class UIConfig(BaseModel):
    color: bool = Field(
        default=True,
        description="Colorize message labels. NO_COLOR in the environment also disables color.",
    )
