"""
Build request for deploy-archive

All options of one archive build, validated once when the request is
created. Requests can be built in code, from CLI flags, or loaded from
a JSON file such as:

    {
      "sources": ["."],
      "output_name": "webapp.zip",
      "overwrite_existing": true,
      "ignore": ["node_modules", "src/docs/README.md"],
      "collapse_top_level_folder": true
    }
"""

import json
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BuildRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sources: List[str] = Field(
        description="The list of files and/or directories to package inside the archive. "
        "The sources should be relative to the path of the application being built.",
    )
    output_name: str = Field(description="The name of the archive file")
    overwrite_existing: bool = Field(
        default=False,
        description="Whether to overwrite the existing file; if false, an error is returned if the file exists.",
    )
    ignore: List[str] = Field(
        default_factory=list,
        description="A list of paths to files and/or directories to ignore while creating the archive. "
        "The paths should be relative to each source directory.",
    )
    collapse_top_level_folder: bool = Field(
        default=False,
        description="Whether to add the application directory to the archive or only its content; if false, "
        "the directory will be included in the archive, if true only the content will be included.",
    )

    @field_validator("sources")
    @classmethod
    def _sources_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError(
                "Sources can't be empty, please provide the path to at least one file or directory"
            )
        return v

    @field_validator("output_name")
    @classmethod
    def _output_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("output_name can't be empty")
        return v

    @classmethod
    def from_file(cls, path) -> "BuildRequest":
        """Load and validate a request from a JSON file"""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


EXAMPLE = {
    "sources": ["."],
    "output_name": "webapp.zip",
    "overwrite_existing": True,
    "ignore": ["node_modules", "src/docs/README.md"],
    "collapse_top_level_folder": True,
}


def describe() -> dict:
    """
    Documentation of the build step and each request field.

    Returns:
        Dictionary with description, input/output, example and fields
    """
    fields = {}
    for name, info in BuildRequest.model_fields.items():
        entry = {"description": info.description, "required": info.is_required()}
        if not info.is_required():
            entry["default"] = info.get_default(call_default_factory=True)
        fields[name] = entry

    return {
        "description": "Archive",
        "input": "source directory",
        "output": "zip archive",
        "example": json.dumps(EXAMPLE, indent=2),
        "fields": fields,
    }
