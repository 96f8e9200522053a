"""Object model for the parts of a Swagger 2.0 document the dedup passes touch.

Only paths, operations and parameters are modelled explicitly. Everything
else (info, definitions, responses, vendor extensions) is carried through
as extra fields so that a loaded document dumps back out unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, model_validator

REF_PREFIX = "#/parameters/"


class Parameter(BaseModel):
    """A single parameter: either a `$ref` or an inline definition, never both."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    ref: StrictStr | None = Field(default=None, alias="$ref")
    name: StrictStr | None = None
    location: StrictStr | None = Field(default=None, alias="in")  # query / path / header / body / formData
    description: StrictStr | None = None
    required: StrictBool | None = None
    type: StrictStr | None = None
    format: StrictStr | None = None
    schema_: dict | None = Field(default=None, alias="schema")
    items: dict | None = None
    enum: list | None = None
    default: Any = None

    @model_validator(mode="after")
    def _ref_is_bare(self) -> "Parameter":
        if self.ref is None:
            return self
        others = (self.model_fields_set - {"ref"}) | set(self.model_extra or {})
        if others:
            raise ValueError(f"$ref parameter must not carry other fields: {sorted(others)}")
        return self

    @classmethod
    def reference(cls, name: str) -> "Parameter":
        """Build a bare reference to a shared definition called `name`."""
        return cls(ref=REF_PREFIX + name)

    @property
    def is_reference(self) -> bool:
        return self.ref is not None


class Operation(BaseModel):
    """One HTTP operation. Only its parameter list is interpreted."""

    model_config = ConfigDict(extra="allow")

    parameters: list[Parameter] | None = None


class PathItem(BaseModel):
    """Path-level parameters plus the seven operation slots."""

    model_config = ConfigDict(extra="allow")

    parameters: list[Parameter] | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None

    def operations(self) -> list[tuple[str, Operation]]:
        """Return (slot, operation) for every present slot, in a fixed order."""
        slots = (
            ("get", self.get),
            ("put", self.put),
            ("post", self.post),
            ("delete", self.delete),
            ("options", self.options),
            ("head", self.head),
            ("patch", self.patch),
        )
        return [(slot, op) for slot, op in slots if op is not None]


class SwaggerDoc(BaseModel):
    """Top-level Swagger 2.0 document."""

    model_config = ConfigDict(extra="allow")

    swagger: str | None = None
    paths: dict[str, PathItem] | None = None
    # `x-` vendor extensions found next to the path keys under `paths`
    path_extensions: dict[str, Any] | None = Field(default=None, exclude=True)
    parameters: dict[str, Parameter] | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_path_extensions(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("paths"), dict):
            return data
        paths = data["paths"]
        extensions = {k: v for k, v in paths.items() if isinstance(k, str) and k.startswith("x-")}
        if not extensions:
            return data
        return {
            **data,
            "paths": {k: v for k, v in paths.items() if k not in extensions},
            "path_extensions": extensions,
        }

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.path_extensions:
            data.setdefault("paths", {}).update(self.path_extensions)
        return data
