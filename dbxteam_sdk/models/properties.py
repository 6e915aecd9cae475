"""Property template records and the properties/template/* route shapes."""

from typing import Annotated, Literal

from pydantic import Field

from dbxteam_sdk._internal.dispatch.models import TaggedModel, WireModel


class PropertyType(TaggedModel):
    tag: Literal["string", "other"] = Field(alias=".tag")


class PropertyFieldTemplate(WireModel):
    name: str
    description: str
    type: PropertyType


class PropertyGroupTemplate(WireModel):
    name: str
    description: str
    fields: list[PropertyFieldTemplate]


class AddPropertyTemplateArg(PropertyGroupTemplate):
    pass


class AddPropertyTemplateResult(WireModel):
    template_id: str


class GetPropertyTemplateArg(WireModel):
    template_id: str


class GetPropertyTemplateResult(PropertyGroupTemplate):
    pass


class ListPropertyTemplateIds(WireModel):
    template_ids: list[str]


class UpdatePropertyTemplateArg(WireModel):
    template_id: str
    name: str | None = None
    description: str | None = None
    add_fields: list[PropertyFieldTemplate] | None = None


class UpdatePropertyTemplateResult(WireModel):
    template_id: str


# =============================================================================
# Errors
# =============================================================================


class TemplateNotFound(TaggedModel):
    tag: Literal["template_not_found"] = Field(default="template_not_found", alias=".tag")
    template_not_found: str


class PropertyTemplateFailure(TaggedModel):
    tag: Literal["restricted_content", "other"] = Field(alias=".tag")


class ModifyPropertyTemplateFailure(TaggedModel):
    tag: Literal[
        "restricted_content",
        "other",
        "conflicting_property_names",
        "too_many_properties",
        "too_many_templates",
        "template_attribute_too_large",
    ] = Field(alias=".tag")


PropertyTemplateError = Annotated[
    TemplateNotFound | PropertyTemplateFailure,
    Field(discriminator="tag"),
]

ModifyPropertyTemplateError = Annotated[
    TemplateNotFound | ModifyPropertyTemplateFailure,
    Field(discriminator="tag"),
]
