"""Wire models for the documents returned by the OCM live-resources endpoint.

Only the fields read by the parsers are declared; everything else is ignored.
JSON nulls read as zero values: a null document or member takes its defaults,
and null list items or mapping values are dropped.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)

from hcpstatus.constants.enums import FieldValueType


def _without_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: item for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [item for item in value if item is not None]
    return value


class WireModel(BaseModel):
    """Base for decoded resource documents."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {
                key: _without_nulls(value) for key, value in data.items() if value is not None
            }
        return data


# =============================================================================
# Status feedback values
# =============================================================================


class StringFieldValue(WireModel):
    """Feedback payload carried in the ``string`` member."""

    type: str = FieldValueType.STRING.value
    string: str = ""


class IntegerFieldValue(WireModel):
    """Feedback payload carried in the ``integer`` member."""

    type: Literal["Integer"] = FieldValueType.INTEGER.value
    integer: int = 0


def _field_value_tag(value: Any) -> str:
    """Select the union member from the ``type`` tag.

    Tags other than Integer read the string payload.
    """
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if tag == FieldValueType.INTEGER.value:
        return FieldValueType.INTEGER.value
    return FieldValueType.STRING.value


FieldValue = Annotated[
    Union[
        Annotated[StringFieldValue, Tag(FieldValueType.STRING.value)],
        Annotated[IntegerFieldValue, Tag(FieldValueType.INTEGER.value)],
    ],
    Discriminator(_field_value_tag),
]


class FeedbackValue(WireModel):
    """One flattened ``name -> typed value`` status feedback entry."""

    name: str = ""
    field_value: FieldValue = Field(default_factory=StringFieldValue, alias="fieldValue")


# =============================================================================
# ManifestWork
# =============================================================================


class ObjectMeta(WireModel):
    name: str = ""
    labels: dict[str, str] = Field(default_factory=dict)


class WireCondition(WireModel):
    """A Kubernetes-style condition as it appears in resource status."""

    type: str = ""
    status: str = ""
    reason: str = ""
    message: str = ""
    last_transition_time: str = Field(default="", alias="lastTransitionTime")


class ResourceMeta(WireModel):
    group: str = ""
    kind: str = ""
    name: str = ""
    namespace: str = ""
    resource: str = ""


class StatusFeedback(WireModel):
    values: list[FeedbackValue] = Field(default_factory=list)


class ManifestCondition(WireModel):
    """Status of one resource embedded in a ManifestWork."""

    resource_meta: ResourceMeta = Field(default_factory=ResourceMeta, alias="resourceMeta")
    status_feedback: StatusFeedback = Field(
        default_factory=StatusFeedback, alias="statusFeedback"
    )


class ResourceStatus(WireModel):
    manifests: list[ManifestCondition] = Field(default_factory=list)


class ManifestWorkStatus(WireModel):
    conditions: list[WireCondition] = Field(default_factory=list)
    resource_status: ResourceStatus = Field(
        default_factory=ResourceStatus, alias="resourceStatus"
    )


class ManifestWorkDocument(WireModel):
    """A ManifestWork propagated from the service cluster."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    status: ManifestWorkStatus = Field(default_factory=ManifestWorkStatus)


# =============================================================================
# cert-manager Certificate
# =============================================================================


class CertificateSpec(WireModel):
    dns_names: list[str] = Field(default_factory=list, alias="dnsNames")


class CertificateResourceStatus(WireModel):
    conditions: list[WireCondition] = Field(default_factory=list)
    not_after: str = Field(default="", alias="notAfter")
    renewal_time: str = Field(default="", alias="renewalTime")


class CertificateDocument(WireModel):
    """A standalone cert-manager Certificate resource."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: CertificateSpec = Field(default_factory=CertificateSpec)
    status: CertificateResourceStatus = Field(default_factory=CertificateResourceStatus)
