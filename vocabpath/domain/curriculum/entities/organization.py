"""Organization (tenant) entity."""

from dataclasses import dataclass

from vocabpath.domain.common.entity import Entity
from vocabpath.domain.common.exceptions import ValidationError
from vocabpath.domain.common.value_objects import OrganizationId


@dataclass
class Organization(Entity[OrganizationId]):
    """
    A tenant that may own private areas and override shared content.

    Business Rules:
    - Slug is unique (enforced at repository level) and non-empty
    - Inactive organizations see an empty learning path
    """

    id: OrganizationId
    name: str
    slug: str
    is_active: bool = True

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.slug or not self.slug.strip():
            raise ValidationError("Organization slug cannot be empty", field="slug")
