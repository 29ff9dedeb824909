"""Per-tenant overrides for shared content."""

from dataclasses import dataclass

from vocabpath.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class ContentOverride(ValueObject):
    """
    A tenant's visibility/order override for one area or section.

    Built from OrganizationAreaConfig and OrganizationSectionConfig rows.
    A sort_order of None keeps the baseline order.
    """

    is_visible: bool = True
    sort_order: int | None = None


@dataclass(frozen=True)
class EffectivePlacement(ValueObject):
    """Fully resolved visibility and order of an area or section for one tenant."""

    is_visible: bool
    sort_order: int

    @classmethod
    def resolve(cls, baseline_sort_order: int, override: ContentOverride | None) -> "EffectivePlacement":
        """
        Overlay an optional tenant override on the baseline.

        Absence of an override means visible at the baseline position.
        """
        if override is None:
            return cls(is_visible=True, sort_order=baseline_sort_order)
        sort_order = override.sort_order if override.sort_order is not None else baseline_sort_order
        return cls(is_visible=override.is_visible, sort_order=sort_order)
