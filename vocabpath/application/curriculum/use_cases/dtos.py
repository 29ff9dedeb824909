"""DTOs for curriculum use cases."""

from dataclasses import dataclass

from vocabpath.application.common.learner_context import LearnerContext
from vocabpath.domain.curriculum.services.area_ranker import AreaSummary


@dataclass
class AreaCatalog:
    """Visible areas of a learner's tenant, hot areas first."""

    context: LearnerContext
    areas: list[AreaSummary]
