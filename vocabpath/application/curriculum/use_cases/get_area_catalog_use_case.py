"""Use case for listing the areas a learner can browse."""

from datetime import UTC, datetime, timedelta

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.curriculum.services.learning_path_service import LearningPathService
from vocabpath.application.curriculum.use_cases.dtos import AreaCatalog
from vocabpath.application.progression.protocols.attempt_repository import (
    AttemptRepositoryProtocol,
)
from vocabpath.constants import HOT_AREA_WINDOW_DAYS
from vocabpath.domain.curriculum.services.area_ranker import AreaRanker


class GetAreaCatalogUseCase:
    """Use case for listing the areas a learner can browse."""

    def __init__(
        self,
        learner_access_service: LearnerAccessService,
        learning_path_service: LearningPathService,
        attempt_repository: AttemptRepositoryProtocol,
        area_ranker: AreaRanker,
    ) -> None:
        self.learner_access_service = learner_access_service
        self.learning_path_service = learning_path_service
        self.attempt_repository = attempt_repository
        self.area_ranker = area_ranker

    def get_areas(self, learner_id: int, now: datetime | None = None) -> AreaCatalog:
        """
        List visible areas with section counts and recent activity.

        Recent activity counts passed attempts of every learner on the
        area's visible sections over the last HOT_AREA_WINDOW_DAYS days.

        Raises:
            LearnerNotFoundError: If the learner does not exist
            AccessDeniedError: If the access gate blocks the learner
        """
        now = now or datetime.now(UTC)
        context = self.learner_access_service.authorize(learner_id, now)
        path = self.learning_path_service.resolve(context)
        completions = self.attempt_repository.count_recent_passes(
            path.section_ids, since=now - timedelta(days=HOT_AREA_WINDOW_DAYS)
        )
        return AreaCatalog(context=context, areas=self.area_ranker.rank(path, completions))
