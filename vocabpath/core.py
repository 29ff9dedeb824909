from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.access.use_cases.get_access_status_use_case import (
    GetAccessStatusUseCase,
)
from vocabpath.application.access.use_cases.get_payment_history_use_case import (
    GetPaymentHistoryUseCase,
)
from vocabpath.application.access.use_cases.record_payment_use_case import RecordPaymentUseCase
from vocabpath.application.curriculum.services.learning_path_service import LearningPathService
from vocabpath.application.curriculum.use_cases.get_area_catalog_use_case import (
    GetAreaCatalogUseCase,
)
from vocabpath.application.progression.services.section_access_service import (
    SectionAccessService,
)
from vocabpath.application.progression.use_cases.complete_module_use_case import (
    CompleteModuleUseCase,
)
from vocabpath.application.progression.use_cases.get_learning_path_use_case import (
    GetLearningPathUseCase,
)
from vocabpath.application.progression.use_cases.get_section_detail_use_case import (
    GetSectionDetailUseCase,
)
from vocabpath.application.progression.use_cases.get_test_review_use_case import (
    GetTestReviewUseCase,
)
from vocabpath.application.progression.use_cases.submit_attempt_use_case import (
    SubmitAttemptUseCase,
)
from vocabpath.config import get_settings
from vocabpath.domain.access.services.access_gate import AccessGate
from vocabpath.domain.curriculum.services.area_ranker import AreaRanker
from vocabpath.domain.curriculum.services.visibility_resolver import ContentVisibilityResolver
from vocabpath.domain.progression.services.assessment_scorer import AssessmentScorer
from vocabpath.domain.progression.services.progression_state_machine import (
    ProgressionStateMachine,
)
from vocabpath.infrastructure.access.repositories.learner_repository import LearnerRepository
from vocabpath.infrastructure.access.repositories.payment_repository import PaymentRepository
from vocabpath.infrastructure.curriculum.repositories.curriculum_repository import (
    CurriculumRepository,
    OrganizationRepository,
)
from vocabpath.infrastructure.curriculum.repositories.module_repository import ModuleRepository
from vocabpath.infrastructure.persistence.unit_of_work import SQLAlchemyUnitOfWork
from vocabpath.infrastructure.progression.repositories.attempt_repository import (
    AttemptRepository,
)
from vocabpath.infrastructure.progression.repositories.section_progress_repository import (
    SectionProgressRepository,
)


def _payment_period_months() -> int:
    return get_settings().PAYMENT_PERIOD_MONTHS


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    curriculum_repository = providers.Factory(CurriculumRepository, db=db)
    organization_repository = providers.Factory(OrganizationRepository, db=db)
    module_repository = providers.Factory(ModuleRepository, db=db)
    learner_repository = providers.Factory(LearnerRepository, db=db)
    payment_repository = providers.Factory(PaymentRepository, db=db)
    progress_repository = providers.Factory(SectionProgressRepository, db=db)
    attempt_repository = providers.Factory(AttemptRepository, db=db)
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Domain services (pure domain logic, no db)
    visibility_resolver = providers.Singleton(ContentVisibilityResolver)
    access_gate = providers.Singleton(AccessGate)
    assessment_scorer = providers.Singleton(AssessmentScorer)
    progression_state_machine = providers.Singleton(ProgressionStateMachine)
    area_ranker = providers.Singleton(AreaRanker)

    # Application services
    learner_access_service = providers.Factory(
        LearnerAccessService,
        learner_repository=learner_repository,
        organization_repository=organization_repository,
        access_gate=access_gate,
    )
    learning_path_service = providers.Factory(
        LearningPathService,
        curriculum_repository=curriculum_repository,
        visibility_resolver=visibility_resolver,
    )
    section_access_service = providers.Factory(
        SectionAccessService,
        learning_path_service=learning_path_service,
        progress_repository=progress_repository,
        state_machine=progression_state_machine,
    )

    # Curriculum module, application use cases
    get_area_catalog_use_case = providers.Factory(
        GetAreaCatalogUseCase,
        learner_access_service=learner_access_service,
        learning_path_service=learning_path_service,
        attempt_repository=attempt_repository,
        area_ranker=area_ranker,
    )

    # Progression module, application use cases
    get_learning_path_use_case = providers.Factory(
        GetLearningPathUseCase,
        learner_access_service=learner_access_service,
        learning_path_service=learning_path_service,
        progress_repository=progress_repository,
        state_machine=progression_state_machine,
    )
    get_section_detail_use_case = providers.Factory(
        GetSectionDetailUseCase,
        learner_access_service=learner_access_service,
        section_access_service=section_access_service,
        module_repository=module_repository,
    )
    submit_attempt_use_case = providers.Factory(
        SubmitAttemptUseCase,
        learner_access_service=learner_access_service,
        section_access_service=section_access_service,
        module_repository=module_repository,
        attempt_repository=attempt_repository,
        progress_repository=progress_repository,
        scorer=assessment_scorer,
        state_machine=progression_state_machine,
        uow=unit_of_work,
    )
    complete_module_use_case = providers.Factory(
        CompleteModuleUseCase,
        learner_access_service=learner_access_service,
        section_access_service=section_access_service,
        progress_repository=progress_repository,
        state_machine=progression_state_machine,
        uow=unit_of_work,
    )
    get_test_review_use_case = providers.Factory(
        GetTestReviewUseCase,
        learner_access_service=learner_access_service,
        section_access_service=section_access_service,
        module_repository=module_repository,
        attempt_repository=attempt_repository,
    )

    # Access module, application use cases
    get_access_status_use_case = providers.Factory(
        GetAccessStatusUseCase,
        learner_access_service=learner_access_service,
    )
    record_payment_use_case = providers.Factory(
        RecordPaymentUseCase,
        learner_repository=learner_repository,
        payment_repository=payment_repository,
        uow=unit_of_work,
        period_months=providers.Callable(_payment_period_months),
    )
    get_payment_history_use_case = providers.Factory(
        GetPaymentHistoryUseCase,
        learner_access_service=learner_access_service,
        payment_repository=payment_repository,
    )


container = Container()
