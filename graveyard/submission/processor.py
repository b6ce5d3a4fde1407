from collections.abc import Sequence

from graveyard.config.settings import Settings
from graveyard.database.repositories.deaths_repository import DeathsRepository
from graveyard.ingestion.business_rules import BusinessRuleValidator, default_business_rules
from graveyard.ingestion.exceptions import IngestionError
from graveyard.ingestion.field_policy import get_field_policy
from graveyard.logging.logger import Log
from graveyard.submission.exceptions import SubmissionError
from graveyard.submission.models import SubmissionResult, Submitter
from graveyard.submission.naming import sanitize_character_name
from graveyard.submission.pipeline import SubmissionContext, SubmissionStep
from graveyard.submission.steps import (
    ApplyBusinessRulesStep,
    ExtractPayloadStep,
    FingerprintStep,
    ParseDocumentStep,
    PersistDeathStep,
    ValidateStructureStep,
)


class Processor:
    """Runs one save upload through the submission pipeline.

    Pipeline: parse -> validate -> extract -> business rules -> fingerprint -> persist.
    A duplicate fingerprint is reported in the result; every other failure
    propagates to the caller with its specific exception type.
    """

    def __init__(
        self,
        steps: Sequence[SubmissionStep],
        max_name_length: int = 20,
        default_name: str = "Fallen Hero",
    ) -> None:
        self._steps = list(steps)
        self._max_name_length = max_name_length
        self._default_name = default_name

    def submit(
        self,
        raw_text: str,
        submitter: Submitter,
        character_name: str | None = None,
    ) -> SubmissionResult:
        context = SubmissionContext(
            raw_text=raw_text,
            submitter=submitter,
            character_name=sanitize_character_name(
                character_name, self._max_name_length, self._default_name
            ),
        )
        Log.info(f"Processing save upload for user {submitter.user_id}")
        try:
            for step in self._steps:
                context = step.run(context)
        except (IngestionError, SubmissionError) as exc:
            Log.warning(f"Submission rejected: {exc}", code=exc.code)
            raise

        if context.payload is None or context.status is None:
            raise RuntimeError("Submission pipeline finished without a stored outcome")
        return SubmissionResult(
            status=context.status,
            fingerprint=context.fingerprint,
            payload=context.payload,
            death_id=context.death_id,
        )


def build_steps(settings: Settings, deaths_repo: DeathsRepository) -> list[SubmissionStep]:
    return [
        ParseDocumentStep(settings.reject_scientific_notation),
        ValidateStructureStep(),
        ExtractPayloadStep(
            policy=get_field_policy(settings.field_policy_version),
            loadout_padding=settings.loadout_padding,
            loadout_width=settings.loadout_width,
            require_top_level_fields=settings.require_top_level_fields,
        ),
        ApplyBusinessRulesStep(BusinessRuleValidator(default_business_rules(settings))),
        FingerprintStep(),
        PersistDeathStep(deaths_repo),
    ]


def build_processor(
    settings: Settings,
    deaths_repo: DeathsRepository | None = None,
) -> Processor:
    """Build a Processor wired from application settings."""
    return Processor(
        steps=build_steps(settings, deaths_repo or DeathsRepository()),
        max_name_length=settings.max_character_name_length,
        default_name=settings.default_character_name,
    )
