from graveyard.database.models import NewDeath
from graveyard.database.repositories.deaths_repository import DeathsRepository
from graveyard.ingestion.assembler import extract_death_payload
from graveyard.ingestion.business_rules import BusinessRuleValidator
from graveyard.ingestion.field_policy import FieldPolicy
from graveyard.ingestion.fingerprint import compute_fingerprint
from graveyard.ingestion.loadout import LOADOUT_WIDTH, LoadoutPadding
from graveyard.ingestion.parser import parse_save_text
from graveyard.ingestion.validator import validate_save_document
from graveyard.logging.logger import Log
from graveyard.submission.exceptions import DuplicateSubmissionError, PersistenceError
from graveyard.submission.models import SubmissionStatus
from graveyard.submission.pipeline import SubmissionContext, SubmissionStep


class ParseDocumentStep(SubmissionStep):
    def __init__(self, reject_scientific_notation: bool = True) -> None:
        self._reject_scientific_notation = reject_scientific_notation

    def run(self, context: SubmissionContext) -> SubmissionContext:
        context.document = parse_save_text(
            context.raw_text,
            reject_scientific_notation=self._reject_scientific_notation,
        )
        Log.info(f"Parsed save of {len(context.raw_text)} chars")
        return context


class ValidateStructureStep(SubmissionStep):
    def run(self, context: SubmissionContext) -> SubmissionContext:
        context.document = validate_save_document(context.document)
        Log.info(
            f"Save passed structural validation with "
            f"{len(context.document['pastRunsData'])} runs"
        )
        return context


class ExtractPayloadStep(SubmissionStep):
    def __init__(
        self,
        policy: FieldPolicy,
        loadout_padding: LoadoutPadding = "omit",
        loadout_width: int = LOADOUT_WIDTH,
        require_top_level_fields: bool = True,
    ) -> None:
        self._policy = policy
        self._loadout_padding = loadout_padding
        self._loadout_width = loadout_width
        self._require_top_level_fields = require_top_level_fields

    def run(self, context: SubmissionContext) -> SubmissionContext:
        if context.document is None:
            raise ValueError("SubmissionContext.document must be set before extraction")
        context.payload = extract_death_payload(
            context.document,
            policy=self._policy,
            loadout_padding=self._loadout_padding,
            loadout_width=self._loadout_width,
            require_top_level_fields=self._require_top_level_fields,
        )
        Log.info(
            f"Extracted death payload: level {context.payload.level}, "
            f"{len(context.payload.skill_ids)} skills",
            policy=self._policy.version,
        )
        return context


class ApplyBusinessRulesStep(SubmissionStep):
    def __init__(self, rules: BusinessRuleValidator) -> None:
        self._rules = rules

    def run(self, context: SubmissionContext) -> SubmissionContext:
        if context.payload is None:
            raise ValueError("SubmissionContext.payload must be set before business rules")
        self._rules.validate(context.payload)
        return context


class FingerprintStep(SubmissionStep):
    def run(self, context: SubmissionContext) -> SubmissionContext:
        context.fingerprint = compute_fingerprint(context.submitter.user_id, context.raw_text)
        Log.debug(f"Computed fingerprint {context.fingerprint}")
        return context


class PersistDeathStep(SubmissionStep):
    """Insert the death; a unique-hash conflict marks the context as duplicate."""

    def __init__(self, deaths_repo: DeathsRepository) -> None:
        self._deaths_repo = deaths_repo

    def run(self, context: SubmissionContext) -> SubmissionContext:
        if context.payload is None or not context.fingerprint:
            raise ValueError(
                "SubmissionContext.payload and fingerprint must be set before persist"
            )
        death = NewDeath(
            user_id=context.submitter.user_id,
            character_name=context.character_name,
            mourned_by=context.submitter.mourned_by,
            unique_hash=context.fingerprint,
            payload=context.payload,
        )
        try:
            context.death_id = self._deaths_repo.insert_death(death)
        except DuplicateSubmissionError:
            context.death_id = self._existing_death_id(context.fingerprint)
            context.status = SubmissionStatus.DUPLICATE
            Log.info(f"Duplicate submission for user {context.submitter.user_id}")
            return context

        context.status = SubmissionStatus.SUBMITTED
        Log.info(f"Stored death {context.death_id} for user {context.submitter.user_id}")
        return context

    def _existing_death_id(self, fingerprint: str) -> str | None:
        try:
            existing = self._deaths_repo.find_by_unique_hash(fingerprint)
        except PersistenceError as exc:
            Log.warning(f"Could not look up existing death: {exc}", code=exc.code)
            return None
        return existing.id if existing is not None else None
