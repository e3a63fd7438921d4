import logging
import time
from typing import Dict, Iterable

from pydantic import ValidationError

from config.settings import Config
from models.marketing_plan_schema import (
    AssuranceFragment,
    BranchFragment,
    BudgetSection,
    CompetitionFragment,
    ExecutionFragment,
    FoundationFragment,
    MarketingPlan,
    PlanMeta,
)
from models.plan_request_schema import PlanRequest
from services.channel_enrichment import build_budget_allocation, build_channel_playbook
from services.completion_service import BranchOutcome, run_fan_out
from services.postprocess import postprocess_plan
from services.prompt_builder import build_branch_prompts, derive_goal
from utils.errors import InternalError, MalformedCompletionContent, UpstreamTimeout
from utils.json_converter import parse_json_content

logger = logging.getLogger(__name__)

FRAGMENT_MODELS = {
    "foundation": FoundationFragment,
    "competition": CompetitionFragment,
    "execution": ExecutionFragment,
    "assurance": AssuranceFragment,
}


def decode_fragment(outcome: BranchOutcome, fragment_model=BranchFragment) -> BranchFragment:
    """Turn a branch outcome into a fragment. Any failure yields an empty fragment."""
    if not outcome.ok:
        return fragment_model()

    try:
        data = parse_json_content(outcome.content, section_name=outcome.name)
    except MalformedCompletionContent as e:
        logger.warning(f"Branch '{outcome.name}' returned malformed content: {e}")
        outcome.error, outcome.detail = MalformedCompletionContent.kind, str(e)
        return fragment_model()

    try:
        return fragment_model.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Branch '{outcome.name}' fragment failed validation: {e.error_count()} error(s)")
        outcome.error, outcome.detail = MalformedCompletionContent.kind, str(e)
        return fragment_model()


def merge_fragments(plan_request: PlanRequest, fragments: Iterable[BranchFragment], channel_playbook) -> MarketingPlan:
    """
    Merge branch fragments into one MarketingPlan. Branches own disjoint keys, so
    the merge order does not matter; keys nobody produced fall back to their
    authored defaults inside MarketingPlan.
    """
    sections: Dict[str, object] = {}
    for fragment in fragments:
        sections.update(fragment.present_sections())

    allocation = sections.pop("budget_allocation", None) or build_budget_allocation(channel_playbook)
    return MarketingPlan(
        meta=PlanMeta(
            country=plan_request.country,
            sector=plan_request.sector,
            goal=derive_goal(plan_request),
        ),
        channel_playbook=channel_playbook,
        budget=BudgetSection(band=plan_request.budget_band, allocation=allocation),
        **sections,
    )


def _log_outcomes(outcomes):
    for outcome in outcomes:
        status = "ok" if outcome.ok else outcome.error
        logger.info(
            f"Branch '{outcome.name}': {status} in {outcome.time_taken:.2f}s "
            f"(tokens in {outcome.input_tokens}, out {outcome.output_tokens})"
        )


def generate_marketing_plan(plan_request: PlanRequest, client, config=Config) -> dict:
    """
    Run the full pipeline for one validated request and return the emitted document.

    Branch failures only degrade their own sections. An unexpected error while
    assembling surfaces as UpstreamTimeout when every branch timed out, and as
    InternalError otherwise.
    """
    start_time = time.time()
    logger.info(f"Starting marketing plan for '{plan_request.product_type}' in {plan_request.country}")

    branches = build_branch_prompts(plan_request)
    outcomes = run_fan_out(client, branches, config)

    try:
        fragments = [
            decode_fragment(outcome, FRAGMENT_MODELS.get(outcome.name, BranchFragment))
            for outcome in outcomes
        ]
        _log_outcomes(outcomes)

        channel_playbook = build_channel_playbook(plan_request.motion, plan_request.budget_band, config.BUDGET_SPLIT)
        plan = merge_fragments(plan_request, fragments, channel_playbook)
        document = postprocess_plan(plan.model_dump(), plan_request.budget_band)
    except Exception as e:
        logger.error("Marketing plan assembly failed", exc_info=True)
        if outcomes and all(outcome.error == UpstreamTimeout.kind for outcome in outcomes):
            raise UpstreamTimeout("Every completion branch timed out") from e
        raise InternalError(f"{type(e).__name__}: {e}") from e

    failed = [outcome.name for outcome in outcomes if not outcome.ok]
    logger.info(
        f"Finished marketing plan in {time.time() - start_time:.2f}s "
        f"({len(outcomes) - len(failed)}/{len(outcomes)} branches ok)"
    )
    return document
