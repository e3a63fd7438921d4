import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional, Any, List

import openai
from openai import OpenAI, AzureOpenAI

from config.settings import Config
from utils.errors import ApiKeyNotConfigured, UpstreamError, UpstreamTimeout, MalformedCompletionContent

logger = logging.getLogger(__name__)


@dataclass
class BranchOutcome:
    """Settled result of one completion branch: raw content on success, an error kind otherwise."""

    name: str
    content: Optional[str] = None
    error: Optional[str] = None
    detail: Any = None
    time_taken: float = 0.0
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def ok(self):
        return self.error is None


def get_completion_client(config=Config):
    """Build the chat completion client, preferring Azure OpenAI when it is configured."""
    if not config.OPENAI_API_KEY:
        raise ApiKeyNotConfigured("OPENAI_API_KEY is not set")

    if config.AZURE_OPENAI_ENDPOINT and config.AZURE_DEPLOYMENT_NAME:
        return AzureOpenAI(
            api_key=config.OPENAI_API_KEY,
            api_version=config.AZURE_OPENAI_API_VERSION,
            azure_endpoint=config.AZURE_OPENAI_ENDPOINT,
        )
    return OpenAI(api_key=config.OPENAI_API_KEY)


def _model_name(config):
    if config.AZURE_OPENAI_ENDPOINT and config.AZURE_DEPLOYMENT_NAME:
        return config.AZURE_DEPLOYMENT_NAME
    return config.OPENAI_MODEL


def generate_branch(client, branch, config=Config) -> BranchOutcome:
    """Run one branch prompt. Never raises: every failure is folded into the outcome."""
    logger.info(f"Generating branch: {branch.name}")
    start_time = time.time()

    try:
        response = client.with_options(timeout=config.BRANCH_TIMEOUT_SECONDS, max_retries=0).chat.completions.create(
            model=_model_name(config),
            temperature=0.4,
            top_p=0.9,
            max_tokens=branch.max_tokens,
            response_format={"type": "json_object"},
            messages=branch.messages(),
        )
        choices = response.choices or []
        content = choices[0].message.content if choices else None
        if not content or not content.strip():
            raise MalformedCompletionContent(f"No content returned for branch '{branch.name}'")

        usage = response.usage
        time_taken = time.time() - start_time
        logger.info(f"Branch '{branch.name}' generated in {time_taken:.2f}s")
        return BranchOutcome(
            name=branch.name,
            content=content.strip(),
            time_taken=time_taken,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )

    # APITimeoutError subclasses APIConnectionError, so it must be caught first.
    except openai.APITimeoutError as e:
        return _failed(branch, UpstreamTimeout.kind, str(e), start_time)
    except openai.APIStatusError as e:
        return _failed(branch, UpstreamError.kind, {"status": e.status_code, "message": str(e)}, start_time)
    except openai.APIConnectionError as e:
        return _failed(branch, UpstreamError.kind, str(e), start_time)
    except MalformedCompletionContent as e:
        return _failed(branch, MalformedCompletionContent.kind, str(e), start_time)
    except Exception as e:
        return _failed(branch, UpstreamError.kind, f"{type(e).__name__}: {e}", start_time)


def _failed(branch, kind, detail, start_time):
    time_taken = time.time() - start_time
    logger.warning(f"Branch '{branch.name}' failed after {time_taken:.2f}s with {kind}: {detail}")
    return BranchOutcome(name=branch.name, error=kind, detail=detail, time_taken=time_taken)


def run_fan_out(client, branches, config=Config) -> List[BranchOutcome]:
    """
    Start every branch at once and wait until all have settled.

    Each branch carries its own timeout; the overall wait is bounded by the
    longest branch timeout plus a grace period, never by their sum. A branch
    still pending after that is reported as timed out.
    """
    if not branches:
        return []

    overall_timeout = config.BRANCH_TIMEOUT_SECONDS + config.FAN_OUT_GRACE_SECONDS
    executor = ThreadPoolExecutor(max_workers=len(branches), thread_name_prefix="plan-branch")
    try:
        future_to_branch = {
            executor.submit(generate_branch, client, branch, config): branch
            for branch in branches
        }
        done, not_done = wait(future_to_branch, timeout=overall_timeout)

        outcomes = {}
        for future in done:
            branch = future_to_branch[future]
            try:
                outcomes[branch.name] = future.result()
            except Exception as e:
                outcomes[branch.name] = BranchOutcome(name=branch.name, error=UpstreamError.kind, detail=str(e))
        for future in not_done:
            branch = future_to_branch[future]
            future.cancel()
            logger.warning(f"Branch '{branch.name}' did not settle within {overall_timeout:.0f}s")
            outcomes[branch.name] = BranchOutcome(
                name=branch.name, error=UpstreamTimeout.kind, detail="fan-out deadline reached", time_taken=overall_timeout
            )
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    # Keep the branch order stable for logging and merging.
    return [outcomes[branch.name] for branch in branches]
