from typing import List

from config.marketing_tables import (
    CHANNELS_BY_MOTION,
    DEFAULT_MOTION,
    DEFAULT_BUDGET_SPLIT,
    GENERIC_KEY_ACTIONS,
    MAX_CHANNELS,
    MOTION_LABELS,
    SUCCESS_METRIC_BY_INTENT,
)
from models.marketing_plan_schema import ChannelRecord

BAND_PHRASES = {"none": "an organic-only", "low": "a low", "medium": "a medium", "high": "a high"}


def channel_templates(motion, channels_by_motion=CHANNELS_BY_MOTION):
    return channels_by_motion.get(motion) or channels_by_motion[DEFAULT_MOTION]


def build_channel_playbook(
    motion: str,
    budget_band: str,
    split=DEFAULT_BUDGET_SPLIT,
    channels_by_motion=CHANNELS_BY_MOTION,
) -> List[ChannelRecord]:
    """
    Build the channel playbook from the static motion table. No model output is
    involved, so the section is complete even when every branch fails.

    Percentages follow `split` in order; channels beyond the split are not
    listed, so the total never exceeds the sum of the split.
    """
    motion_label = MOTION_LABELS.get(motion) or MOTION_LABELS[DEFAULT_MOTION]
    templates = channel_templates(motion, channels_by_motion)[:min(MAX_CHANNELS, len(split))]

    playbook = []
    for template, percent in zip(templates, split):
        channel, intent, role = template["channel"], template["intent"], template["role"]
        playbook.append(ChannelRecord(
            channel=channel,
            intent=intent,
            role=role,
            summary=(
                f"{channel} takes the '{role.lower()}' role in the plan, reaching customers at "
                f"{intent.lower()} intent and moving them towards the main action."
            ),
            key_actions=list(GENERIC_KEY_ACTIONS),
            success_metric=SUCCESS_METRIC_BY_INTENT[intent],
            budget_percent=percent,
            why_it_works=(
                f"When the goal is for customers to {motion_label}, {channel} earns its "
                f"{percent}% share of {BAND_PHRASES.get(budget_band, 'the')} budget by covering the {intent.lower()}-intent "
                "stage of the journey."
            ),
        ))
    return playbook


def build_budget_allocation(playbook: List[ChannelRecord]) -> str:
    lines = [f"{record.channel}: {record.budget_percent}% - {record.role}" for record in playbook]
    return "Primary Allocation\n\n" + "\n".join(lines)
