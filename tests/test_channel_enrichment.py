import pytest

from services.channel_enrichment import build_budget_allocation, build_channel_playbook


def test_playbook_is_pure_function_of_motion_and_band():
    first = build_channel_playbook("ecom_checkout", "low")
    second = build_channel_playbook("ecom_checkout", "low")
    assert [record.model_dump() for record in first] == [record.model_dump() for record in second]


def test_default_split_and_search_first():
    playbook = build_channel_playbook("ecom_checkout", "low")
    assert [record.budget_percent for record in playbook] == [35, 25, 20, 15, 5]
    assert "search" in playbook[0].channel.lower()
    assert playbook[0].intent == "High"


@pytest.mark.parametrize("motion", ["ecom_checkout", "saas_demo", "store_visit", "donation", "custom", "nonsense"])
def test_percentages_never_exceed_one_hundred(motion):
    playbook = build_channel_playbook(motion, "medium")
    assert 0 < len(playbook) <= 5
    assert sum(record.budget_percent for record in playbook) <= 100


def test_unknown_motion_uses_default_motion_channels():
    assert build_channel_playbook("nonsense", "low") == build_channel_playbook("ecom_checkout", "low")
    assert "buy online" in build_channel_playbook("nonsense", "low")[0].why_it_works


def test_custom_motion_keeps_its_own_label():
    assert "take the main action" in build_channel_playbook("custom", "low")[0].why_it_works


def test_shorter_split_limits_channel_count():
    playbook = build_channel_playbook("ecom_checkout", "low", split=(45, 30, 25))
    assert [record.budget_percent for record in playbook] == [45, 30, 25]


def test_record_content():
    record = build_channel_playbook("saas_demo", "high")[1]
    assert record.channel == "LinkedIn"
    assert record.success_metric == "Engaged visits and assisted conversions"
    assert "book a demo with sales" in record.why_it_works
    assert "a high budget" in record.why_it_works
    assert len(record.key_actions) == 4


def test_budget_allocation_text_lists_percentages():
    text = build_budget_allocation(build_channel_playbook("ecom_checkout", "low"))
    assert "Search: 35% - Capture" in text
    assert "Content/SEO: 5% - Educate" in text
