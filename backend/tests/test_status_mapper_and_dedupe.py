import pytest

from order_timeline.constants.statuses import RawStatus, Role, StepState, TransactionKind
from order_timeline.timeline import build_timeline
from order_timeline.timeline.badges import STATUS_CONFIGS, badge_for, status_config_for
from order_timeline.timeline.dedupe import dedupe
from order_timeline.timeline.mapper import raw_candidates, resolve
from order_timeline.timeline.types import Step


@pytest.mark.parametrize("raw", ["confirmed", "scheduled"])
def test_resolve_collapses_alias_by_role(raw):
    assert resolve(raw, Role.BUYER) == "confirmed"
    assert resolve(raw, Role.SELLER) == "scheduled"


def test_resolve_passes_everything_else_through():
    assert resolve("shipped", Role.SELLER) == "shipped"
    assert resolve(RawStatus.NO_SHOW, Role.BUYER) == "no_show"
    assert resolve("not-a-status", Role.BUYER) == "not-a-status"
    assert resolve(None, Role.BUYER) == ""


@pytest.mark.parametrize("role", list(Role))
@pytest.mark.parametrize("raw", [s.value for s in RawStatus])
def test_resolve_round_trips_through_raw_candidates(raw, role):
    assert raw in raw_candidates(resolve(raw, role), role)


@pytest.mark.parametrize("raw", [s.value for s in RawStatus])
def test_buyer_sees_confirmed_iff_raw_is_aliased(raw):
    assert (resolve(raw, Role.BUYER) == "confirmed") == (raw in {"confirmed", "scheduled"})


def _s(step_id, state):
    return Step(id=step_id, label=step_id.title(), state=state, description="")


def test_dedupe_keeps_first_occurrence_and_order():
    steps = [
        _s("a", StepState.COMPLETED),
        _s("b", StepState.CURRENT),
        _s("a", StepState.SKIPPED),
        _s("c", StepState.FUTURE),
    ]

    out = dedupe(steps)

    assert [(s.id, s.state) for s in out] == [
        ("a", StepState.COMPLETED),
        ("b", StepState.CURRENT),
        ("c", StepState.FUTURE),
    ]


@pytest.mark.parametrize("later", [StepState.CURRENT, StepState.COMPLETED])
def test_dedupe_upgrades_future_step(later):
    out = dedupe([_s("a", StepState.FUTURE), _s("b", StepState.FUTURE), _s("a", later)])

    assert [(s.id, s.state) for s in out] == [("a", later), ("b", StepState.FUTURE)]


def test_dedupe_does_not_downgrade_or_upgrade_non_future():
    out = dedupe([_s("a", StepState.SKIPPED), _s("a", StepState.CURRENT)])

    assert out == (_s("a", StepState.SKIPPED),)


def test_badge_labels():
    assert badge_for("confirmed").label == "Status: Confirmed"
    assert badge_for("in_progress").label == "Status: Service in Progress"
    assert badge_for("whatever").label == "Status: Unknown Status"


def test_status_config_is_role_specific():
    buyer = status_config_for(TransactionKind.SERVICE, Role.BUYER, "requested")
    seller = status_config_for(TransactionKind.SERVICE, Role.SELLER, "requested")

    assert "cancel" in buyer.actions
    assert "accept" in seller.actions
    assert status_config_for(TransactionKind.PRODUCT, Role.BUYER, "shipped").actions == ("track", "view_details")


def test_product_seller_gets_seller_copy_and_actions():
    buyer = status_config_for(TransactionKind.PRODUCT, Role.BUYER, "pending")
    seller = status_config_for(TransactionKind.PRODUCT, Role.SELLER, "pending")

    assert seller != buyer
    assert seller.title == "Awaiting Action"
    assert seller.actions == ("accept", "decline", "message")


def test_shipped_product_seller_config_through_engine():
    cfg = build_timeline("shipped", TransactionKind.PRODUCT, Role.SELLER).status_config

    assert cfg.description == "Order is on its way to customer"
    assert "add_tracking" in cfg.actions
    assert not {"track", "reorder", "review", "cancel"} & set(cfg.actions)


def test_status_config_actions_stay_within_vocabulary():
    vocabulary = {
        "cancel", "reschedule", "message", "view_details", "review", "track",
        "reorder", "accept", "decline", "add_tracking", "mark_shipped",
    }
    used = {
        action
        for configs in STATUS_CONFIGS.values()
        for cfg in configs.values()
        for action in cfg.actions
    }

    assert used <= vocabulary
