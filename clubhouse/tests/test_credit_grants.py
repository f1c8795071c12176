from __future__ import annotations

from datetime import date, datetime

import pytest

from clubhouse.app.credits import (
    CREDIT_TYPE_DESCRIPTIONS,
    CREDIT_TYPE_LABELS,
    TIER_CREDIT_ALLOCATIONS,
    CreditGrant,
    CreditType,
    MembershipTier,
    get_credits_to_create,
    get_tier_credits,
    resolve_tier,
    summarize_active_credits,
)


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("diamond", MembershipTier.DIAMOND),
        ("Diamond Membership", MembershipTier.DIAMOND),
        ("  PLATINUM  ", MembershipTier.PLATINUM),
        ("platinum membership", MembershipTier.PLATINUM),
        ("Gold", MembershipTier.GOLD),
        ("gold membership", MembershipTier.GOLD),
        ("Silver Membership", MembershipTier.SILVER),
        ("silver", MembershipTier.SILVER),
        ("Bronze", MembershipTier.SILVER),
        ("", MembershipTier.SILVER),
        (None, MembershipTier.SILVER),
        ("diamond and gold", MembershipTier.DIAMOND),
        ("Rose Gold Founders", MembershipTier.GOLD),
    ],
)
def test_resolve_tier(label, expected):
    assert resolve_tier(label) == expected


def test_tier_allocations_catalog():
    assert TIER_CREDIT_ALLOCATIONS[MembershipTier.SILVER].is_empty
    assert get_tier_credits("Gold").to_dict() == {"class": 0, "red_light": 4, "dry_cryo": 2}
    assert get_tier_credits("Platinum").to_dict() == {"class": 0, "red_light": 6, "dry_cryo": 4}
    assert get_tier_credits("Diamond").to_dict() == {"class": 10, "red_light": 10, "dry_cryo": 6}


def test_every_credit_type_has_label_and_description():
    for credit_type in CreditType:
        assert CREDIT_TYPE_LABELS[credit_type]
        assert CREDIT_TYPE_DESCRIPTIONS[credit_type]


def test_gold_grants_for_mid_march_start():
    grants = get_credits_to_create("gold", "user-1", "member-1", date(2024, 3, 15))

    assert [grant.credit_type for grant in grants] == [CreditType.RED_LIGHT, CreditType.DRY_CRYO]
    red_light, dry_cryo = grants
    assert (red_light.credits_total, red_light.credits_remaining) == (4, 4)
    assert (dry_cryo.credits_total, dry_cryo.credits_remaining) == (2, 2)
    for grant in grants:
        assert grant.user_id == "user-1"
        assert grant.member_id == "member-1"
        assert grant.cycle_start == date(2024, 3, 15)
        assert grant.cycle_end == date(2024, 4, 14)


@pytest.mark.parametrize("start", [date(2024, 1, 1), date(2024, 1, 31), date(2025, 6, 15)])
def test_silver_grants_nothing(start):
    assert get_credits_to_create("Silver Membership", "user-1", "member-1", start) == []


def test_unknown_tier_grants_nothing():
    assert get_credits_to_create("Guest", "user-1", "member-1", date(2024, 3, 15)) == []


def test_diamond_grants_all_three_types_in_order():
    grants = get_credits_to_create("Diamond Membership", "user-9", "member-9", date(2024, 5, 1))

    assert [(grant.credit_type, grant.credits_total, grant.credits_remaining) for grant in grants] == [
        (CreditType.CLASS, 10, 10),
        (CreditType.RED_LIGHT, 10, 10),
        (CreditType.DRY_CRYO, 6, 6),
    ]
    assert len({(grant.cycle_start, grant.cycle_end, grant.expires_at) for grant in grants}) == 1


def test_grant_record_shape():
    grant = get_credits_to_create("platinum", "user-2", "member-2", date(2024, 1, 31))[0]

    record = grant.to_record()

    assert record == {
        "user_id": "user-2",
        "member_id": "member-2",
        "credit_type": "red_light",
        "credits_total": 6,
        "credits_remaining": 6,
        "cycle_start": "2024-01-31",
        "cycle_end": "2024-02-29",
        "expires_at": "2024-02-29T23:59:59.999000",
    }


def _grant(credit_type: CreditType, expires_at: datetime, remaining: int = 1) -> CreditGrant:
    return CreditGrant(
        user_id="user-1",
        member_id="member-1",
        credit_type=credit_type,
        credits_total=5,
        credits_remaining=remaining,
        cycle_start=expires_at.date(),
        cycle_end=expires_at.date(),
        expires_at=expires_at,
    )


def test_summarize_active_credits_prefers_soonest_unexpired():
    now = datetime(2024, 3, 20, 12, 0)
    expired = _grant(CreditType.RED_LIGHT, datetime(2024, 3, 14, 23, 59))
    current = _grant(CreditType.RED_LIGHT, datetime(2024, 4, 14, 23, 59))
    later = _grant(CreditType.RED_LIGHT, datetime(2024, 5, 14, 23, 59))
    cryo = _grant(CreditType.DRY_CRYO, datetime(2024, 4, 14, 23, 59))

    active = summarize_active_credits([later, expired, current, cryo], now)

    assert active == {CreditType.RED_LIGHT: current, CreditType.DRY_CRYO: cryo}


def test_summarize_active_credits_empty_when_all_expired():
    now = datetime(2024, 6, 1)
    grants = [_grant(CreditType.CLASS, datetime(2024, 5, 31, 23, 59))]

    assert summarize_active_credits(grants, now) == {}
