"""Payment processor price identifiers and amounts for the club's products."""
from __future__ import annotations

from typing import Dict, Optional

from ..credits.models import MembershipTier
from .models import BillingType, ClassPassCategory, ClassPassType, Gender, MemberStatus

PriceTable = Dict[MembershipTier, Dict[BillingType, Dict[Gender, Optional[str]]]]
AmountTable = Dict[MembershipTier, Dict[BillingType, Dict[Gender, Optional[int]]]]

# Diamond is not offered for men.
MEMBERSHIP_PRICE_IDS: PriceTable = {
    MembershipTier.SILVER: {
        BillingType.MONTHLY: {
            Gender.WOMEN: "price_1Sl9llLyZrsSqLhsJhm0MdJi",
            Gender.MEN: "price_1Sl9mBLyZrsSqLhsas4CTChz",
        },
        BillingType.ANNUAL: {
            Gender.WOMEN: "price_1Sl9x2LyZrsSqLhsYLtI7doB",
            Gender.MEN: "price_1Sl9yLLyZrsSqLhsG6NiPqH5",
        },
    },
    MembershipTier.GOLD: {
        BillingType.MONTHLY: {
            Gender.WOMEN: "price_1Sl9pvLyZrsSqLhsIWyf2WwX",
            Gender.MEN: "price_1Sl9quLyZrsSqLhs6PPn9AeL",
        },
        BillingType.ANNUAL: {
            Gender.WOMEN: "price_1SlA0bLyZrsSqLhsOIdyhLo7",
            Gender.MEN: "price_1SlA11LyZrsSqLhsfSqUElkE",
        },
    },
    MembershipTier.PLATINUM: {
        BillingType.MONTHLY: {
            Gender.WOMEN: "price_1Sl9r7LyZrsSqLhs5RBuy2f7",
            Gender.MEN: "price_1Sl9roLyZrsSqLhsQCydIccE",
        },
        BillingType.ANNUAL: {
            Gender.WOMEN: "price_1SlA1cLyZrsSqLhsAXXQEqVx",
            Gender.MEN: "price_1SlA1oLyZrsSqLhstHpodZzv",
        },
    },
    MembershipTier.DIAMOND: {
        BillingType.MONTHLY: {
            Gender.WOMEN: "price_1Sl9wILyZrsSqLhsLjYqkoqq",
            Gender.MEN: None,
        },
        BillingType.ANNUAL: {
            Gender.WOMEN: "price_1SlA1zLyZrsSqLhsbJMZ0za2",
            Gender.MEN: None,
        },
    },
}

MEMBERSHIP_PRICE_AMOUNTS: AmountTable = {
    MembershipTier.SILVER: {
        BillingType.MONTHLY: {Gender.WOMEN: 200, Gender.MEN: 120},
        BillingType.ANNUAL: {Gender.WOMEN: 2400, Gender.MEN: 1440},
    },
    MembershipTier.GOLD: {
        BillingType.MONTHLY: {Gender.WOMEN: 250, Gender.MEN: 155},
        BillingType.ANNUAL: {Gender.WOMEN: 3000, Gender.MEN: 1860},
    },
    MembershipTier.PLATINUM: {
        BillingType.MONTHLY: {Gender.WOMEN: 350, Gender.MEN: 175},
        BillingType.ANNUAL: {Gender.WOMEN: 4200, Gender.MEN: 2100},
    },
    MembershipTier.DIAMOND: {
        BillingType.MONTHLY: {Gender.WOMEN: 500, Gender.MEN: None},
        BillingType.ANNUAL: {Gender.WOMEN: 6000, Gender.MEN: None},
    },
}

ANNUAL_FEE_PRICE_IDS: Dict[Gender, str] = {
    Gender.WOMEN: "price_1SlA2BLyZrsSqLhs8VX17F0C",
    Gender.MEN: "price_1SlA2RLyZrsSqLhsK3XQuANN",
}

ANNUAL_FEE_AMOUNTS: Dict[Gender, int] = {
    Gender.WOMEN: 300,
    Gender.MEN: 175,
}

CLASS_PASS_PRICE_IDS: Dict[ClassPassCategory, Dict[ClassPassType, Dict[MemberStatus, str]]] = {
    ClassPassCategory.PILATES_CYCLING: {
        ClassPassType.SINGLE: {
            MemberStatus.MEMBER: "price_1SlA2vLyZrsSqLhsBHHWlQPD",
            MemberStatus.NON_MEMBER: "price_1SlA38LyZrsSqLhsMjRhYzpT",
        },
        ClassPassType.TEN_PACK: {
            MemberStatus.MEMBER: "price_1SlA9sLyZrsSqLhsM0X8VDhN",
            MemberStatus.NON_MEMBER: "price_1SlAAJLyZrsSqLhstWGd3c8G",
        },
    },
    ClassPassCategory.OTHER_CLASSES: {
        ClassPassType.SINGLE: {
            MemberStatus.MEMBER: "price_1SlAAvLyZrsSqLhsVfY0qJgr",
            MemberStatus.NON_MEMBER: "price_1SlABFLyZrsSqLhsGOpvWGFE",
        },
        ClassPassType.TEN_PACK: {
            MemberStatus.MEMBER: "price_1SlABPLyZrsSqLhsbL0mwcit",
            MemberStatus.NON_MEMBER: "price_1SlABzLyZrsSqLhseSyKYaDD",
        },
    },
}
