# binary_mlm/utils/sponsor_resolver.py
"""
Sponsor lookup shared by the orchestrator and the upline walk.
"""
from typing import Iterable, Optional

from models import User


def resolveSponsor(sponsorRef: Optional[str], users: Iterable[User]) -> Optional[User]:
    """
    Find the user a sponsor reference points to.

    The reference matches a user's userID exactly, or their referralCode
    ignoring case. The first match in iteration order wins.
    """
    if not sponsorRef:
        return None

    refUpper = sponsorRef.upper()
    for user in users:
        if user.userID == sponsorRef:
            return user
        if user.referralCode and user.referralCode.upper() == refUpper:
            return user

    return None
