"""Maps phone payloads onto Phone rows owned by a user."""

from typing import Iterable, List, Optional

from accounts.domain.models.phone import Phone
from accounts.domain.models.user import User
from accounts.domain.schemas.user import PhoneRequest


def to_phones(phones: Optional[Iterable[PhoneRequest]], owner: User) -> List[Phone]:
    """Copy each phone payload into a new Phone owned by `owner`, preserving order."""
    return [
        Phone(
            number=phone.number,
            citycode=phone.citycode,
            countrycode=phone.countrycode,
            user=owner,
        )
        for phone in phones or ()
    ]
