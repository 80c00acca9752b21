from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union


@dataclass(frozen=True)
class User:
    """
    Registered customer. Only the registration instant matters for rollups;
    `join_date` is None when the stored value could not be parsed.
    """
    user_id: str
    join_date: Optional[Union[datetime, date]]
