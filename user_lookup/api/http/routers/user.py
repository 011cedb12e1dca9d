"""User lookup router."""

import re
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path
from loguru import logger
from pydantic import BeforeValidator

from user_lookup.api.http.deps import get_app_config, get_user_repository
from user_lookup.core.entities.user import User
from user_lookup.core.repositories.user_repo import UserRepository
from user_lookup.runtime.config.config_data import ConfigData

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def _parse_decimal_int(value: Any) -> Any:
    """Accept only an optional sign followed by ASCII digits.

    Pydantic's lax mode would otherwise turn ``"1.0"``, ``"1_0"`` or ``" 1"``
    into integers.
    """
    if isinstance(value, str):
        if not _DECIMAL_INT.fullmatch(value):
            raise ValueError("Input should be a decimal integer")
        return int(value)
    return value


router = APIRouter(tags=["users"])


@router.get("/user/{user_id}", response_model=User | None)
def find_user(
    user_id: Annotated[
        int, BeforeValidator(_parse_decimal_int), Path(ge=INT32_MIN, le=INT32_MAX)
    ],
    repository: UserRepository = Depends(get_user_repository),
    config: ConfigData = Depends(get_app_config),
) -> User | None:
    """Get a user by ID.

    Returns ``null`` with a 200 status when no user has this ID.
    """
    user = repository.find_by_id(user_id)
    if user is not None and config.users.log_found:
        logger.info("{!r}", user)
    return user
