"""
Handler Results

Every request handler operation returns either Ok(value) or Err(error).
The caller decides how to surface an Err; nothing is raised for early return.
"""
from dataclasses import dataclass
from typing import Any, Union
from userhub.modules.errors import ApiError


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ApiError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok, Err]
