"""Pydantic v2 schemas shared between the API and its clients."""

from .demands import *  # noqa: F401,F403
from .wizard import *  # noqa: F401,F403
