"""Render options."""

from typing import Literal

from pydantic import BaseModel


class RenderOptions(BaseModel):
    """Options for a single render.

    `converters` selects which types would get conversion helpers. Superstruct
    validators need none, so the option is accepted for compatibility and
    does not change the output.
    """

    converters: Literal["top-level", "all-objects"] = "top-level"
