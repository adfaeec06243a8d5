"""Pydantic configuration models for browser sessions."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

WaitUntil = Literal["load", "domcontentloaded", "networkidle", "commit"]


class Viewport(BaseModel):
    """Browser viewport size in CSS pixels."""

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)

    model_config = {"extra": "forbid"}

    @classmethod
    def parse(cls, value: str) -> Viewport:
        """
        Parse a viewport from a ``WIDTHxHEIGHT`` string.

        Examples:
            >>> Viewport.parse("1920x1080")
            Viewport(width=1920, height=1080)

        Raises:
            ValueError: If the string is not two positive integers joined by 'x'
        """
        parts = value.lower().strip().split("x")
        if len(parts) != 2:
            raise ValueError(f"Invalid viewport: {value}. Use format like '1920x1080'.")
        try:
            width, height = (int(p) for p in parts)
        except ValueError as err:
            raise ValueError(f"Invalid viewport: {value}. Use format like '1920x1080'.") from err
        return cls(width=width, height=height)


class LaunchConfig(BaseModel):
    """Configuration for launching a new browser."""

    headless: bool = Field(True, description="Run browser without a visible window")
    viewport: Optional[Viewport] = Field(None, description="Viewport size for new pages")
    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")
    wait_until: WaitUntil = Field("domcontentloaded", description="Navigation wait condition")

    model_config = {"extra": "forbid"}


class ConnectConfig(BaseModel):
    """Configuration for attaching to a running browser over the DevTools protocol."""

    debug_url: str = Field(..., min_length=1, description="CDP endpoint, e.g. http://localhost:9222")
    wait_until: WaitUntil = Field("domcontentloaded", description="Navigation wait condition")

    model_config = {"extra": "forbid"}
