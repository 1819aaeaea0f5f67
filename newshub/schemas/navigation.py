"""Messages exchanged over the navigation header socket."""

from typing import Literal

from pydantic import BaseModel


class HeaderEvent(BaseModel):
    """Client -> server UI event."""

    type: Literal["logo_click"]


class NavigateCommand(BaseModel):
    """Server -> client route change."""

    type: Literal["navigate"] = "navigate"
    path: str
