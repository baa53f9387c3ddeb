"""User preference models for the Roster Book application."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..utils.constants import DEFAULT_ADDRESS_BOOK_PATH, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH


@dataclass(frozen=True)
class GuiSettings:
    """Window geometry remembered between sessions."""
    window_width: float = DEFAULT_WINDOW_WIDTH
    window_height: float = DEFAULT_WINDOW_HEIGHT
    window_x: Optional[int] = None
    window_y: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "windowWidth": self.window_width,
            "windowHeight": self.window_height,
            "windowCoordinates": (
                {"x": self.window_x, "y": self.window_y}
                if self.window_x is not None and self.window_y is not None else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GuiSettings":
        """Create from dictionary for JSON deserialization."""
        if not isinstance(data, dict):
            return cls()
        coordinates = data.get("windowCoordinates")
        if not isinstance(coordinates, dict):
            coordinates = {}
        return cls(
            window_width=float(data.get("windowWidth", DEFAULT_WINDOW_WIDTH)),
            window_height=float(data.get("windowHeight", DEFAULT_WINDOW_HEIGHT)),
            window_x=coordinates.get("x"),
            window_y=coordinates.get("y"),
        )


@dataclass
class UserPrefs:
    """
    Incidental user state kept alongside the roster.

    Attributes:
        gui_settings: Remembered window geometry
        address_book_file_path: Where the roster JSON file lives
    """
    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    address_book_file_path: str = DEFAULT_ADDRESS_BOOK_PATH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guiSettings": self.gui_settings.to_dict(),
            "addressBookFilePath": self.address_book_file_path,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "UserPrefs":
        if not data:
            return cls()
        return cls(
            gui_settings=GuiSettings.from_dict(data.get("guiSettings")),
            address_book_file_path=data.get("addressBookFilePath") or DEFAULT_ADDRESS_BOOK_PATH,
        )
