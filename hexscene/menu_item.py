"""Menu entries with a position and selected/unselected colours."""

from __future__ import annotations

from dataclasses import dataclass, field

_MAX_CHANNEL = 0xFFFF


@dataclass(frozen=True)
class Color:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= _MAX_CHANNEL:
                raise ValueError(f"colour channel {channel} out of range")


@dataclass
class MenuItem:
    """A labelled menu entry at screen coordinates in the 0..1 range."""

    label: str
    x: float
    y: float
    vao_id: int = 0
    selected: bool = False
    unselected_color: Color = field(default_factory=Color)
    selected_color: Color = field(default_factory=Color)

    def location(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def color(self) -> Color:
        return self.selected_color if self.selected else self.unselected_color

    def set_color(self, selected: bool, red: int, green: int, blue: int) -> None:
        color = Color(red, green, blue)
        if selected:
            self.selected_color = color
        else:
            self.unselected_color = color