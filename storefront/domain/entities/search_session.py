from dataclasses import dataclass


@dataclass(frozen=True)
class SearchSessionState:
    is_visible: bool = False
    input_value: str = ""  # local mirror, never pushed to the store per keystroke
