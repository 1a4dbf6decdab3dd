"""
Key Event - Represents a single discrete key press.

Uses Pydantic for validation and immutability.
"""
from pydantic import BaseModel, ConfigDict, field_validator

# Symbolic key names understood by the screens and games
KEY_LEFT = 'left'
KEY_RIGHT = 'right'
KEY_UP = 'up'
KEY_DOWN = 'down'
KEY_ENTER = 'enter'
KEY_QUIT = 'q'
KEY_ESCAPE = 'escape'
KEY_BACKSPACE = 'backspace'
KEY_DELETE = 'delete'

# Aliases folded onto a single canonical name
_KEY_ALIASES = {
    'return': KEY_ENTER,
    'kp_enter': KEY_ENTER,
    'esc': KEY_ESCAPE,
    'del': KEY_DELETE,
}


class KeyEvent(BaseModel):
    """Immutable key press from any input source.

    Attributes:
        key: Symbolic key name ('left', 'enter', 'q', 'a', ...)
        timestamp: Time when the key was pressed (seconds, monotonic clock)

    Examples:
        >>> KeyEvent(key='Return', timestamp=1.0).key
        'enter'
    """
    key: str
    timestamp: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator('key')
    @classmethod
    def normalize_key(cls, v: str) -> str:
        """Lower-case the key name and fold aliases."""
        name = v.strip().lower()
        if not name:
            raise ValueError('Key name must not be empty')
        return _KEY_ALIASES.get(name, name)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    def __str__(self) -> str:
        return f"KeyEvent(key={self.key!r}, t={self.timestamp:.3f})"
