"""Length counter that silences a channel after a programmed time."""


class LengthCounter:
    """Counts down while enabled and reports when the channel must stop."""

    def __init__(self, counter_size: int) -> None:
        self.enabled = False
        self.counter = 0
        self.counter_size = counter_size

    def set_length(self, value: int) -> None:
        """Load the counter from a length register value."""
        self.counter = self.counter_size - value

    def set_enabled(self, value: int) -> None:
        """Enable or disable counting from bit 6 of ``value``."""
        self.enabled = (value & 0x40) >> 6 == 1

    def step(self) -> bool:
        """Clock the counter; return True when the channel should be disabled."""
        if self.enabled:
            self.counter = (self.counter - 1) & 0xFFFF
            if self.counter == 0:
                self.enabled = False
                return True
        return False

    def trigger(self) -> None:
        """Reload an expired counter with its full length."""
        if self.counter == 0:
            self.counter = self.counter_size