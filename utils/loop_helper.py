from typing import Callable


class LoopHelper:
    """Counts loop iterations and prints `<count> <message>` every `print_every` of them."""

    def __init__(self, print_every: int, message: str, out: Callable[[str], None] = print):
        if print_every < 1:
            raise ValueError("print_every must be >= 1")
        self.print_every = print_every
        self.message = message
        self.out = out
        self.count = 0

    def record_loop(self):
        self.count += 1
        if self.count % self.print_every == 0:
            self.out(f"{self.count} {self.message}")
