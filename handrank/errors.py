from __future__ import annotations


class HandRankError(ValueError):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


class InvalidCardFormat(HandRankError):
    def __init__(self, msg: str) -> None:
        super().__init__("INVALID_CARD", msg)


class WrongHandSize(HandRankError):
    def __init__(self, size: int) -> None:
        super().__init__("WRONG_HAND_SIZE", f"Hand must contain exactly 5 cards, got {size}")
        self.size = size


class InsufficientCards(HandRankError):
    def __init__(self, size: int) -> None:
        super().__init__("INSUFFICIENT_CARDS", f"Need at least 5 cards, got {size}")
        self.size = size


class InvalidHand(HandRankError):
    def __init__(self, label: str) -> None:
        super().__init__("DUPLICATE_CARD", f"Duplicate card: {label}")
        self.label = label
