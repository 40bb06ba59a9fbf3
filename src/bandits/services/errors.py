"""Service-layer exceptions."""


class InvariantViolation(RuntimeError):
    """Raised when the simulator reaches a state its own rules forbid.

    This signals a bug in the simulator rather than bad input and is never
    caught by the service layer.
    """


class BattleStalemateError(RuntimeError):
    """Raised when a full round changes nothing while both factions still stand."""

    def __init__(self, round_number: int) -> None:
        super().__init__(f"Stalemate after round {round_number}: no combatant can move or attack")
        self.round_number = round_number
