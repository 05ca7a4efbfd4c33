"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field


@dataclass
class BoardModel:
    """Transport-safe representation of a tracked board: FEN piece placement + the move log."""

    placement: str
    history: list[str] = field(default_factory=list)
